#!/usr/bin/env python3
"""
Worksheet PDF exporter. Run from backend/ with:
    python scripts/export_worksheet.py --grade 3 --term 2 --seed demo \\
        --out worksheet.pdf --json payload.json

Builds the curriculum configuration for a grade/term, applies any
overrides given on the command line, generates the worksheet offline
(no server, no Supabase) and writes the PDF. The same seed always
produces the same worksheet.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.exceptions import RenderFailure
from app.models.worksheet import GradeLevel, WorksheetFormat
from app.services.curriculum import curriculum_config
from app.services.pdf import PDF_TYPES, get_pdf_service
from app.services.worksheet_generator import generate_worksheet

logger = logging.getLogger("mathsheet.export")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a worksheet PDF offline.")
    parser.add_argument("--grade", required=True, choices=[g.value for g in GradeLevel])
    parser.add_argument("--term", required=True, type=int, choices=[1, 2, 3, 4])
    parser.add_argument("--seed", required=True)
    parser.add_argument("--count", type=int, default=None, help="question count (5-50)")
    parser.add_argument("--format", dest="fmt", default=None,
                        choices=[f.value for f in WorksheetFormat])
    parser.add_argument("--word-problems", action="store_true",
                        help="force word problems on")
    parser.add_argument("--pdf-type", default="full", choices=PDF_TYPES)
    parser.add_argument("--out", required=True, help="PDF output path")
    parser.add_argument("--json", dest="json_out", default=None,
                        help="also write the payload as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    updates = {"seed": args.seed}
    if args.count is not None:
        if not 5 <= args.count <= 50:
            print("--count must be between 5 and 50", file=sys.stderr)
            return 2
        updates["question_count"] = args.count
    if args.fmt:
        updates["format"] = WorksheetFormat(args.fmt)
    if args.word_problems:
        updates["include_word_problems"] = True

    config = curriculum_config(GradeLevel(args.grade), args.term).model_copy(update=updates)
    payload = generate_worksheet(config, args.seed)

    try:
        pdf_bytes = get_pdf_service().generate_worksheet_pdf(payload, pdf_type=args.pdf_type)
    except RenderFailure as e:
        logger.error("%s", e)
        return 1

    Path(args.out).write_bytes(pdf_bytes)
    print(f"Wrote {args.out} ({len(payload.questions)} questions, seed={args.seed})")

    if args.json_out:
        with open(args.json_out, "w") as f:
            json.dump(payload.model_dump(mode="json", by_alias=True), f, indent=2, ensure_ascii=False)
        print(f"Wrote {args.json_out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
