"""PDF rendering for generated arithmetic worksheets.

Layout:
- Title, grade/term/topic subtitle, generation time
- Student / Date / (Time) / Score header fields
- Question grid sized by page density; word problems run full width
- Answer key on a new page (3-column grid)
- Footer with branding, seed and page number on every page
"""

from functools import partial
import io
from xml.sax.saxutils import escape as xml_escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle,
    PageBreak, HRFlowable, KeepTogether, XPreformatted,
)
from reportlab.lib.enums import TA_CENTER

from app.core.config import get_settings
from app.core.exceptions import RenderFailure
from app.models.worksheet import WorksheetFormat, WorksheetPayload, WorksheetQuestion
from app.services.curriculum import density_for_count
from app.skills.skill_metadata import label_for_operation


# ──────────────────────────────────────────────
# Colours
# ──────────────────────────────────────────────
_PRIMARY = colors.Color(0.15, 0.32, 0.22)       # deep forest green
_LIGHT_BG = colors.Color(0.96, 0.96, 0.94)      # warm off-white
_MUTED = colors.Color(0.55, 0.55, 0.55)         # muted grey
_RULE = colors.Color(0.82, 0.82, 0.78)          # ruled line colour

_MARGIN = 2.0 * cm
_CONTENT_WIDTH = A4[0] - 2 * _MARGIN
PDF_TYPES = ("full", "student", "answer_key")


# ──────────────────────────────────────────────
# Unicode → latin-1 safe replacements
# ──────────────────────────────────────────────
_UNICODE_REPLACEMENTS = {
    "\u2212": "-",   # minus sign
    "\u2014": "-",   # em dash (vertical answer rule)
    "\u2013": "-",   # en dash
    "\u2018": "'",   # left single quote
    "\u2019": "'",   # right single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2026": "...", # ellipsis
}


def _sanitize_text(text: str) -> str:
    """Replace Unicode characters that Helvetica/latin-1 cannot encode."""
    if not text:
        return ""
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _markup(text: str) -> str:
    return xml_escape(_sanitize_text(text))


class PDFService:
    """Service for rendering worksheet payloads as PDF documents."""

    def __init__(self, brand: str | None = None):
        self.brand = brand if brand is not None else get_settings().pdf_brand
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Paragraph styles using the built-in Helvetica and Courier families."""

        self.styles.add(ParagraphStyle(
            name='WorksheetTitle',
            fontName='Helvetica-Bold',
            fontSize=22,
            leading=26,
            spaceAfter=4,
            alignment=TA_CENTER,
            textColor=_PRIMARY,
        ))
        self.styles.add(ParagraphStyle(
            name='WorksheetSubtitle',
            fontName='Helvetica',
            fontSize=12,
            alignment=TA_CENTER,
            spaceAfter=4,
        ))
        self.styles.add(ParagraphStyle(
            name='GeneratedAt',
            fontName='Helvetica',
            fontSize=9,
            textColor=_MUTED,
            alignment=TA_CENTER,
            spaceAfter=14,
        ))
        self.styles.add(ParagraphStyle(
            name='HeaderField',
            fontName='Helvetica',
            fontSize=10,
            leading=13,
        ))
        self.styles.add(ParagraphStyle(
            name='Instructions',
            fontName='Helvetica',
            fontSize=9,
            leading=13,
            textColor=colors.Color(0.3, 0.3, 0.3),
            spaceAfter=10,
        ))
        self.styles.add(ParagraphStyle(
            name='QuestionText',
            fontName='Helvetica',
            fontSize=12,
            leading=16,
        ))
        self.styles.add(ParagraphStyle(
            name='VerticalSum',
            fontName='Courier',
            fontSize=12,
            leading=15,
            leftIndent=14,
        ))
        self.styles.add(ParagraphStyle(
            name='WordProblem',
            fontName='Helvetica',
            fontSize=11,
            leading=15,
            spaceBefore=4,
            spaceAfter=2,
        ))
        self.styles.add(ParagraphStyle(
            name='AnswerLine',
            fontName='Helvetica',
            fontSize=10,
            leading=13,
            leftIndent=18,
            spaceAfter=8,
        ))
        self.styles.add(ParagraphStyle(
            name='AnswerKeyTitle',
            fontName='Helvetica-Bold',
            fontSize=18,
            leading=22,
            textColor=_PRIMARY,
            spaceAfter=10,
        ))
        self.styles.add(ParagraphStyle(
            name='AnswerText',
            fontName='Helvetica',
            fontSize=10,
            leading=13,
            leftIndent=8,
        ))

    # ──────────────────────────────────────────
    # Main entry point
    # ──────────────────────────────────────────
    def generate_worksheet_pdf(self, payload: WorksheetPayload, pdf_type: str = "full") -> bytes:
        """Render a worksheet payload.

        Args:
            payload: Generator output.
            pdf_type: "full" (questions + answer key), "student" (questions only),
                      "answer_key" (answer key only)

        Returns:
            PDF file as bytes

        Raises:
            RenderFailure: if the document cannot be built.
        """
        if pdf_type not in PDF_TYPES:
            raise RenderFailure(ValueError(f"Unknown pdf_type {pdf_type!r}"))
        try:
            return self._render(payload, pdf_type)
        except Exception as e:
            raise RenderFailure(e) from e

    def _render(self, payload: WorksheetPayload, pdf_type: str) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=_MARGIN,
            leftMargin=_MARGIN,
            topMargin=_MARGIN,
            bottomMargin=_MARGIN,
            title="Math Worksheet",
            author=self.brand,
        )

        story = []
        questions = list(payload.questions)

        if pdf_type == "answer_key":
            self._build_answer_key(story, questions)
        else:
            self._build_questions(story, payload, questions)
            if pdf_type == "full" and questions:
                story.append(PageBreak())
                self._build_answer_key(story, questions)

        furniture = partial(self._draw_page_furniture, seed=payload.config.seed or "")
        doc.build(story, onFirstPage=furniture, onLaterPages=furniture)
        buffer.seek(0)
        return buffer.getvalue()

    # ──────────────────────────────────────────
    # Page furniture (header rule + footer)
    # ──────────────────────────────────────────
    def _draw_page_furniture(self, canvas, doc, seed: str = ""):
        """Draw the top rule and a footer with branding, seed and page number."""
        canvas.saveState()
        page_width, page_height = A4

        canvas.setStrokeColor(_PRIMARY)
        canvas.setLineWidth(1.5)
        canvas.line(_MARGIN, page_height - 1.6 * cm, page_width - _MARGIN, page_height - 1.6 * cm)

        y_footer = 1.0 * cm
        canvas.setFont('Helvetica', 7)
        canvas.setFillColor(_MUTED)
        canvas.drawString(_MARGIN, y_footer, _sanitize_text(self.brand))
        if seed:
            canvas.drawCentredString(page_width / 2, y_footer, _sanitize_text(f"Seed: {seed}"))
        canvas.drawRightString(page_width - _MARGIN, y_footer, f"Page {canvas.getPageNumber()}")

        canvas.setStrokeColor(_RULE)
        canvas.setLineWidth(0.5)
        canvas.line(_MARGIN, y_footer + 10, page_width - _MARGIN, y_footer + 10)

        canvas.restoreState()

    # ──────────────────────────────────────────
    # Questions section
    # ──────────────────────────────────────────
    def _build_questions(self, story: list, payload: WorksheetPayload, questions: list) -> None:
        config = payload.config

        story.append(Paragraph("Math Worksheet", self.styles['WorksheetTitle']))
        subtitle = (
            f"Grade {config.grade.value.upper()}  |  Term {config.term}  |  "
            f"Topic: {config.topic.value}"
        )
        story.append(Paragraph(_markup(subtitle), self.styles['WorksheetSubtitle']))
        operations = ", ".join(label_for_operation(op) for op in config.operations)
        if operations:
            story.append(Paragraph(_markup(operations), self.styles['GeneratedAt']))
        generated = payload.generated_at.strftime("%d %b %Y, %H:%M UTC")
        story.append(Paragraph(f"Generated {generated}", self.styles['GeneratedAt']))

        self._build_header_fields(story, len(questions), config.include_time_limit)
        story.append(Spacer(1, 6))
        story.append(Paragraph(
            "<b>Instructions:</b> Work out each answer and write it in the space provided.",
            self.styles['Instructions']
        ))
        story.append(HRFlowable(
            width="100%", thickness=0.5, color=_RULE,
            spaceBefore=2, spaceAfter=12,
        ))

        columns = density_for_count(len(questions)).columns
        row_buffer: list = []

        for number, question in enumerate(questions, 1):
            if question.format == WorksheetFormat.WORD:
                self._flush_grid(story, row_buffer, columns)
                row_buffer = []
                story.append(KeepTogether(self._build_word_problem(question, number)))
                continue
            row_buffer.append(self._build_grid_cell(question, number))

        self._flush_grid(story, row_buffer, columns)

    def _build_header_fields(self, story: list, num_q: int, include_time_limit: bool) -> None:
        """Build Student / Date / (Time) / Score fields as a table row."""
        cells = [
            Paragraph("Student: ______________________", self.styles['HeaderField']),
            Paragraph("Date: ____________", self.styles['HeaderField']),
        ]
        widths = [0.45, 0.30]
        if include_time_limit:
            cells.append(Paragraph("Time: ______ min", self.styles['HeaderField']))
            widths = [0.36, 0.24, 0.18]
        cells.append(Paragraph(f"Score: _____ / {num_q}", self.styles['HeaderField']))
        widths.append(1.0 - sum(widths))

        header_table = Table([cells], colWidths=[_CONTENT_WIDTH * w for w in widths])
        header_table.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('LINEBELOW', (0, 0), (-1, -1), 0.5, _RULE),
        ]))
        story.append(header_table)

    def _build_grid_cell(self, question: WorksheetQuestion, number: int) -> list:
        label = f"<b><font color='#{_PRIMARY.hexval()[2:]}'>{number}.</font></b>"
        if question.format == WorksheetFormat.VERTICAL:
            return [
                Paragraph(label, self.styles['QuestionText']),
                XPreformatted(_markup(question.prompt), self.styles['VerticalSum']),
            ]
        return [Paragraph(f"{label}  {_markup(question.prompt)}", self.styles['QuestionText'])]

    def _flush_grid(self, story: list, cells: list, columns: int) -> None:
        if not cells:
            return
        rows = []
        for start in range(0, len(cells), columns):
            row = cells[start:start + columns]
            while len(row) < columns:
                row.append('')
            rows.append(row)

        grid = Table(rows, colWidths=[_CONTENT_WIDTH / columns] * columns)
        grid.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('TOPPADDING', (0, 0), (-1, -1), 8),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 14),
            ('LEFTPADDING', (0, 0), (-1, -1), 4),
        ]))
        story.append(grid)
        story.append(Spacer(1, 6))

    def _build_word_problem(self, question: WorksheetQuestion, number: int) -> list:
        return [
            Paragraph(
                f"<b><font color='#{_PRIMARY.hexval()[2:]}'>{number}.</font></b>  "
                f"{_markup(question.prompt)}",
                self.styles['WordProblem']
            ),
            Paragraph("Answer: ______________________", self.styles['AnswerLine']),
        ]

    # ──────────────────────────────────────────
    # Answer key section
    # ──────────────────────────────────────────
    def _build_answer_key(self, story: list, questions: list) -> None:
        """Build the answer key as a 3-column grid."""
        story.append(Paragraph("Answer Key", self.styles['AnswerKeyTitle']))
        story.append(HRFlowable(
            width="100%", thickness=0.5, color=_PRIMARY,
            spaceBefore=2, spaceAfter=14,
        ))

        answer_data = []
        row = []
        for i, question in enumerate(questions, 1):
            row.append(Paragraph(
                f"<b>{i}.</b> {_markup(question.answer)}",
                self.styles['AnswerText']
            ))
            if len(row) == 3:
                answer_data.append(row)
                row = []
        if row:
            while len(row) < 3:
                row.append('')
            answer_data.append(row)

        if answer_data:
            col_w = _CONTENT_WIDTH / 3
            answer_table = Table(answer_data, colWidths=[col_w] * 3)
            answer_table.setStyle(TableStyle([
                ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                ('TOPPADDING', (0, 0), (-1, -1), 6),
                ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
                ('LEFTPADDING', (0, 0), (-1, -1), 6),
                ('GRID', (0, 0), (-1, -1), 0.4, _RULE),
                # Alternate row shading
                *[
                    ('BACKGROUND', (0, r), (-1, r), _LIGHT_BG)
                    for r in range(0, len(answer_data), 2)
                ],
            ]))
            story.append(answer_table)


def get_pdf_service() -> PDFService:
    return PDFService()
