"""
Tests for PDFService (worksheet rendering with reportlab).
"""
import pytest

from app.core.exceptions import RenderFailure
from app.models.worksheet import WorksheetConfig
from app.services.pdf import PDFService, _sanitize_text
from app.services.worksheet_generator import generate_worksheet


def _payload(**overrides):
    data = dict(
        grade="4", term=2, topic="number",
        operations=["addition", "subtraction", "multiplication", "division"],
        min_operand=0, max_operand=999, operands_per_question=3, format="horizontal",
        question_count=36, allow_carrying=True, allow_borrowing=True,
        include_word_problems=True, include_time_limit=False,
        difficulty_mode="curriculum", seed="pdf-seed",
    )
    data.update(overrides)
    return generate_worksheet(WorksheetConfig(**data), data["seed"])


@pytest.fixture
def service():
    return PDFService(brand="Test Brand")


class TestGenerateWorksheetPdf:
    def test_returns_pdf_bytes(self, service):
        pdf = service.generate_worksheet_pdf(_payload())
        assert pdf.startswith(b"%PDF")

    def test_full_is_larger_than_student(self, service):
        payload = _payload()
        full = service.generate_worksheet_pdf(payload, pdf_type="full")
        student = service.generate_worksheet_pdf(payload, pdf_type="student")
        assert len(full) > len(student)

    def test_answer_key_only(self, service):
        assert service.generate_worksheet_pdf(_payload(), pdf_type="answer_key").startswith(b"%PDF")

    def test_unknown_pdf_type(self, service):
        with pytest.raises(RenderFailure):
            service.generate_worksheet_pdf(_payload(), pdf_type="poster")

    @pytest.mark.parametrize("fmt", ["horizontal", "vertical", "fill-blank", "multiple-choice"])
    def test_every_format_renders(self, service, fmt):
        pdf = service.generate_worksheet_pdf(_payload(format=fmt, question_count=24))
        assert pdf.startswith(b"%PDF")

    def test_time_limit_and_compact_density(self, service):
        payload = _payload(include_time_limit=True, question_count=50, grade="prep", max_operand=10)
        assert service.generate_worksheet_pdf(payload).startswith(b"%PDF")

    def test_build_errors_are_wrapped(self, service, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("layout exploded")
        monkeypatch.setattr(service, "_render", boom)
        with pytest.raises(RenderFailure) as exc_info:
            service.generate_worksheet_pdf(_payload())
        assert isinstance(exc_info.value.original_error, RuntimeError)


class TestSanitizeText:
    def test_minus_sign(self):
        assert _sanitize_text("7 − 3 =") == "7 - 3 ="

    def test_multiplication_sign_is_latin1(self):
        assert _sanitize_text("4 × 5") == "4 × 5"

    def test_unencodable_replaced(self):
        assert _sanitize_text("snow ☃") == "snow ?"

    def test_empty(self):
        assert _sanitize_text("") == ""
