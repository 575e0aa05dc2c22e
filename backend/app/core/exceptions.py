"""Exception hierarchy for worksheet generation and delivery."""
from fastapi import HTTPException, status


class MathSheetError(Exception):
    """Base exception for all application errors."""
    pass


class InvalidRangeError(MathSheetError):
    """Raised when an integer draw is requested from an empty range."""

    def __init__(self, low: int, high: int):
        self.low = low
        self.high = high
        super().__init__(f"Empty integer range [{low}, {high}]")


class MalformedInputError(MathSheetError):
    """Raised when a request body cannot be parsed as JSON."""

    def __init__(self, original_error: Exception):
        self.original_error = original_error
        super().__init__(f"Invalid JSON payload: {original_error}")

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid JSON payload", "detail": str(self.original_error)},
        )


class ConfigValidationError(MathSheetError):
    """Raised when a worksheet configuration fails schema validation."""

    def __init__(self, issues: list[dict]):
        self.issues = issues
        super().__init__(f"Invalid configuration ({len(issues)} issue(s))")

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "Invalid configuration", "issues": self.issues},
        )


class PersistenceFailure(MathSheetError):
    """Raised when a generation record cannot be stored. Never fatal."""

    def __init__(self, reason: str, original_error: Exception | None = None):
        self.reason = reason
        self.original_error = original_error
        super().__init__(f"Failed to persist worksheet: {reason}")


class RenderFailure(MathSheetError):
    """Raised when the PDF document cannot be built."""

    def __init__(self, original_error: Exception):
        self.original_error = original_error
        super().__init__(f"Failed to generate PDF: {original_error}")

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to generate PDF", "detail": str(self.original_error)},
        )
