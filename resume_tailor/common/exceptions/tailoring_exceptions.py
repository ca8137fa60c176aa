"""Resume tailoring exceptions."""


class TailoringError(Exception):
    """Base exception for resume tailoring failures."""

    pass


class InputValidationError(TailoringError):
    """Raised when the resume or the job description is empty."""

    pass


class AIServiceError(TailoringError):
    """Raised when the call to the AI service fails or the service reports an error."""

    pass


class EmptyResponseError(TailoringError):
    """Raised when the AI service returns no text payload."""

    def __init__(self, message: str = "No response from AI service") -> None:
        super().__init__(message)


class ResponseParseError(TailoringError):
    """Raised when the AI service payload does not match the declared result schema."""

    pass
