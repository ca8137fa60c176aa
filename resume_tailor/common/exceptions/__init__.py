from .tailoring_exceptions import (
    AIServiceError,
    EmptyResponseError,
    InputValidationError,
    ResponseParseError,
    TailoringError,
)

__all__ = [
    "AIServiceError",
    "EmptyResponseError",
    "InputValidationError",
    "ResponseParseError",
    "TailoringError",
]
