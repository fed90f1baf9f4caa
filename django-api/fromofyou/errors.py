"""Domain error codes shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EXHIBITION_NOT_FOUND = "EXHIBITION_NOT_FOUND"
    INVALID_EXHIBITION_ID = "INVALID_EXHIBITION_ID"
    MALFORMED_DATE = "MALFORMED_DATE"
    INVALID_FILTER = "INVALID_FILTER"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PLACE_NOT_FOUND = "PLACE_NOT_FOUND"
    INVALID_PLACE_ID = "INVALID_PLACE_ID"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    INVALID_PROFILE_ID = "INVALID_PROFILE_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationFailedError(DomainError):
    """Raised when submitted fields break a write-time rule."""

    def __init__(self, fields: dict[str, str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Submitted data is invalid",
        )
        self.fields = fields
