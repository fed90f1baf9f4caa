"""Domain errors for the exhibitions module."""

from fromofyou.errors import DomainError, ErrorCode, ValidationFailedError

__all__ = [
    "DomainError",
    "ErrorCode",
    "ExhibitionNotFoundError",
    "InvalidExhibitionIdError",
    "InvalidFilterError",
    "MalformedDateError",
    "ValidationFailedError",
]


class ExhibitionNotFoundError(DomainError):
    """Raised when an exhibition is not found."""

    def __init__(self, exhibition_id: str) -> None:
        super().__init__(
            code=ErrorCode.EXHIBITION_NOT_FOUND,
            message="Exhibition not found",
        )
        self.exhibition_id = exhibition_id


class InvalidExhibitionIdError(DomainError):
    """Raised when an exhibition ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EXHIBITION_ID,
            message="Invalid exhibition ID format",
        )


class MalformedDateError(DomainError):
    """Raised when a stored exhibition date cannot be parsed."""

    def __init__(self, record_id: str, value: object = None) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_DATE,
            message=f"Exhibition {record_id} has a malformed date",
        )
        self.record_id = record_id
        self.value = value


class InvalidFilterError(DomainError):
    """Raised when a list or calendar query parameter is invalid."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FILTER,
            message=f"Invalid value for '{parameter}'",
        )
        self.parameter = parameter
