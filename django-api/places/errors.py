from fromofyou.errors import DomainError, ErrorCode


class PlaceNotFoundError(DomainError):
    """Raised when a place is not found."""

    def __init__(self, place_id: str) -> None:
        super().__init__(code=ErrorCode.PLACE_NOT_FOUND, message="Place not found")
        self.place_id = place_id


class InvalidPlaceIdError(DomainError):
    """Raised when a place ID is invalid."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_PLACE_ID, message="Invalid place ID format")
