from fromofyou.errors import DomainError, ErrorCode


class ProfileNotFoundError(DomainError):
    def __init__(self, profile_id: str) -> None:
        super().__init__(code=ErrorCode.PROFILE_NOT_FOUND, message="Profile not found")
        self.profile_id = profile_id


class InvalidProfileIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_PROFILE_ID, message="Invalid profile ID format")
