"""Errors for the Sudoku profiles service."""

from enum import Enum


class ProfileServiceError(RuntimeError):
    """Base class for all domain errors."""


class ErrorCode(str, Enum):
    """Named error kinds surfaced to API clients."""

    BAD_REQUEST = "BAD_REQUEST"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"


class CustomError(ProfileServiceError):
    """Raised with an error code and the HTTP status it maps to."""

    def __init__(
        self, code: ErrorCode, status_code: int = 500, detail: str = ""
    ) -> None:
        super().__init__(detail or code.value)
        self.code = code
        self.status_code = status_code


class InvalidRequestError(CustomError):
    """Raised when caller input cannot be turned into a query or a write."""

    def __init__(self, detail: str) -> None:
        super().__init__(ErrorCode.BAD_REQUEST, 400, detail)


class ProfileNotFoundError(CustomError):
    """Raised when a search matches no user active games."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.PROFILE_NOT_FOUND, 404)
