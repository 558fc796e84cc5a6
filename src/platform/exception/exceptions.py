from typing import Any, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int, *, extra: Optional[dict[str, Any]] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.extra = extra or {}
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(
        self, message: str, status_code: int = 400, *, extra: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, status_code, extra=extra)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, *, extra: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, 404, extra=extra)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, *, extra: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, 409, extra=extra)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)
