"""Custom exceptions for the suno-cli application."""


class SunoError(Exception):
    """Base exception for all suno-cli errors."""

    def __init__(self, message: str = "An error occurred with Suno CLI") -> None:
        self.message = message
        super().__init__(self.message)


class AuthError(SunoError):
    """Raised when the cookie can't be exchanged for a session or token."""

    def __init__(
        self, message: str = "Failed to get session id, you may need to update the SUNO_COOKIE."
    ) -> None:
        super().__init__(message)


class StateError(SunoError):
    """Raised when an operation needs a session that hasn't been established."""

    def __init__(self, message: str = "Session is not initialized. Call init() first.") -> None:
        super().__init__(message)


class RequestError(SunoError):
    """Raised when the service answers with a non-success status or a malformed body."""

    def __init__(self, message: str = "Request failed", status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CookieError(SunoError):
    """Raised when no Suno cookie is configured."""

    def __init__(
        self,
        message: str = "No Suno cookie configured. Set SUNO_COOKIE or create ~/.suno/credentials.json.",
    ) -> None:
        super().__init__(message)
