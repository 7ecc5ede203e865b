"""Errors raised while fetching and presenting a weather report."""


class SkycastError(Exception):
    """Base class for errors that end a skycast invocation."""

    exit_code = 1


class ConfigError(SkycastError):
    """Raised when configuration is missing or unreadable."""
    pass


class NetworkError(SkycastError):
    """Raised when the weather provider cannot be reached."""
    pass


class NotFoundError(SkycastError):
    """Raised when the provider does not know the requested city."""
    pass


class ApiError(SkycastError):
    """Raised when the provider answers with an unexpected HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(SkycastError):
    """Raised when the provider response does not match the expected schema."""
    pass
