"""Error taxonomy for media processing."""

from __future__ import annotations

__all__ = [
    "MediaError",
    "ConfigurationError",
    "UpstreamError",
    "ParseError",
    "FilesystemError",
]


class MediaError(Exception):
    """Base class for media core failures."""


class ConfigurationError(MediaError):
    """Raised when the provider credential is missing."""

    def __init__(self, message: str = "OpenAI API key not configured") -> None:
        super().__init__(message)


class UpstreamError(MediaError):
    """Raised when a provider answers with a non-success HTTP status."""

    def __init__(self, provider: str, status_code: int, body: str) -> None:
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider} API error: {status_code} - {body}")


class ParseError(MediaError):
    """Raised when a provider response lacks the expected field."""


class FilesystemError(MediaError):
    """Raised when the staging directory cannot be created or modified."""
