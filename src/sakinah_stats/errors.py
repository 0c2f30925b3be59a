"""Error types raised by sakinah-stats."""

from __future__ import annotations


class SakinahError(Exception):
    """Base class for all sakinah-stats errors."""


class InvalidArgument(SakinahError, ValueError):
    """A caller broke a function contract (e.g. picking from an empty collection)."""


class UpstreamUnavailable(SakinahError):
    """A remote collaborator failed: network error or non-success status.

    Recoverable: callers may retry. Never cached.
    """

    retryable = True

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class CacheCorrupt(SakinahError):
    """A cached entry could not be decoded."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Corrupt cache entry: {key}")
        self.key = key
