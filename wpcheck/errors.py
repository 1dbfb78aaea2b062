"""Exceptions raised by the wpcheck pipeline."""

from __future__ import annotations


class WPCheckError(Exception):
    """Base class for wpcheck failures."""

    pass


class FetchError(WPCheckError):
    """Raised when the latest version could not be obtained."""

    pass


class NetworkError(FetchError):
    """Raised when the version API is unreachable, times out or returns an error status."""

    pass


class ParseError(FetchError):
    """Raised when the version API response is malformed or lacks the version field."""

    pass


class FilesystemError(WPCheckError):
    """Raised when the scan root cannot be traversed."""

    pass
