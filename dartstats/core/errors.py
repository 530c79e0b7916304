"""
Exception hierarchy for the statistics engine and its storage boundary.
"""
from typing import Optional


class DartStatsError(Exception):
    """Base class for all dartstats errors."""


class MalformedInput(DartStatsError, ValueError):
    """A throw history entry is missing a required numeric field."""

    def __init__(self, field_name: str, detail: Optional[str] = None):
        self.field_name = field_name
        message = f"throw event field '{field_name}' is missing or invalid"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class StorageError(DartStatsError):
    """Reading or writing game records failed."""


class AccessDenied(StorageError):
    """The store refused the operation for authorization reasons."""


class TransportFailure(StorageError):
    """Any other read/write failure (unavailable store, I/O error)."""


class SaveFailed(StorageError):
    """Writing a game record failed. The cause is kept as ``__cause__``."""
