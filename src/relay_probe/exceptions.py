"""Exception hierarchy for relay-probe.

All exceptions inherit from RelayError base class.

Hierarchy:
    RelayError (base)
    ├── OpenFailure     ← input missing, inaccessible, or rejected by the sandbox
    ├── ReadFailure     ← input errored after a successful open
    └── WriteFailure    ← output sink closed, full, or rejecting

Every one of these is fatal. The relay raises them and never recovers;
only the CLI boundary turns them into a non-zero exit status.
"""

from __future__ import annotations

from typing import Any


class RelayError(Exception):
    """Base exception for all relay errors with structured context.

    Attributes:
        message: Human-readable error message
        context: Dictionary of structured error context for logging/debugging
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class OpenFailure(RelayError):
    """Input resource could not be opened.

    Raised when the path is missing, permission is denied, the path is not
    a regular readable file, or the host rejects the access.
    """


class ReadFailure(RelayError):
    """Input resource failed while reading.

    Raised when a read after a successful open reports an I/O error, so a
    host-side fault is never mistaken for end-of-resource.
    """


class WriteFailure(RelayError):
    """Output sink rejected a unit.

    Raised when the sink is closed, full, refuses the write, accepts fewer
    bytes than requested, or fails to flush.
    """
