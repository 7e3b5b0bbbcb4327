"""Exception classes for plume.

Every error raised by plume derives from PlumeError. Printing has a single
failure class, malformed input, surfaced as PrintError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plume.location import SourceLocation


class PlumeError(Exception):
    """Base exception for all plume errors."""

    pass


class PrintError(PlumeError):
    """A tree could not be printed because it is malformed.

    Raised when a node kind has no rendering entry, or when strict printing
    meets an operation or fragment whose selection set is empty.
    """

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize print error with the offending node's kind and span.

        Args:
            message: Error description
            kind: Kind of the node being printed (optional)
            location: Source span of that node (optional)
        """
        self.message = message
        self.kind = kind
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")


class SerializationError(PlumeError, ValueError):
    """A dict or JSON payload does not describe a plume AST."""

    pass
