"""Source spans attached to AST nodes.

Nodes built by a parser usually carry the span they were read from; nodes
built programmatically usually carry none. The printer never reads spans
except to prefix error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a node in the GraphQL source it was parsed from.

    Line and column are 1-indexed; offsets are 0-indexed character
    positions into the source body.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start offset in the source body
        end_offset: Absolute end offset in the source body
        source_name: Name of the source document (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'
            >>> str(SourceLocation(1, 1, source_name="schema.graphql"))
            'schema.graphql:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_name: str | None = None

    def __str__(self) -> str:
        """Format location for error messages."""
        if self.source_name:
            return f"{self.source_name}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
