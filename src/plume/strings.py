"""String-assembly helpers shared by the printer.

Every place where optional parts are combined goes through ``join`` or
``wrap`` so that absent parts never leave stray separators behind.

Example:
    >>> join(["query", "", "{ a }"], " ")
    'query { a }'
    >>> wrap("(", "", ")")
    ''
    >>> block(["a", "b"])
    '{\\n  a\\n  b\\n}'
"""

from collections.abc import Iterable

INDENT = "  "


def join(parts: Iterable[str | None] | None, separator: str = "") -> str:
    """Join the non-empty parts with separator.

    Returns an empty string for ``None`` or when every part is empty.
    """
    if not parts:
        return ""
    return separator.join(part for part in parts if part)


def block(parts: Iterable[str] | None) -> str:
    """Print each part on its own indented line inside ``{ }``.

    Returns an empty string (never ``{}``) when there are no parts.
    """
    body = join(parts, "\n")
    if not body:
        return ""
    return "{\n" + indent(body) + "\n}"


def wrap(start: str, maybe: str | None, end: str = "") -> str:
    """Surround maybe with start and end, or return "" when maybe is empty."""
    if not maybe:
        return ""
    return start + maybe + end


def indent(maybe: str | None) -> str:
    """Prefix every line of maybe with two spaces."""
    if not maybe:
        return ""
    return INDENT + maybe.replace("\n", "\n" + INDENT)


__all__ = ["INDENT", "block", "indent", "join", "wrap"]
