"""Block string printing.

GraphQL block strings (``\"\"\"...\"\"\"``) are printed in the indented form,
with a leading and trailing line break around the content. A single-line
value that starts with a space or tab cannot take the leading line break:
the parser strips common indentation, which would eat that whitespace.

Example:
    >>> print_block_string("hello")
    '\"\"\"\\n  hello\\n\"\"\"'
    >>> print_block_string(" hello")
    '\"\"\" hello\\n\"\"\"'
"""

from plume.strings import indent


def print_block_string(value: str, is_description: bool = False) -> str:
    """Print value as a block string.

    Args:
        value: The raw string value
        is_description: Descriptions are printed flush, other block strings
            are indented one level so they nest under their owner

    Returns:
        The value as block string source, delimiters included.
    """
    escaped = value.replace('"""', '\\"""')
    if value[:1] in (" ", "\t") and "\n" not in value:
        # Closing delimiter on its own line, so a trailing quote in the value
        # cannot run into it.
        return f'"""{escaped}\n"""'
    body = escaped if is_description else indent(escaped)
    return f'"""\n{body}\n"""'


__all__ = ["print_block_string"]
