"""AST serialization — dict/JSON round-trip for plume AST nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Loading trees produced by other GraphQL tooling, then printing them
- Caching or shipping trees between processes
- Debugging and inspection

Every node dict carries a ``kind`` discriminator. ``from_dict`` accepts
plume's own snake_case keys as well as the camelCase keys used by
graphql-js style JSON ASTs (``selectionSet``, ``typeCondition``, ...);
their ``loc`` entries are dropped.

Example:
    from plume.serialization import to_json, from_json

    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
import re
from dataclasses import fields
from typing import Any

from plume.errors import SerializationError
from plume.location import SourceLocation
from plume.nodes import NODE_TYPES, Node, OperationType

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``kind`` discriminator field for deserialization.
    Recursively serializes child nodes and SourceLocation objects.

    Args:
        node: Any plume AST node.

    Returns:
        Dict with ``kind`` and all node fields.

    """
    result: dict[str, Any] = {"kind": node.kind}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "source_name": value.source_name,
        }
    if isinstance(value, OperationType):
        return value.value
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Uses the ``kind`` discriminator to determine the node class. Keys that
    are not fields of that class are ignored.

    Args:
        data: Dict with ``kind`` and node fields (as produced by to_dict).

    Returns:
        Typed AST node (frozen dataclass).

    Raises:
        SerializationError: If ``kind`` is missing or unknown, or a required
            field is missing.

    """
    kind = data.get("kind")
    if kind is None:
        msg = "Missing 'kind' field in serialized node"
        raise SerializationError(msg)

    node_cls = NODE_TYPES.get(kind)
    if node_cls is None:
        msg = f"Unknown node kind: {kind!r}"
        raise SerializationError(msg)

    raw = {_snake_case(key): value for key, value in data.items()}
    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in raw:
            continue
        kwargs[f.name] = _deserialize_value(raw[f.name], f.name)

    try:
        return node_cls(**kwargs)
    except TypeError as exc:
        msg = f"Invalid {kind} node: {exc}"
        raise SerializationError(msg) from exc


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if field_name == "location":
        if isinstance(value, dict) and value.get("_type") == "SourceLocation":
            try:
                return SourceLocation(
                    lineno=value["lineno"],
                    col_offset=value["col_offset"],
                    offset=value.get("offset", 0),
                    end_offset=value.get("end_offset", 0),
                    source_name=value.get("source_name"),
                )
            except (KeyError, TypeError) as exc:
                msg = f"Invalid SourceLocation: {exc}"
                raise SerializationError(msg) from exc
        return None
    if field_name == "operation" and isinstance(value, str):
        try:
            return OperationType(value)
        except ValueError as exc:
            msg = f"Unknown operation type: {value!r}"
            raise SerializationError(msg) from exc
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an AST to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        node: Root of the tree to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize an AST from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        AST root node.

    Raises:
        SerializationError: If the JSON doesn't represent a node.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
