"""Serialization: JSON round-trip for converter output.

Converts StyledDocument, StyledLine and StyledSpan to/from JSON-compatible
dicts. Useful for:
- Caching converted documents to disk
- Handing spans to a renderer in another process
- Debugging and inspection

All output is deterministic (sorted keys, enums by name).

Example:
    from tinta import convert
    from tinta.serialization import to_json, from_json

    doc = convert("# Hello **World**")
    json_str = to_json(doc)
    assert from_json(json_str) == doc

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from tinta.errors import SerializationError
from tinta.nodes import BlockType, InlineStyle, StyledDocument, StyledLine, StyledSpan

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "StyledDocument": StyledDocument,
    "StyledLine": StyledLine,
    "StyledSpan": StyledSpan,
}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "block_type": BlockType,
    "inline_style": InlineStyle,
}

Node = StyledDocument | StyledLine | StyledSpan


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an output node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: StyledDocument, StyledLine or StyledSpan.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (StyledDocument, StyledLine, StyledSpan)):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or an enum
            name is not recognized.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise SerializationError(f"Unknown node type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None and isinstance(value, str):
        try:
            return enum_cls[value]
        except KeyError:
            raise SerializationError(f"Unknown {enum_cls.__name__} member: {value!r}") from None
    return value


def to_json(doc: StyledDocument, *, indent: int | None = None) -> str:
    """Serialize a StyledDocument to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> StyledDocument:
    """Deserialize a StyledDocument from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a StyledDocument.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, StyledDocument):
        raise SerializationError(f"Expected StyledDocument, got {type(node).__name__}")
    return node
