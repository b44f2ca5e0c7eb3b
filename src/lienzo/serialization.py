"""Node serialization — JSON round-trip for Lienzo content trees.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching resolved documents (assets already embedded) between renders
- Test fixtures
- Debugging and inspection

This is Lienzo's own format, keyed by class name. It is not a reader for
the CMS delivery format.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from lienzo.serialization import to_json, from_json

    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from lienzo.errors import SerializationError
from lienzo.nodes import (
    Asset,
    AssetFile,
    Block,
    Document,
    EntityReference,
    Heading,
    Hyperlink,
    Mark,
    Paragraph,
    Text,
)

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Paragraph": Paragraph,
    "Heading": Heading,
    "Hyperlink": Hyperlink,
    "Text": Text,
    "Mark": Mark,
    "Block": Block,
    "Asset": Asset,
    "AssetFile": AssetFile,
    "EntityReference": EntityReference,
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a node (or Document, AssetFile, EntityReference) to a dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        SerializationError: If the value is not one of Lienzo's node types.
            Custom node subclasses are not serializable.

    """
    type_name = type(node).__name__
    if _NODE_TYPES.get(type_name) is not type(node):
        msg = f"Cannot serialize {type_name!r}: not a Lienzo node type"
        raise SerializationError(msg)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    msg = f"Cannot serialize field value of type {type(value).__name__!r}"
    raise SerializationError(msg)


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If data is not a dict, ``_type`` is missing or
            unknown, or a required field is absent.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized node dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise SerializationError(msg) from e


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the text is not JSON or doesn't represent a
            Document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node
