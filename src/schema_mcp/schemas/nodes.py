"""Schema node classification and structural copying.

Schema documents stay plain JSON-compatible dicts so they can be resolved
by pointer and returned over the wire unchanged. ``classify_node`` gives
every mapping one of four kinds so the projector can dispatch on the kind
instead of probing keys inline:

- OBJECT: ``type == "object"`` (children under ``properties``)
- ARRAY: ``type == "array"`` (children under ``items``)
- UNION: carries ``oneOf``/``anyOf``/``allOf`` without an object/array type
- SCALAR: anything else, including bare values
"""

import copy
from enum import Enum
from typing import Any

UNION_KEYWORDS = ("oneOf", "anyOf", "allOf")
DEFINITION_KEYWORDS = ("definitions", "$defs")


class NodeKind(str, Enum):
    """Structural kind of a schema node."""

    SCALAR = "scalar"
    OBJECT = "object"
    ARRAY = "array"
    UNION = "union"


def is_structured(node: Any) -> bool:
    """Return True for mapping nodes, the only nodes that can be truncated."""
    return isinstance(node, dict)


def classify_node(node: Any) -> NodeKind:
    """
    Classify a schema node by its declared structure.

    A declared ``type`` wins over union keywords, so
    ``{"type": "object", "oneOf": [...]}`` is an OBJECT.

    Args:
        node: Any value found in a schema document

    Returns:
        NodeKind for the node (SCALAR for non-mappings)
    """
    if not is_structured(node):
        return NodeKind.SCALAR

    node_type = node.get("type")
    if node_type == "object":
        return NodeKind.OBJECT
    if node_type == "array":
        return NodeKind.ARRAY
    if any(keyword in node for keyword in UNION_KEYWORDS):
        return NodeKind.UNION
    return NodeKind.SCALAR


def clone_schema(value: Any) -> Any:
    """
    Deep-copy a schema document.

    Dicts and lists are rebuilt recursively; JSON scalars are immutable and
    shared. Any other value falls back to ``copy.deepcopy``.
    """
    if isinstance(value, dict):
        return {key: clone_schema(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clone_schema(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return copy.deepcopy(value)
