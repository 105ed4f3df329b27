"""Depth-bounded schema projection for progressive delivery.

A projection keeps a schema's top levels intact and replaces anything
nested below a depth ceiling with a placeholder that keeps the node's
``type`` and a description telling the caller to use ``expand_schema``.

Depth counts structural nesting only. It increases by one per step into:
- ``properties.<name>``
- ``items``
- each member of ``oneOf`` / ``anyOf`` / ``allOf``
- each member of ``definitions`` / ``$defs``

Every other keyword (``enum``, ``required``, ``minimum``, ...) is copied
verbatim and never counts towards depth.

Example (max_depth=1):
    Input:
    {
        "type": "object",
        "properties": {
            "limit": {"type": "integer"},
            "filter": {
                "type": "object",
                "description": "Structured filter",
                "properties": {"field": {"type": "string"}}
            }
        }
    }

    Output:
    {
        "type": "object",
        "properties": {
            "limit": {"type": "integer"},
            "filter": {
                "type": "object",
                "description": "Structured filter (expandable; use expand_schema to load nested properties)"
            }
        }
    }
"""

import json
import math
from typing import Any

from .nodes import DEFINITION_KEYWORDS, UNION_KEYWORDS, NodeKind, classify_node, clone_schema
from .pointer import escape_pointer_segment

OBJECT_HINT = "expandable; use expand_schema to load nested properties"
ARRAY_HINT = "items expandable; use expand_schema to load item schema"
OBJECT_PLACEHOLDER = "Expandable object; use expand_schema to load nested properties"
ARRAY_PLACEHOLDER = "Expandable array; use expand_schema to load item schema"
UNION_PLACEHOLDER = "Expandable composite schema; use expand_schema for details"


def project_schema(node: Any, max_depth: float = math.inf, depth: int = 0) -> Any:
    """
    Project a schema so nothing below ``max_depth`` keeps nested content.

    The input is not modified; the result shares no mutable containers with
    it.

    Args:
        node: Schema node to project
        max_depth: Depth ceiling; ``math.inf`` returns a full copy
        depth: Depth of ``node`` (0 for the root being projected)

    Returns:
        Projected copy of ``node``
    """
    if not isinstance(node, dict):
        return clone_schema(node)

    if depth >= max_depth:
        return _placeholder(node)

    projected: dict[str, Any] = {}
    for key, value in node.items():
        if key == "properties" and isinstance(value, dict):
            projected[key] = {
                name: project_schema(child, max_depth, depth + 1) for name, child in value.items()
            }
        elif key == "items":
            # Tuple-style items is a list of schemas, one per position
            if isinstance(value, list):
                projected[key] = [project_schema(child, max_depth, depth + 1) for child in value]
            else:
                projected[key] = project_schema(value, max_depth, depth + 1)
        elif key in UNION_KEYWORDS and isinstance(value, list):
            projected[key] = [project_schema(child, max_depth, depth + 1) for child in value]
        elif key in DEFINITION_KEYWORDS and isinstance(value, dict):
            projected[key] = {
                name: project_schema(child, max_depth, depth + 1) for name, child in value.items()
            }
        else:
            projected[key] = clone_schema(value)
    return projected


def _placeholder(node: dict[str, Any]) -> dict[str, Any]:
    """Collapse a node at the depth ceiling into its self-describing stub."""
    kind = classify_node(node)
    description = node.get("description")

    if kind is NodeKind.OBJECT:
        return {
            "type": "object",
            "description": f"{description} ({OBJECT_HINT})" if description else OBJECT_PLACEHOLDER,
        }

    if kind is NodeKind.ARRAY:
        return {
            "type": "array",
            "description": f"{description} ({ARRAY_HINT})" if description else ARRAY_PLACEHOLDER,
        }

    if kind is NodeKind.UNION:
        # The whole union collapses; branches are not projected individually
        placeholder: dict[str, Any] = {"description": UNION_PLACEHOLDER}
        if node.get("type"):
            placeholder["type"] = clone_schema(node["type"])
        return placeholder

    return clone_schema(node)


def truncate_schema(schema: Any, max_depth: float = 1) -> Any:
    """Project ``schema`` from its root with the given ceiling."""
    return project_schema(schema, max(0, max_depth), 0)


def is_placeholder(node: Any) -> bool:
    """
    Return True if ``node`` is a stub generated at the depth ceiling.

    Stubs carry only ``type`` and ``description``, and the description is
    one of the generated placeholder texts or ends with a generated hint.
    """
    if not isinstance(node, dict) or not set(node) <= {"type", "description"}:
        return False

    description = node.get("description")
    if not isinstance(description, str):
        return False

    node_type = node.get("type")
    if node_type == "object":
        return description == OBJECT_PLACEHOLDER or description.endswith(f" ({OBJECT_HINT})")
    if node_type == "array":
        return description == ARRAY_PLACEHOLDER or description.endswith(f" ({ARRAY_HINT})")
    return description == UNION_PLACEHOLDER


def find_expandable_paths(projected: Any, pointer: str = "") -> list[str]:
    """
    List pointers of placeholders in a projected schema.

    Only nodes shaped exactly like the stubs ``_placeholder`` generates are
    reported. The returned pointers can be passed to ``expand_schema``.
    """
    if not isinstance(projected, dict):
        return []

    if is_placeholder(projected):
        return [pointer or "/"]

    paths: list[str] = []
    for key in ("properties", *DEFINITION_KEYWORDS):
        children = projected.get(key)
        if isinstance(children, dict):
            for name, child in children.items():
                child_pointer = f"{pointer}/{key}/{escape_pointer_segment(name)}"
                paths.extend(find_expandable_paths(child, child_pointer))

    items = projected.get("items")
    if isinstance(items, list):
        for index, child in enumerate(items):
            paths.extend(find_expandable_paths(child, f"{pointer}/items/{index}"))
    elif items is not None:
        paths.extend(find_expandable_paths(items, f"{pointer}/items"))

    for keyword in UNION_KEYWORDS:
        branches = projected.get(keyword)
        if isinstance(branches, list):
            for index, child in enumerate(branches):
                paths.extend(find_expandable_paths(child, f"{pointer}/{keyword}/{index}"))

    return paths


def estimate_token_count(schema: Any) -> int:
    """
    Estimate token count for a schema (rough approximation).

    Uses compact JSON string length / 4 as the token estimate.

    Args:
        schema: JSON schema to estimate

    Returns:
        Estimated token count
    """
    if not schema:
        return 0

    json_str = json.dumps(schema, separators=(",", ":"))

    # Rough token estimate: 1 token ≈ 4 characters
    return len(json_str) // 4
