"""Schema expansion for progressive delivery.

This module implements the ``expand_schema`` operation: it resolves a JSON
Pointer inside an operation's full input or output schema and returns the
addressed sub-schema wrapped in a success/error envelope. Errors are
reported in the envelope, never raised to the transport.
"""

import math
from typing import TYPE_CHECKING, Any

from loguru import logger

from .errors import SchemaError

if TYPE_CHECKING:
    from ..registry.registry import SchemaRegistry


def expand_schema(
    registry: "SchemaRegistry",
    tool_name: str,
    path: str | None = "",
    schema_type: str | None = "input",
    max_depth: float = math.inf,
) -> dict[str, Any]:
    """
    Expand a tool's schema at a JSON Pointer path.

    Args:
        registry: Schema registry holding the canonical schemas
        tool_name: Operation whose schema to expand
        path: JSON Pointer into the schema ("" or "/" for the root)
        schema_type: "output" selects the output schema; anything else
            selects the input schema
        max_depth: Depth ceiling counted from the addressed node

    Returns:
        On success:
            {"success": True,
             "data": {"toolName", "path", "schemaType", "schema"},
             "error": None}
        On failure:
            {"success": False, "data": None, "error": "<message>"}

    Example:
        expand_schema(registry, "catalog_search", "/properties/filter")
        # {"success": True, "data": {..., "schema": {"type": "object", ...}}, "error": None}
    """
    path = path or ""
    schema_type = "output" if schema_type == "output" else "input"

    if not tool_name:
        return _failure("toolName is required")

    try:
        schema = registry.expand(tool_name, path, max_depth, schema_type)
    except (SchemaError, ValueError) as e:
        logger.warning(f"Failed to expand {schema_type} schema for '{tool_name}' at '{path}': {e}")
        return _failure(str(e) or "Failed to expand schema")

    logger.debug(f"Expanded {schema_type} schema for '{tool_name}' at '{path or '/'}'")
    return {
        "success": True,
        "data": {
            "toolName": tool_name,
            "path": path,
            "schemaType": schema_type,
            "schema": schema,
        },
        "error": None,
    }


def _failure(message: str) -> dict[str, Any]:
    return {"success": False, "data": None, "error": message}
