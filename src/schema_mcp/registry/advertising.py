"""Advertised tool listings built from the schema registry.

Operations are advertised to tool-calling clients with their input schema
truncated (depth 1 by default) so the initial discovery payload stays
small. Deeper structure is only reachable through ``expand_schema``.
"""

from typing import Any

from loguru import logger

from ..schemas.projector import estimate_token_count, find_expandable_paths
from .models import OperationDescriptor
from .registry import SchemaRegistry


def strip_examples(node: Any) -> None:
    """Remove every ``examples`` list from a schema tree, in place."""
    if isinstance(node, dict):
        if isinstance(node.get("examples"), list):
            del node["examples"]
        for value in node.values():
            strip_examples(value)
    elif isinstance(node, list):
        for value in node:
            strip_examples(value)


def advertise_operation(
    registry: SchemaRegistry,
    name: str,
    lazy_input: bool = True,
    hide_output: bool = True,
    max_depth: int = 1,
) -> dict[str, Any] | None:
    """
    Build the advertised descriptor for one operation.

    Args:
        registry: Schema registry holding the canonical schemas
        name: Operation name
        lazy_input: Truncate the input schema and strip examples
        hide_output: Leave the output schema out of the listing
        max_depth: Truncation ceiling for lazy input schemas

    Returns:
        Tool dict with name, description and schemas, or None if the
        operation is not registered
    """
    if not registry.has_operation(name):
        return None

    input_schema = registry.get_full_input_schema(name)
    expandable: list[str] = []
    if input_schema is not None and lazy_input:
        input_schema = registry.create_truncated_input_schema(input_schema, max_depth)
        strip_examples(input_schema)
        expandable = find_expandable_paths(input_schema)

    descriptor = OperationDescriptor(
        name=name,
        description=registry.get_description(name),
        input_schema=input_schema,
        output_schema=None if hide_output else registry.get_full_output_schema(name),
    )
    tool = descriptor.to_tool_dict()
    if expandable:
        tool["expandablePaths"] = expandable
    return tool


def build_advertised_schemas(
    registry: SchemaRegistry,
    lazy_input: bool = True,
    hide_output: bool = True,
    max_depth: int = 1,
) -> list[dict[str, Any]]:
    """
    Build the advertised listing for every registered operation.

    Returns:
        Tool dicts in registration order
    """
    tools = []
    full_tokens = 0
    advertised_tokens = 0

    for name in registry.operation_names():
        tool = advertise_operation(registry, name, lazy_input, hide_output, max_depth)
        if tool is None:
            continue
        tools.append(tool)
        full_tokens += estimate_token_count(registry.get_full_input_schema(name))
        advertised_tokens += estimate_token_count(tool.get("inputSchema"))

    logger.info(
        f"Advertising {len(tools)} operations "
        f"(input schemas ~{advertised_tokens} tokens, full ~{full_tokens} tokens, "
        f"lazy_input={lazy_input}, hide_output={hide_output})"
    )
    return tools


def format_operation_list(tools: list[dict[str, Any]]) -> str:
    """
    Format advertised operations for agent consumption.

    Returns ONLY:
    - Operation name
    - Description

    Schemas are fetched separately with get_operation_schema/expand_schema.
    """
    if not tools:
        return "No operations registered."

    lines = [f"Found {len(tools)} operation(s):\n"]

    for tool in tools:
        lines.append(f"• {tool['name']}")
        if tool.get("description"):
            lines.append(f"  {tool['description']}")
        lines.append("")  # Blank line between operations

    return "\n".join(lines).strip()
