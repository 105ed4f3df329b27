"""
Operation descriptor data model.

An OperationDescriptor pairs an operation name with its canonical input
and output schemas. Descriptors are loaded in bulk at startup (usually from
``config/operations.yaml``) and handed to ``SchemaRegistry``.

Mappings may use the wire spelling (``inputSchema``/``outputSchema``) or
snake_case (``input_schema``/``output_schema``).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class OperationDescriptor:
    """
    Registration record for one operation.

    Invariants:
    - name is the registry key; descriptors with an empty name are skipped
    - schemas are JSON-compatible mappings or None
    """

    name: str
    description: str | None = None
    input_schema: dict[str, Any] | None = None
    output_schema: dict[str, Any] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OperationDescriptor":
        """
        Build a descriptor from a loaded YAML/JSON mapping.

        Args:
            data: Mapping with ``name`` and optional description/schemas

        Returns:
            OperationDescriptor (name is "" when missing)

        Raises:
            ValueError: If a schema is present but is not a mapping
        """
        input_schema = data.get("inputSchema", data.get("input_schema"))
        output_schema = data.get("outputSchema", data.get("output_schema"))

        for label, schema in (("inputSchema", input_schema), ("outputSchema", output_schema)):
            if schema is not None and not isinstance(schema, Mapping):
                raise ValueError(
                    f"{label} for '{data.get('name')}' must be a mapping, "
                    f"got {type(schema).__name__}"
                )

        return cls(
            name=str(data.get("name") or ""),
            description=data.get("description"),
            input_schema=dict(input_schema) if input_schema is not None else None,
            output_schema=dict(output_schema) if output_schema is not None else None,
        )

    def to_tool_dict(self) -> dict[str, Any]:
        """Return the descriptor in MCP tool listing form."""
        tool: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            tool["description"] = self.description
        if self.input_schema is not None:
            tool["inputSchema"] = self.input_schema
        if self.output_schema is not None:
            tool["outputSchema"] = self.output_schema
        return tool


def coerce_descriptor(item: "OperationDescriptor | Mapping[str, Any]") -> OperationDescriptor:
    """Accept either a descriptor or a raw mapping."""
    if isinstance(item, OperationDescriptor):
        return item
    if isinstance(item, Mapping):
        return OperationDescriptor.from_mapping(item)
    raise ValueError(f"Invalid operation descriptor: expected mapping, got {type(item).__name__}")
