"""Schema registry implementation."""

import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ..schemas.errors import SchemaNotFoundError
from ..schemas.nodes import clone_schema
from ..schemas.pointer import resolve_pointer
from ..schemas.projector import project_schema
from .models import OperationDescriptor, coerce_descriptor

SCHEMA_TYPES = ("input", "output")


class SchemaRegistry:
    """
    Canonical store of full input/output schemas per operation.

    Features:
    - Input and output schemas stored independently
    - Every accessor returns an independent deep copy
    - Truncated (token-efficient) projections of input schemas
    - Targeted expansion of any sub-schema by JSON Pointer

    The registry is populated once in ``__init__`` and is read-only
    afterwards, so it can be shared between concurrent tool calls.
    """

    def __init__(self, descriptors: Iterable[OperationDescriptor | Mapping[str, Any]] = ()):
        """
        Populate the registry from operation descriptors.

        Descriptors without a name, or that cannot be parsed, are skipped.
        A later descriptor with the same name replaces the earlier
        description and schemas it provides; fields it omits are kept.

        Args:
            descriptors: OperationDescriptor instances or raw mappings
        """
        self._input_schemas: dict[str, dict[str, Any]] = {}
        self._output_schemas: dict[str, dict[str, Any]] = {}
        self._descriptions: dict[str, str | None] = {}

        for item in descriptors:
            try:
                descriptor = coerce_descriptor(item)
            except ValueError as e:
                logger.warning(f"Skipping malformed operation descriptor: {e}")
                continue

            if not descriptor.name:
                logger.debug("Skipping operation descriptor without a name")
                continue

            # Fields a later duplicate leaves out keep their earlier values
            if descriptor.description is not None or descriptor.name not in self._descriptions:
                self._descriptions[descriptor.name] = descriptor.description
            if descriptor.input_schema is not None:
                self._input_schemas[descriptor.name] = clone_schema(descriptor.input_schema)
            if descriptor.output_schema is not None:
                self._output_schemas[descriptor.name] = clone_schema(descriptor.output_schema)

        logger.info(
            f"Schema registry loaded {len(self._descriptions)} operations "
            f"({len(self._input_schemas)} input, {len(self._output_schemas)} output schemas)"
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "SchemaRegistry":
        """
        Load registry from a YAML (or JSON) descriptor file.

        The file holds either a bare list of descriptors or a mapping with an
        ``operations`` list.

        Args:
            yaml_path: Path to the descriptor file

        Returns:
            Initialized SchemaRegistry instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file structure is invalid
            yaml.YAMLError: If YAML is malformed
        """
        return cls(load_descriptors(yaml_path))

    def has_operation(self, name: str) -> bool:
        """Return True if any descriptor named ``name`` was registered."""
        return name in self._descriptions

    def operation_names(self) -> list[str]:
        """Return registered operation names in registration order."""
        return list(self._descriptions)

    def get_description(self, name: str) -> str | None:
        """Return the operation description, or None if absent."""
        return self._descriptions.get(name)

    def get_full_input_schema(self, name: str) -> dict[str, Any] | None:
        """
        Get a copy of the full input schema for an operation.

        Args:
            name: Operation name

        Returns:
            Deep copy of the stored schema, or None if not registered
        """
        schema = self._input_schemas.get(name)
        return clone_schema(schema) if schema is not None else None

    def get_full_output_schema(self, name: str) -> dict[str, Any] | None:
        """
        Get a copy of the full output schema for an operation.

        Args:
            name: Operation name

        Returns:
            Deep copy of the stored schema, or None if not registered
        """
        schema = self._output_schemas.get(name)
        return clone_schema(schema) if schema is not None else None

    def create_truncated_input_schema(
        self, schema: dict[str, Any], max_depth: float = 1
    ) -> dict[str, Any]:
        """
        Produce a token-efficient copy of an input schema.

        With the default ``max_depth=1`` the root and its direct properties are
        kept; anything nested deeper becomes an expandable placeholder.

        Args:
            schema: Full schema (not modified)
            max_depth: Depth ceiling counted from the root

        Returns:
            Truncated schema
        """
        return project_schema(clone_schema(schema), max_depth, 0)

    def expand(
        self,
        name: str,
        path: str = "",
        max_depth: float = math.inf,
        schema_type: str = "input",
    ) -> Any:
        """
        Return the sub-schema of an operation addressed by a JSON Pointer.

        Depth is counted from the resolved node, so the default unbounded
        ceiling returns the sub-schema in full.

        Args:
            name: Operation name
            path: JSON Pointer into the schema ("" or "/" for the root)
            max_depth: Depth ceiling applied from the resolved node
            schema_type: "input" or "output"

        Returns:
            Projected copy of the addressed sub-schema

        Raises:
            ValueError: If schema_type is not "input" or "output"
            SchemaNotFoundError: If the operation has no schema of that type
            InvalidPointerError: If the pointer cannot be resolved
            IndexOutOfBoundsError: If an array index is out of range
        """
        if schema_type not in SCHEMA_TYPES:
            raise ValueError(f"schema_type must be 'input' or 'output', got '{schema_type}'")

        schemas = self._output_schemas if schema_type == "output" else self._input_schemas
        full = schemas.get(name)
        if full is None:
            raise SchemaNotFoundError(name, schema_type)

        target = resolve_pointer(full, path)
        return project_schema(target, max(0, max_depth), 0)


def load_descriptors(yaml_path: str | Path) -> list[OperationDescriptor]:
    """
    Read operation descriptors from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file structure is invalid
    """
    descriptor_file = Path(yaml_path)
    if not descriptor_file.exists():
        raise FileNotFoundError(f"Operations file not found: {yaml_path}")

    with open(descriptor_file, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("operations", [])

    if not isinstance(data, list):
        raise ValueError(
            f"Invalid operations file structure: expected list, got {type(data).__name__}"
        )

    descriptors = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Operation #{index} must be a mapping, got {type(entry).__name__}")
        descriptors.append(OperationDescriptor.from_mapping(entry))

    logger.debug(f"Loaded {len(descriptors)} operation descriptors from {descriptor_file}")
    return descriptors
