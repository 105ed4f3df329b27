"""Pytest fixtures for the schema server test suite."""

from pathlib import Path
from typing import Any

import pytest

from schema_mcp.registry import OperationDescriptor, SchemaRegistry


# ============================================================================
# SCHEMA FIXTURES
# ============================================================================


def _search_input_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "limit": {"type": "integer", "description": "Max results", "minimum": 1},
            "query": {"type": "string"},
            "filter": {
                "type": "object",
                "description": "Structured filter",
                "properties": {
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "examples": [["pii"]],
                    },
                    "owner": {
                        "type": "object",
                        "properties": {"email": {"type": "string"}},
                    },
                },
                "required": ["tags"],
            },
            "columns": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"name": {"type": "string"}},
                },
            },
            "range": {
                "anyOf": [
                    {"type": "string"},
                    {"type": "object", "properties": {"from": {"type": "string"}}},
                ]
            },
        },
        "required": ["query"],
    }


def _search_output_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "success": {"type": "boolean"},
            "data": {
                "type": "object",
                "properties": {
                    "results": {
                        "type": "array",
                        "items": {"type": "object", "properties": {"id": {"type": "string"}}},
                    }
                },
            },
        },
    }


@pytest.fixture
def search_input_schema() -> dict[str, Any]:
    """Nested input schema with objects, arrays and a union."""
    return _search_input_schema()


@pytest.fixture
def search_output_schema() -> dict[str, Any]:
    """Nested output schema."""
    return _search_output_schema()


@pytest.fixture
def descriptors() -> list[OperationDescriptor]:
    """
    Operation descriptors covering input-only, input+output and
    schema-less operations.
    """
    return [
        OperationDescriptor(
            name="catalog_search",
            description="Search the catalog",
            input_schema=_search_input_schema(),
            output_schema=_search_output_schema(),
        ),
        OperationDescriptor(
            name="health_check",
            description="Check connectivity",
            input_schema={"type": "object", "properties": {}},
        ),
        OperationDescriptor(name="no_schemas", description="Registered without schemas"),
    ]


@pytest.fixture
def registry(descriptors) -> SchemaRegistry:
    """Registry populated from the descriptor fixture."""
    return SchemaRegistry(descriptors)


@pytest.fixture
def operations_yaml(tmp_path) -> Path:
    """Descriptor file in the config/operations.yaml format."""
    path = tmp_path / "operations.yaml"
    path.write_text(
        """
operations:
  - name: get_lineage_tree
    description: Get lineage between datasets
    inputSchema:
      type: object
      properties:
        anchorCollections:
          type: array
          items:
            type: string
      required: [anchorCollections]
  - name: get_health_check
    inputSchema:
      type: object
      properties: {}
""",
        encoding="utf-8",
    )
    return path
