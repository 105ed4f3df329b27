"""Tests for operation descriptor models."""

import pytest

from schema_mcp.registry.models import OperationDescriptor, coerce_descriptor


def test_from_mapping_accepts_wire_and_snake_case():
    wire = OperationDescriptor.from_mapping(
        {"name": "op", "inputSchema": {"type": "object"}, "outputSchema": {"type": "string"}}
    )
    snake = OperationDescriptor.from_mapping(
        {"name": "op", "input_schema": {"type": "object"}, "output_schema": {"type": "string"}}
    )

    assert wire == snake
    assert wire.input_schema == {"type": "object"}
    assert wire.output_schema == {"type": "string"}


def test_from_mapping_missing_name_is_empty():
    assert OperationDescriptor.from_mapping({"description": "x"}).name == ""


def test_from_mapping_rejects_non_mapping_schema():
    with pytest.raises(ValueError, match="inputSchema for 'op' must be a mapping"):
        OperationDescriptor.from_mapping({"name": "op", "inputSchema": "object"})


def test_to_tool_dict_uses_wire_keys():
    descriptor = OperationDescriptor(
        name="op",
        description="An operation",
        input_schema={"type": "object"},
        output_schema={"type": "string"},
    )

    assert descriptor.to_tool_dict() == {
        "name": "op",
        "description": "An operation",
        "inputSchema": {"type": "object"},
        "outputSchema": {"type": "string"},
    }


def test_to_tool_dict_omits_absent_fields():
    assert OperationDescriptor(name="op").to_tool_dict() == {"name": "op"}


def test_to_tool_dict_keeps_empty_schema():
    """An empty schema is still a schema."""
    assert OperationDescriptor(name="op", input_schema={}).to_tool_dict() == {
        "name": "op",
        "inputSchema": {},
    }


def test_coerce_descriptor():
    descriptor = OperationDescriptor(name="op")

    assert coerce_descriptor(descriptor) is descriptor
    assert coerce_descriptor({"name": "op"}) == descriptor
    with pytest.raises(ValueError, match="expected mapping"):
        coerce_descriptor(["op"])
