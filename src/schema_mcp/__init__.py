"""Schema MCP Server - lazily expanded operation schemas over FastMCP."""

__version__ = "0.1.0"

from .registry import OperationDescriptor, SchemaRegistry

__all__ = ["OperationDescriptor", "SchemaRegistry", "__version__"]
