"""FastMCP server exposing lazily-expanded operation schemas."""

import json
import sys
from typing import Any

import yaml
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from loguru import logger

from .config import Config
from .registry import (
    SchemaRegistry,
    advertise_operation,
    build_advertised_schemas,
    format_operation_list,
)
from .schemas import expand_schema as expand_registry_schema


# Constants
SERVER_NAME = "SchemaServer"
HOST = Config.HOST
PORT = Config.PORT


def create_server(
    registry: SchemaRegistry,
    lazy_input: bool = Config.LAZY_INPUT_SCHEMAS,
    hide_output: bool = Config.HIDE_OUTPUT_SCHEMAS,
    max_depth: int = Config.TRUNCATION_DEPTH,
) -> FastMCP:
    """
    Build the FastMCP server around an already-populated registry.

    The registry is owned by the caller and is only read here, so one
    registry can back several server instances (tests build their own).

    Tools:
    - list_operations: names and descriptions only
    - get_operation_schema: advertised (truncated) schema for one operation
    - expand_schema: full or partial schema at a JSON Pointer path

    Args:
        registry: Populated schema registry
        lazy_input: Advertise truncated input schemas
        hide_output: Leave output schemas out of advertised descriptors
        max_depth: Truncation ceiling for advertised input schemas

    Returns:
        Configured FastMCP instance
    """
    mcp = FastMCP(name=SERVER_NAME)

    advertised = build_advertised_schemas(registry, lazy_input, hide_output, max_depth)

    @mcp.tool()
    def list_operations() -> str:
        """
        List available operations by name and description.

        Does NOT return schemas. Use get_operation_schema for the
        advertised schema and expand_schema for nested detail.
        """
        return format_operation_list(advertised)

    @mcp.tool()
    def get_operation_schema(toolName: str) -> str:
        """
        Get the advertised JSON schema for one operation.

        Nested objects and arrays below the advertised depth are replaced by
        placeholders; ``expandablePaths`` lists the JSON Pointers that can be
        passed to expand_schema to load them.

        Args:
            toolName: Name of the operation

        Returns:
            JSON with name, description and inputSchema fields

        Raises:
            ToolError: If the operation is not registered
        """
        tool = advertise_operation(registry, toolName, lazy_input, hide_output, max_depth)
        if tool is None:
            raise ToolError(f"Operation '{toolName}' is not registered")
        return json.dumps(tool, indent=2)

    @mcp.tool()
    def expand_schema(toolName: str, path: str = "", schemaType: str = "input") -> dict[str, Any]:
        """
        Expand a tool's input schema at a given JSON Pointer path.

        Always available to fetch deeper, lazily-loaded schema parts.

        Args:
            toolName: Operation whose schema to expand
            path: JSON Pointer, e.g. "/properties/filter" ("" for the root)
            schemaType: "input" (default) or "output"

        Returns:
            {"success": bool, "data": {...} | null, "error": str | null}
        """
        return expand_registry_schema(registry, toolName, path, schemaType)

    logger.info(f"{SERVER_NAME} ready with {len(advertised)} advertised operations")
    return mcp


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def main():
    """
    Main entry point for the schema server.

    Configures:
    - Loguru for structured logging
    - Schema registry loaded from the operations file
    - HTTP/SSE transport
    """
    # Configure loguru for server logging
    logger.remove()  # Remove default handler

    # Add console handler with structured format
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>",
        level=Config.LOG_LEVEL,
    )

    # Add file handler for server logs
    logger.add(
        Config.LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        level="DEBUG",
    )

    try:
        Config.validate()
        registry = SchemaRegistry.from_yaml(Config.OPERATIONS_PATH)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    mcp = create_server(registry)

    logger.info(f"Starting {SERVER_NAME} on {HOST}:{PORT}...")

    # Run with HTTP/SSE transport
    try:
        mcp.run(transport="sse", host=HOST, port=PORT)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
