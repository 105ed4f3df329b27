"""
Entry point for running schema_mcp as a module.

Allows running the schema server via:
    python -m schema_mcp
    uv run python -m schema_mcp
"""

from schema_mcp.supervisor import main

if __name__ == "__main__":
    main()
