"""Centralized configuration for the schema server."""

import os
from pathlib import Path


def _parse_flag(value: str | None) -> bool:
    """Flags default to on; only the string "false" turns them off."""
    return str(value or "").strip().lower() != "false"


class Config:
    """
    Schema server configuration with environment variable overrides.

    All configuration values are centralized here with sensible defaults.
    Values can be overridden via environment variables.
    """

    @staticmethod
    def _parse_port(port_str: str) -> int:
        """Parse and validate port number from string."""
        try:
            port = int(port_str)
            if not (1 <= port <= 65535):
                raise ValueError(f"Port must be 1-65535, got {port}")
            return port
        except ValueError as e:
            raise ValueError(f"Invalid PORT environment variable: {e}")

    @staticmethod
    def _parse_depth(depth_str: str) -> int:
        """Parse truncation depth from string; range is checked by validate()."""
        try:
            return int(depth_str)
        except ValueError:
            raise ValueError(
                f"Invalid TRUNCATION_DEPTH environment variable: expected an integer, got '{depth_str}'"
            )

    # ========================================================================
    # Server Configuration
    # ========================================================================
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _parse_port.__func__(os.getenv("PORT", "8001"))
    OPERATIONS_PATH: str = os.getenv("OPERATIONS_YAML_PATH") or str(
        Path(__file__).parent.parent.parent / "config" / "operations.yaml"
    )

    # ========================================================================
    # Progressive Schemas
    # ========================================================================
    LAZY_INPUT_SCHEMAS: bool = _parse_flag(os.getenv("LAZY_SCHEMAS"))
    HIDE_OUTPUT_SCHEMAS: bool = _parse_flag(os.getenv("HIDE_OUTPUT_SCHEMAS"))
    TRUNCATION_DEPTH: int = _parse_depth.__func__(os.getenv("TRUNCATION_DEPTH", "1"))

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "schema_mcp.log")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Checks:
        - TRUNCATION_DEPTH is >= 0
        - LOG_LEVEL is a known loguru level

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.TRUNCATION_DEPTH < 0:
            errors.append(f"TRUNCATION_DEPTH must be >= 0, got {cls.TRUNCATION_DEPTH}")

        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if cls.LOG_LEVEL not in valid_levels:
            errors.append(f"LOG_LEVEL must be one of {sorted(valid_levels)}, got {cls.LOG_LEVEL}")

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True
