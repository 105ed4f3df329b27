"""Errors raised while resolving and expanding schemas."""


class SchemaError(Exception):
    """Base class for schema registry failures."""

    pass


class SchemaNotFoundError(SchemaError):
    """Raised when an operation has no stored schema of the requested type."""

    def __init__(self, tool_name: str, schema_type: str = "input"):
        self.tool_name = tool_name
        self.schema_type = schema_type
        super().__init__(f"No {schema_type} schema found for tool '{tool_name}'")


class InvalidPointerError(SchemaError):
    """Raised when a JSON Pointer cannot be resolved against a schema."""

    def __init__(self, message: str, segment: str | None = None):
        self.segment = segment
        super().__init__(message)


class IndexOutOfBoundsError(InvalidPointerError):
    """Raised when an array segment falls outside [0, length)."""

    def __init__(self, segment: str, length: int):
        self.length = length
        super().__init__(f"Array index '{segment}' out of bounds", segment=segment)
