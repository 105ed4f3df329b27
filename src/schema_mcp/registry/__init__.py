"""Schema registry package."""
from .advertising import advertise_operation, build_advertised_schemas, format_operation_list
from .models import OperationDescriptor
from .registry import SchemaRegistry, load_descriptors

__all__ = [
    "advertise_operation",
    "build_advertised_schemas",
    "format_operation_list",
    "load_descriptors",
    "OperationDescriptor",
    "SchemaRegistry",
]
