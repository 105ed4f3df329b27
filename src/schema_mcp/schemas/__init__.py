"""Progressive schema delivery.

Modules:
- pointer: RFC 6901 JSON Pointer resolution
- nodes: node classification and structural copying
- projector: depth-bounded truncation with expandable placeholders
- expander: the expand_schema operation (success/error envelope)
"""

from .errors import IndexOutOfBoundsError, InvalidPointerError, SchemaError, SchemaNotFoundError
from .expander import expand_schema
from .nodes import NodeKind, classify_node, clone_schema
from .pointer import join_pointer, resolve_pointer
from .projector import estimate_token_count, project_schema, truncate_schema

__all__ = [
    "classify_node",
    "clone_schema",
    "estimate_token_count",
    "expand_schema",
    "IndexOutOfBoundsError",
    "InvalidPointerError",
    "join_pointer",
    "NodeKind",
    "project_schema",
    "resolve_pointer",
    "SchemaError",
    "SchemaNotFoundError",
    "truncate_schema",
]
