"""JSON Pointer (RFC 6901) resolution against schema documents.

Resolution is read-only: the document is never mutated and the returned
value is the node reachable by literal key/index traversal. Callers that
hand the result out must copy it first.
"""

from typing import Any

from .errors import IndexOutOfBoundsError, InvalidPointerError


def unescape_pointer_segment(segment: str) -> str:
    """Decode ``~1`` to ``/`` and then ``~0`` to ``~``."""
    return segment.replace("~1", "/").replace("~0", "~")


def escape_pointer_segment(segment: str) -> str:
    """Encode a key so it can be used as a single pointer segment."""
    return segment.replace("~", "~0").replace("/", "~1")


def join_pointer(*segments: str | int) -> str:
    """
    Build a pointer from raw keys and indexes.

    Example:
        join_pointer("properties", "a/b", "items") == "/properties/a~1b/items"
    """
    return "".join(f"/{escape_pointer_segment(str(segment))}" for segment in segments)


def split_pointer(pointer: str) -> list[str]:
    """
    Split a pointer into decoded segments.

    ``""`` and ``"/"`` address the root and yield no segments. A pointer
    without the leading slash (``properties/filter``) is accepted as
    shorthand.
    """
    if not pointer or pointer == "/":
        return []
    if not pointer.startswith("/"):
        pointer = "/" + pointer
    return [unescape_pointer_segment(segment) for segment in pointer.split("/")[1:]]


def _parse_array_index(segment: str, length: int) -> int:
    # "-" addresses the slot after the last element, which never exists on read
    if segment == "-":
        raise IndexOutOfBoundsError(segment, length)
    if not (segment.isascii() and segment.isdigit()):
        raise InvalidPointerError(f"Invalid array index '{segment}'", segment=segment)
    index = int(segment)
    if index >= length:
        raise IndexOutOfBoundsError(segment, length)
    return index


def resolve_pointer(document: Any, pointer: str) -> Any:
    """
    Resolve a JSON Pointer against a schema document.

    Args:
        document: Root of the schema tree
        pointer: RFC 6901 pointer, e.g. ``/properties/filter/items``

    Returns:
        The node designated by the pointer (not a copy)

    Raises:
        InvalidPointerError: A segment names a missing key, an array
            segment is not a non-negative integer, or the walk reaches a
            null or scalar node before the pointer ends
        IndexOutOfBoundsError: An array segment is ``-`` or outside the
            array
    """
    current = document
    for segment in split_pointer(pointer):
        if current is None:
            raise InvalidPointerError(
                f"Invalid JSON Pointer. Segment '{segment}' not found.", segment=segment
            )
        if isinstance(current, list):
            current = current[_parse_array_index(segment, len(current))]
        elif isinstance(current, dict):
            if segment not in current:
                raise InvalidPointerError(
                    f"Property '{segment}' not found in object", segment=segment
                )
            current = current[segment]
        else:
            raise InvalidPointerError(
                f"Cannot traverse into non-object at segment '{segment}'", segment=segment
            )
    return current
