"""Markup document access for map files."""

from mapscene.document.markup import (
    MarkupDocument,
    MarkupElement,
    extract_position,
    extract_rotation,
    extract_scale,
    read_vertex,
)

__all__ = [
    "MarkupDocument",
    "MarkupElement",
    "read_vertex",
    "extract_position",
    "extract_rotation",
    "extract_scale",
]
