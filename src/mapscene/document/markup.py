"""Markup document: read-only element tree over a map file.

Wraps xml.etree.ElementTree with the small query surface the loader needs:
named child lookup, lazy iteration over same-named children and typed
attribute queries that report absence as None.

Usage:
    doc = MarkupDocument.load(Path("data/maps/n1.xml"))
    spawn = doc.root.first_child("spawn")
    for light in doc.root.children_named("light"):
        energy = light.query_float("energy")
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from mapscene.core.types import Vector3
from mapscene.errors import MalformedDocumentError, ResourceUnavailableError

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class MarkupElement:
    """Handle to one element of a markup document."""

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    @property
    def name(self) -> str:
        return self._element.tag

    def first_child(self, name: str) -> MarkupElement | None:
        """First direct child with the given name, or None."""
        child = self._element.find(name)
        return MarkupElement(child) if child is not None else None

    def children_named(self, name: str) -> Iterator[MarkupElement]:
        """Lazily iterate direct children with the given name, in document order.

        The iterator may be empty. Each call starts a fresh iteration.
        """
        for child in self._element.iterfind(name):
            yield MarkupElement(child)

    def has_attribute(self, name: str) -> bool:
        return name in self._element.attrib

    def query_string(self, name: str) -> str | None:
        """Attribute value as written, or None if absent."""
        return self._element.get(name)

    def query_int(self, name: str) -> int | None:
        """Leading integer of the attribute, or None if absent or not numeric.

        Like scanf, trailing text is ignored: "3.0" and "3 px" both read as 3.
        """
        raw = self._element.get(name)
        if raw is None:
            return None
        match = _INT_PREFIX.match(raw)
        return int(match.group()) if match else None

    def query_float(self, name: str) -> float | None:
        """Leading number of the attribute, or None if absent or not numeric.

        Trailing text is ignored, so "1.5m" reads as 1.5.
        """
        raw = self._element.get(name)
        if raw is None:
            return None
        match = _FLOAT_PREFIX.match(raw)
        return float(match.group()) if match else None

    def __repr__(self) -> str:
        return f"MarkupElement({self._element.tag!r}, {dict(self._element.attrib)!r})"


class MarkupDocument:
    """Parsed markup document. The root element is the map element."""

    def __init__(self, root: ET.Element, source: str = "<string>") -> None:
        self._root = MarkupElement(root)
        self.source = source

    @property
    def root(self) -> MarkupElement:
        return self._root

    @classmethod
    def load(cls, path: Path | str) -> MarkupDocument:
        """Read and parse a document from disk.

        Raises:
            ResourceUnavailableError: If the file is missing or unreadable.
            MalformedDocumentError: If the file is not well-formed XML.
        """
        path = Path(path)
        try:
            text = path.read_bytes()
        except FileNotFoundError as e:
            raise ResourceUnavailableError(path) from e
        except OSError as e:
            raise ResourceUnavailableError(path, reason=e.strerror or str(e)) from e
        return cls._parse(text, str(path))

    @classmethod
    def from_string(cls, text: str | bytes, source: str = "<string>") -> MarkupDocument:
        """Parse a document held in memory.

        Raises:
            MalformedDocumentError: If the text is not well-formed XML.
        """
        return cls._parse(text, source)

    @classmethod
    def _parse(cls, text: str | bytes, source: str) -> MarkupDocument:
        try:
            root = ET.fromstring(text)
        except (ET.ParseError, ValueError, LookupError) as e:
            # expat reports unknown or multi-byte declared encodings as LookupError/ValueError
            raise MalformedDocumentError(source, str(e)) from e
        return cls(root, source)


def read_vertex(element: MarkupElement) -> Vector3:
    """Read x, y, z attributes of an element; each missing axis is 0.0."""
    return Vector3(
        element.query_float("x") or 0.0,
        element.query_float("y") or 0.0,
        element.query_float("z") or 0.0,
    )


def _extract_child_vertex(element: MarkupElement, child: str, default: Vector3) -> Vector3:
    node = element.first_child(child)
    if node is None:
        return default
    return read_vertex(node)


def extract_position(element: MarkupElement, default: Vector3 = Vector3.ZERO) -> Vector3:
    """Vertex of the ``position`` child, or default if there is none."""
    return _extract_child_vertex(element, "position", default)


def extract_rotation(element: MarkupElement, default: Vector3 = Vector3.ZERO) -> Vector3:
    """Vertex of the ``rotation`` child, or default if there is none."""
    return _extract_child_vertex(element, "rotation", default)


def extract_scale(element: MarkupElement, default: Vector3 = Vector3.ONE) -> Vector3:
    """Vertex of the ``scale`` child, or default if there is none."""
    return _extract_child_vertex(element, "scale", default)
