"""lxml-backed implementations of the tree view protocols."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import lxml.etree as ET


@dataclass(frozen=True)
class XmlAttribute:
    name: str
    value: str


class XmlText:
    """A run of character data that sits directly inside an element.

    It has no tag, no text value of its own, no attributes and no children,
    so every text run contributes the same key to its parent's child set.
    """

    __slots__ = ()

    tag_name = ""
    text_value = ""

    def attributes(self) -> Iterator[XmlAttribute]:
        return iter(())

    def children(self) -> Iterator[XmlText]:
        return iter(())

    def __repr__(self) -> str:
        return "XmlText()"


def _is_blank(chunk: str | None) -> bool:
    return not chunk or chunk.isspace()


class XmlNode:
    """Read-only view of an lxml element.

    The text value is the first text chunk directly inside the element that
    is not whitespace only, whether it precedes the first child or follows
    one. Children are the element children plus one :class:`XmlText` per
    such chunk. Comments, processing instructions and entity references are
    skipped.
    """

    __slots__ = ("_element", "_strip_text")

    def __init__(self, element: ET._Element, *, strip_text: bool = False) -> None:
        self._element = element
        self._strip_text = strip_text

    @property
    def element(self) -> ET._Element:
        return self._element

    @property
    def tag_name(self) -> str:
        return self._element.tag

    @property
    def text_value(self) -> str:
        chunks = [self._element.text] + [child.tail for child in self._element]
        for chunk in chunks:
            if not _is_blank(chunk):
                return chunk.strip() if self._strip_text else chunk
        return ""

    def attributes(self) -> Iterator[XmlAttribute]:
        for name, value in self._element.attrib.items():
            yield XmlAttribute(name=name, value=value)

    def children(self) -> Iterator[XmlNode | XmlText]:
        if not _is_blank(self._element.text):
            yield XmlText()
        for child in self._element:
            if isinstance(child.tag, str):
                yield XmlNode(child, strip_text=self._strip_text)
            if not _is_blank(child.tail):
                yield XmlText()

    def __repr__(self) -> str:
        return f"XmlNode({self.tag_name!r})"


class XmlDocument:
    """A parsed document together with the name it was loaded from."""

    def __init__(self, root: ET._Element, source: str = "<string>", *, strip_text: bool = False) -> None:
        self.source = source
        self._root = XmlNode(root, strip_text=strip_text)

    @property
    def root(self) -> XmlNode:
        return self._root

    def __repr__(self) -> str:
        return f"XmlDocument({self.source!r}, root={self._root.tag_name!r})"
