"""Read-only tree views consumed by the fingerprinting code."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class AttributeView(Protocol):
    """A single (name, value) attribute of a node."""

    @property
    def name(self) -> str: ...

    @property
    def value(self) -> str: ...


@runtime_checkable
class NodeView(Protocol):
    """A tree node: tag, direct text, attributes and child nodes."""

    @property
    def tag_name(self) -> str: ...

    @property
    def text_value(self) -> str: ...

    def attributes(self) -> Iterable[AttributeView]: ...

    def children(self) -> Iterable[NodeView]: ...


@runtime_checkable
class DocumentView(Protocol):
    """A parsed document exposing its document element."""

    @property
    def root(self) -> NodeView: ...
