"""Recursive node fingerprints built on the key combiners."""

from __future__ import annotations

from xmlmatch_core.fingerprint.models import DepthLimitExceededError
from xmlmatch_core.interfaces import AttributeView, NodeView
from xmlmatch_core.keys import (
    DEFAULT_KEY_WIDTH,
    Key,
    combine_loosely,
    combine_uniquely,
    hash_text,
)


def attribute_key(attribute: AttributeView, *, width: int = DEFAULT_KEY_WIDTH) -> Key:
    """Key of one attribute; name and value keep their roles."""
    return combine_uniquely(
        hash_text(attribute.name, width),
        hash_text(attribute.value, width),
        width=width,
    )


def attributes_key(node: NodeView, *, width: int = DEFAULT_KEY_WIDTH) -> Key:
    """Order-insensitive key over every attribute of *node*."""
    return combine_loosely(
        *(attribute_key(a, width=width) for a in node.attributes()),
        width=width,
    )


def node_key(
    node: NodeView,
    *,
    width: int = DEFAULT_KEY_WIDTH,
    max_depth: int | None = None,
) -> Key:
    """Fingerprint *node* and its whole subtree.

    Tag name, direct text, the attribute set and the child set are combined
    uniquely, while attributes and children are each folded loosely so that
    neither attribute order nor sibling order affects the key.

    If *max_depth* is given, descending below that many levels under *node*
    raises :class:`DepthLimitExceededError`.
    """
    return _node_key(node, width, max_depth, 0)


def _node_key(node: NodeView, width: int, max_depth: int | None, depth: int) -> Key:
    if max_depth is not None and depth > max_depth:
        raise DepthLimitExceededError(max_depth, node.tag_name)

    children_key = combine_loosely(
        *(_node_key(child, width, max_depth, depth + 1) for child in node.children()),
        width=width,
    )
    return combine_uniquely(
        hash_text(node.tag_name, width),
        hash_text(node.text_value, width),
        attributes_key(node, width=width),
        children_key,
        width=width,
    )
