"""Exact order-insensitive comparison, used to confirm fingerprint matches."""

from __future__ import annotations

from collections import Counter, defaultdict

from xmlmatch_core.interfaces import NodeView


def structurally_equivalent(lhs: NodeView, rhs: NodeView) -> bool:
    """Return True if *lhs* and *rhs* are equal up to attribute and sibling order.

    Unlike a fingerprint comparison this never reports a false match, at the
    cost of pairing up children explicitly.
    """
    if lhs.tag_name != rhs.tag_name or lhs.text_value != rhs.text_value:
        return False

    lhs_attrs = Counter((a.name, a.value) for a in lhs.attributes())
    rhs_attrs = Counter((a.name, a.value) for a in rhs.attributes())
    if lhs_attrs != rhs_attrs:
        return False

    lhs_children = list(lhs.children())
    rhs_children = list(rhs.children())
    if len(lhs_children) != len(rhs_children):
        return False

    # Candidates can only pair with children of the same tag
    unmatched: dict[str, list[NodeView]] = defaultdict(list)
    for child in rhs_children:
        unmatched[child.tag_name].append(child)

    # Equivalence is transitive, so pairing greedily never blocks a valid match
    for child in lhs_children:
        candidates = unmatched[child.tag_name]
        for i, candidate in enumerate(candidates):
            if structurally_equivalent(child, candidate):
                del candidates[i]
                break
        else:
            return False
    return True
