"""Document-level matching by root fingerprint."""

from __future__ import annotations

import logging

from xmlmatch_core.config.models import MatchSettings
from xmlmatch_core.fingerprint import node_key
from xmlmatch_core.interfaces import DocumentView
from xmlmatch_core.keys import DEFAULT_KEY_WIDTH, format_key
from xmlmatch_core.matcher.models import MatchResult
from xmlmatch_core.matcher.structural import structurally_equivalent

logger = logging.getLogger(__name__)


def match_loosely(
    lhs: DocumentView,
    rhs: DocumentView,
    *,
    width: int = DEFAULT_KEY_WIDTH,
    max_depth: int | None = None,
) -> bool:
    """Return True if both documents have the same root fingerprint.

    Equal keys mean the documents are *probably* equivalent up to attribute
    and sibling order: two different trees can fold to the same key. Use
    :func:`compare_documents` with ``confirm_matches`` to rule that out.
    """
    lhs_key = node_key(lhs.root, width=width, max_depth=max_depth)
    rhs_key = node_key(rhs.root, width=width, max_depth=max_depth)
    return lhs_key == rhs_key


def compare_documents(
    lhs: DocumentView,
    rhs: DocumentView,
    *,
    width: int = DEFAULT_KEY_WIDTH,
    settings: MatchSettings | None = None,
) -> MatchResult:
    """Fingerprint both documents and report the verdict with both keys."""
    settings = settings or MatchSettings()
    lhs_key = node_key(lhs.root, width=width, max_depth=settings.max_depth)
    rhs_key = node_key(rhs.root, width=width, max_depth=settings.max_depth)
    logger.debug(
        "Root keys: lhs=%s rhs=%s", format_key(lhs_key, width), format_key(rhs_key, width)
    )

    if lhs_key != rhs_key:
        return MatchResult(equivalent=False, lhs_key=lhs_key, rhs_key=rhs_key, width=width)

    if not settings.confirm_matches:
        return MatchResult(equivalent=True, lhs_key=lhs_key, rhs_key=rhs_key, width=width)

    equivalent = structurally_equivalent(lhs.root, rhs.root)
    if not equivalent:
        logger.warning(
            "Key collision: documents share key %s but differ structurally",
            format_key(lhs_key, width),
        )
    return MatchResult(
        equivalent=equivalent,
        lhs_key=lhs_key,
        rhs_key=rhs_key,
        width=width,
        confirmed=True,
        collision=not equivalent,
    )
