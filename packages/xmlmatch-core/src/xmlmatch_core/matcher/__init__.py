"""Document matching by order-insensitive structural fingerprint."""

from xmlmatch_core.matcher.loose import compare_documents, match_loosely
from xmlmatch_core.matcher.models import MatchResult
from xmlmatch_core.matcher.structural import structurally_equivalent

__all__ = [
    "MatchResult",
    "compare_documents",
    "match_loosely",
    "structurally_equivalent",
]
