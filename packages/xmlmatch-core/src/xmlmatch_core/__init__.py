"""xmlmatch core - order-insensitive structural fingerprints for XML trees."""

from xmlmatch_core.config import XmlMatchConfig, load_config
from xmlmatch_core.documents import DocumentLoadError, XmlDocument, load_document, parse_document
from xmlmatch_core.fingerprint import DepthLimitExceededError, attributes_key, node_key
from xmlmatch_core.interfaces import AttributeView, DocumentView, NodeView
from xmlmatch_core.keys import combine_loosely, combine_uniquely, hash_text
from xmlmatch_core.matcher import MatchResult, compare_documents, match_loosely, structurally_equivalent
from xmlmatch_core.suite import CaseResult, SuiteRunner

__version__ = "0.1.0"

__all__ = [
    "AttributeView",
    "CaseResult",
    "DepthLimitExceededError",
    "DocumentLoadError",
    "DocumentView",
    "MatchResult",
    "NodeView",
    "SuiteRunner",
    "XmlDocument",
    "XmlMatchConfig",
    "attributes_key",
    "combine_loosely",
    "combine_uniquely",
    "compare_documents",
    "hash_text",
    "load_config",
    "load_document",
    "match_loosely",
    "node_key",
    "parse_document",
    "structurally_equivalent",
]
