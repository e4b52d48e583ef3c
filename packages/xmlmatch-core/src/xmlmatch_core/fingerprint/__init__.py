"""Node and attribute fingerprints."""

from xmlmatch_core.fingerprint.models import DepthLimitExceededError
from xmlmatch_core.fingerprint.node_key import attribute_key, attributes_key, node_key

__all__ = [
    "DepthLimitExceededError",
    "attribute_key",
    "attributes_key",
    "node_key",
]
