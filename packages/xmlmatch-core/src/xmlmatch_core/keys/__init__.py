"""Key combiners shared by the fingerprinting layers."""

from xmlmatch_core.keys.combiner import (
    DEFAULT_KEY_WIDTH,
    MAGIC,
    SUPPORTED_KEY_WIDTHS,
    Key,
    combine_loosely,
    combine_uniquely,
    format_key,
    hash_text,
    key_mask,
)

__all__ = [
    "DEFAULT_KEY_WIDTH",
    "Key",
    "MAGIC",
    "SUPPORTED_KEY_WIDTHS",
    "combine_loosely",
    "combine_uniquely",
    "format_key",
    "hash_text",
    "key_mask",
]
