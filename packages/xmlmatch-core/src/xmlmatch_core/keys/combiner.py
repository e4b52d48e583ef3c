"""Fixed-width key primitives: text hashing and the two key combiners."""

from __future__ import annotations

import hashlib
from functools import reduce
from operator import xor

Key = int

# Golden-ratio constant used by the classic hash-combine step
MAGIC = 0x9E3779B9

DEFAULT_KEY_WIDTH = 64
SUPPORTED_KEY_WIDTHS = (32, 64, 128)


def key_mask(width: int = DEFAULT_KEY_WIDTH) -> int:
    """Return the all-ones mask for a key of *width* bits."""
    if width not in SUPPORTED_KEY_WIDTHS:
        raise ValueError(
            f"Unsupported key width {width!r}; expected one of {SUPPORTED_KEY_WIDTHS}"
        )
    return (1 << width) - 1


def hash_text(text: str, width: int = DEFAULT_KEY_WIDTH) -> Key:
    """BLAKE2b digest of *text*, truncated to *width* bits."""
    key_mask(width)
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=width // 8).digest()
    return int.from_bytes(digest, "big")


def combine_uniquely(*keys: Key, width: int = DEFAULT_KEY_WIDTH) -> Key:
    """Fold *keys* so that both value and position affect the result.

    Each step mixes the running accumulator into the next key with the
    ``acc ^= key + MAGIC + (acc << 6) + (acc >> 2)`` recurrence, truncated
    to *width* bits. Swapping two distinct keys changes the result with
    overwhelming probability. No keys yields zero.
    """
    mask = key_mask(width)
    acc = 0
    for key in keys:
        acc = (acc ^ (key + MAGIC + (acc << 6) + (acc >> 2))) & mask
    return acc


def combine_loosely(*keys: Key, width: int = DEFAULT_KEY_WIDTH) -> Key:
    """XOR *keys* together: the result ignores their order.

    Zero keys (or extra zero-valued keys) leave the result unchanged.
    """
    return reduce(xor, keys, 0) & key_mask(width)


def format_key(key: Key, width: int = DEFAULT_KEY_WIDTH) -> str:
    """Zero-padded lowercase hex rendering of *key*."""
    return f"{key & key_mask(width):0{width // 4}x}"
