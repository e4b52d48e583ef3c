"""Data models for the document matcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing two documents by fingerprint."""

    equivalent: bool
    lhs_key: int
    rhs_key: int
    width: int = 64
    # True when equal keys were re-checked with a full structural comparison
    confirmed: bool = False
    # True when keys were equal but the structural comparison disagreed
    collision: bool = False

    @property
    def keys_equal(self) -> bool:
        return self.lhs_key == self.rhs_key
