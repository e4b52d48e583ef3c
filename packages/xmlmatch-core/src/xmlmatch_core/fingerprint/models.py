"""Errors raised while fingerprinting a tree."""

from __future__ import annotations


class DepthLimitExceededError(Exception):
    """Raised when a tree is nested deeper than the caller allows."""

    def __init__(self, max_depth: int, tag_name: str) -> None:
        self.max_depth = max_depth
        self.tag_name = tag_name
        where = f"element <{tag_name}>" if tag_name else "a text node"
        super().__init__(f"Tree depth exceeds limit of {max_depth} at {where}")
