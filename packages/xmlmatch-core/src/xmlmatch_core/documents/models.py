"""Errors raised by the document provider."""

from __future__ import annotations


class DocumentLoadError(Exception):
    """Wraps read and parse failures with the source they came from."""

    def __init__(self, source: str, cause: Exception) -> None:
        self.source = source
        super().__init__(f"Failed to load XML document `{source}`: {cause}")
        self.__cause__ = cause
