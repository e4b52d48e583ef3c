"""Parse XML text or files into documents the matcher can fingerprint."""

from __future__ import annotations

import logging
from pathlib import Path

import lxml.etree as ET

from xmlmatch_core.config.models import ParserSettings
from xmlmatch_core.documents.lxml_adapter import XmlDocument
from xmlmatch_core.documents.models import DocumentLoadError

logger = logging.getLogger(__name__)


def _make_parser(settings: ParserSettings) -> ET.XMLParser:
    return ET.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
        huge_tree=settings.huge_tree,
    )


def parse_document(
    data: str | bytes,
    *,
    source: str = "<string>",
    settings: ParserSettings | None = None,
) -> XmlDocument:
    """Parse *data* into an :class:`XmlDocument`.

    Raises DocumentLoadError if the markup is not well formed.
    """
    settings = settings or ParserSettings()
    if isinstance(data, str):
        # lxml rejects str input that carries an encoding declaration
        data = data.encode("utf-8")
    try:
        root = ET.fromstring(data, _make_parser(settings))
    except ET.XMLSyntaxError as e:
        raise DocumentLoadError(source, e) from e
    return XmlDocument(root, source, strip_text=settings.strip_text)


def load_document(path: Path | str, *, settings: ParserSettings | None = None) -> XmlDocument:
    """Read and parse the XML file at *path*."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentLoadError(str(path), e) from e
    logger.debug("Loaded %s (%d bytes)", path, len(data))
    return parse_document(data, source=str(path), settings=settings)
