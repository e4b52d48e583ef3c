"""XML document provider backed by lxml."""

from xmlmatch_core.documents.loader import load_document, parse_document
from xmlmatch_core.documents.lxml_adapter import XmlAttribute, XmlDocument, XmlNode, XmlText
from xmlmatch_core.documents.models import DocumentLoadError

__all__ = [
    "DocumentLoadError",
    "XmlAttribute",
    "XmlDocument",
    "XmlNode",
    "XmlText",
    "load_document",
    "parse_document",
]
