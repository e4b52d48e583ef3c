"""Shared test fixtures for xmlmatch."""

from pathlib import Path

import pytest

from xmlmatch_core.config.models import XmlMatchConfig
from xmlmatch_core.documents import parse_document

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def sample_config():
    return XmlMatchConfig()


@pytest.fixture
def bundled_data_dir():
    """The sample case files shipped with the repository."""
    return REPO_ROOT / "test_data"


@pytest.fixture
def xml():
    """Parse an XML string into a document."""
    return lambda text: parse_document(text)


@pytest.fixture
def write_xml(tmp_path):
    """Write XML text into tmp_path and return the file path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Ignore any XMLMATCH_CONFIG set in the surrounding shell."""
    monkeypatch.delenv("XMLMATCH_CONFIG", raising=False)
