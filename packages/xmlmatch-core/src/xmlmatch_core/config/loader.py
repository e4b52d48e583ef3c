"""YAML config loading and resolution."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import XmlMatchConfig

# Names a config file to use when --config is not given
CONFIG_ENV_VAR = "XMLMATCH_CONFIG"


def load_config(cli_path: str | None = None) -> XmlMatchConfig:
    """Load config with resolution order: CLI > $XMLMATCH_CONFIG > project-local > user-global > defaults.

    An explicitly named file (CLI or environment) must exist; the
    project-local and user-global files are optional.
    """
    explicit = cli_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        return _read_config(path) or XmlMatchConfig()

    for path in (Path("./xmlmatch.yaml"), Path.home() / ".xmlmatch" / "config.yaml"):
        if path.is_file():
            config = _read_config(path)
            if config is not None:
                return config

    return XmlMatchConfig()


def _read_config(path: Path) -> XmlMatchConfig | None:
    """Parse one YAML file; ``None`` when the file is empty."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    try:
        return XmlMatchConfig(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


# Default YAML template for `xmlmatch config init`
DEFAULT_CONFIG_TEMPLATE = """\
# xmlmatch.yaml

# Fingerprint keys
keys:
  width: 64                    # 32 | 64 | 128 bits

# Matching
match:
  confirm_matches: false       # re-check equal keys with a full structural comparison
  max_depth: 512               # deepest element nesting accepted

# Parsing
parser:
  strip_text: false            # strip surrounding whitespace from element text
  huge_tree: false             # lift lxml's safety limits for very large documents

# Pair-test suite
suite:
  data_dir: "test_data"         # $VAR and ~ are expanded
  fail_fast: false
  # cases:
  #   - {lhs: "1.xml", rhs: "2.xml", expected: true}

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
