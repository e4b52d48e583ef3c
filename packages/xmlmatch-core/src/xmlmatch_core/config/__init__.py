from .loader import CONFIG_ENV_VAR, DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    DEFAULT_CASES,
    KeySettings,
    MatchCase,
    MatchSettings,
    ParserSettings,
    SuiteSettings,
    XmlMatchConfig,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CASES",
    "DEFAULT_CONFIG_TEMPLATE",
    "KeySettings",
    "MatchCase",
    "MatchSettings",
    "ParserSettings",
    "SuiteSettings",
    "XmlMatchConfig",
    "load_config",
]
