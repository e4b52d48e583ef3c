import os

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal


class MatchCase(BaseModel):
    """One expected verdict for a pair of documents."""

    model_config = ConfigDict(frozen=True)

    lhs: str
    rhs: str
    expected: bool


DEFAULT_CASES: list[MatchCase] = [
    MatchCase(lhs="1.xml", rhs="2.xml", expected=True),
    MatchCase(lhs="3.xml", rhs="4.xml", expected=False),
    MatchCase(lhs="5.xml", rhs="6.xml", expected=True),
    MatchCase(lhs="7.xml", rhs="8.xml", expected=True),
    MatchCase(lhs="9.xml", rhs="10.xml", expected=True),
    MatchCase(lhs="11.xml", rhs="12.xml", expected=False),
    MatchCase(lhs="13.xml", rhs="14.xml", expected=True),
    MatchCase(lhs="15.xml", rhs="16.xml", expected=True),
    MatchCase(lhs="17.xml", rhs="18.xml", expected=False),
]


class KeySettings(BaseModel):
    width: Literal[32, 64, 128] = 64


class MatchSettings(BaseModel):
    confirm_matches: bool = False
    max_depth: int | None = Field(default=512, gt=0)


class ParserSettings(BaseModel):
    strip_text: bool = False
    huge_tree: bool = False


class SuiteSettings(BaseModel):
    data_dir: str = "test_data"
    cases: list[MatchCase] = Field(default_factory=lambda: list(DEFAULT_CASES))
    fail_fast: bool = False

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, v: str) -> str:
        """Expand ``$VAR``/``${VAR}`` references and a leading ``~``."""
        return os.path.expanduser(os.path.expandvars(v))


class XmlMatchConfig(BaseModel):
    keys: KeySettings = Field(default_factory=KeySettings)
    match: MatchSettings = Field(default_factory=MatchSettings)
    parser: ParserSettings = Field(default_factory=ParserSettings)
    suite: SuiteSettings = Field(default_factory=SuiteSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
