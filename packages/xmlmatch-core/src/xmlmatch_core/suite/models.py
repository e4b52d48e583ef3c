"""Result models for the pair-test suite."""

from __future__ import annotations

from pydantic import BaseModel

from xmlmatch_core.config.models import MatchCase
from xmlmatch_core.matcher.models import MatchResult


class CaseResult(BaseModel):
    """Outcome of running one MatchCase."""

    case: MatchCase
    passed: bool
    result: MatchResult | None = None
    error: str | None = None

    @property
    def operator(self) -> str:
        return "==" if self.case.expected else "!="

    @property
    def label(self) -> str:
        return f"[{self.case.lhs}] {self.operator} [{self.case.rhs}]"
