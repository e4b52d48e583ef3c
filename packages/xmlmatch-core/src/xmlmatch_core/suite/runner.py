"""Runs expected-verdict checks over pairs of XML files."""

from __future__ import annotations

import logging
from pathlib import Path

from xmlmatch_core.config.models import MatchCase, XmlMatchConfig
from xmlmatch_core.documents import DocumentLoadError, load_document
from xmlmatch_core.fingerprint import DepthLimitExceededError
from xmlmatch_core.matcher import compare_documents
from xmlmatch_core.suite.models import CaseResult

logger = logging.getLogger(__name__)


class SuiteRunner:
    """Loads each case's documents from the data directory and checks the verdict."""

    def __init__(self, config: XmlMatchConfig, data_dir: Path | None = None) -> None:
        self.config = config
        self.data_dir = data_dir if data_dir is not None else Path(config.suite.data_dir)

    def run(self, cases: list[MatchCase] | None = None) -> list[CaseResult]:
        """Run *cases* (default: the configured ones) in order."""
        if cases is None:
            cases = self.config.suite.cases
        return [self.run_case(case) for case in cases]

    def run_case(self, case: MatchCase) -> CaseResult:
        try:
            lhs = load_document(self.data_dir / case.lhs, settings=self.config.parser)
            rhs = load_document(self.data_dir / case.rhs, settings=self.config.parser)
            result = compare_documents(
                lhs,
                rhs,
                width=self.config.keys.width,
                settings=self.config.match,
            )
        except (DocumentLoadError, DepthLimitExceededError) as e:
            if self.config.suite.fail_fast:
                raise
            logger.warning("Skipping %s vs %s: %s", case.lhs, case.rhs, e)
            return CaseResult(case=case, passed=False, error=str(e))

        passed = result.equivalent == case.expected
        if not passed:
            logger.info(
                "Case %s vs %s: expected %s, got %s",
                case.lhs,
                case.rhs,
                case.expected,
                result.equivalent,
            )
        return CaseResult(case=case, passed=passed, result=result)
