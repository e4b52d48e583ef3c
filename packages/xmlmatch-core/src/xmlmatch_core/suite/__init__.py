from .models import CaseResult
from .runner import SuiteRunner

__all__ = [
    "CaseResult",
    "SuiteRunner",
]
