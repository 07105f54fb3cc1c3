"""
Schema definitions for deep-equals.

Exports the comparison failure records and the run result records used by the runner.
"""

from .failure import ComparisonResult, Failure
from .results import AssertionCase, CaseResult, RunResult, RunSummary

__all__ = [
    "AssertionCase",
    "CaseResult",
    "ComparisonResult",
    "Failure",
    "RunResult",
    "RunSummary",
]
