"""Polycase - self-verifying test cases grouped into pytest test classes."""

from .assertions import Assert, AssertionFailedError, AssertionResult
from .case import Case
from .group import CaseGroup
from .runner import CaseResult, CaseStatus, GroupRunner, GroupRunResult, run
from .version import __version__


__all__ = [
    # Core
    "Case",
    "CaseGroup",
    # Assertions
    "Assert",
    "AssertionFailedError",
    "AssertionResult",
    # Standalone runner
    "CaseResult",
    "CaseStatus",
    "GroupRunResult",
    "GroupRunner",
    "run",
]
