# src/nodeo_eval/models/__init__.py

"""
Data models for test cases and execution results.
"""

from .results import ExecutionResult, JudgeLimits, JudgeResult, LanguageInfo, TestResult
from .tests import ALWAYS_TRUE, LanguageTests, TestCase, normalize_tests

__all__ = [
    "ALWAYS_TRUE",
    "ExecutionResult",
    "JudgeLimits",
    "JudgeResult",
    "LanguageInfo",
    "LanguageTests",
    "TestCase",
    "TestResult",
    "normalize_tests",
]
