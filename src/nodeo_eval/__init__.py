# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
nodeo-eval
"""

__version__ = "0.1.0"

from .adapter import RemoteJudgeAdapter, derive_verdict
from .config import EvaluatorConfig
from .errors import NodeoEvalError, UnsupportedLanguageError
from .evaluator import LocalEvaluator
from .judge import JudgeBackend
from .models import ExecutionResult, JudgeResult, LanguageTests, TestCase, TestResult
from .runner import CodeRunner, CodeRunnerAsync

__all__ = [
    "CodeRunner",
    "CodeRunnerAsync",
    "EvaluatorConfig",
    "ExecutionResult",
    "JudgeBackend",
    "JudgeResult",
    "LanguageTests",
    "LocalEvaluator",
    "NodeoEvalError",
    "RemoteJudgeAdapter",
    "TestCase",
    "TestResult",
    "UnsupportedLanguageError",
    "derive_verdict",
]
