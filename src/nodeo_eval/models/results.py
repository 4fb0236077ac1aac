# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Data models for execution results."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TestResult(BaseModel):
    """Outcome of one TestCase.

    Attributes:
        description: Copied from the TestCase.
        passed: Whether the test passed.
        error: Set when the assertion itself raised, or when the judge reported
            an error or an output mismatch.
    """

    __test__ = False

    model_config = ConfigDict(frozen=True)

    description: str
    passed: bool
    error: str | None = None


class ExecutionResult(BaseModel):
    """Outcome of one full run across all TestCases for one submission.

    Attributes:
        passed: True iff every result passed and no top-level error occurred.
        results: One TestResult per TestCase, in input order.
        error: Top-level failure; when set, ``results`` is empty.
        logs: Values printed during local execution.
        returns: Same captured values, exposed under the name assertions use.
        time: Summed CPU time in seconds (remote path only).
        memory: Summed memory in kilobytes (remote path only).
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    results: list[TestResult] = Field(default_factory=list)
    error: str | None = None
    logs: list[Any] | None = None
    returns: list[Any] | None = None
    time: float | None = None
    memory: int | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "ExecutionResult":
        if self.error is not None and (self.results or self.passed):
            raise ValueError("A run with a top-level error has no results and cannot pass")
        if self.passed and not all(r.passed for r in self.results):
            raise ValueError("A passing run cannot contain failing results")
        return self

    @classmethod
    def failure(cls, message: str, **extra: Any) -> "ExecutionResult":
        """Builds the result for a run where nothing could be executed."""
        return cls(passed=False, results=[], error=message, **extra)


class JudgeLimits(BaseModel):
    """Resource limits enforced by the remote judging service."""

    cpu_time_limit: float = 5.0
    memory_limit: int = 128000


class JudgeResult(BaseModel):
    """Normalized response of one remote judge submission."""

    stdout: str = ""
    stderr: str = ""
    status: str
    time: float | None = None
    memory: int | None = None


class LanguageInfo(BaseModel):
    """Descriptive metadata for a language offered by the tutor."""

    name: str
    type: Literal["interpreted", "compiled", "hybrid", "unknown"]
    execution: Literal["local", "remote"]
    features: list[str] = Field(default_factory=list)
