# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Data models for challenge test cases."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Assertion used for tests that are graded on stdout rather than by expression.
ALWAYS_TRUE = "True"


class TestCase(BaseModel):
    """One verification unit for a challenge in a given language.

    A test is either expression-based (``run``) or stdin/output-based
    (``stdin`` / ``expected_output``), never both.

    Attributes:
        description: Human-readable label shown next to the verdict.
        run: A Python boolean expression evaluated against the captured state.
        stdin: Literal input fed to the submitted program.
        expected_output: Text the program's stdout must equal after trimming.
    """

    __test__ = False  # keep pytest from collecting this class

    model_config = ConfigDict(frozen=True)

    description: str
    run: str | None = None
    stdin: str | None = None
    expected_output: str | None = None

    @property
    def is_stdin_test(self) -> bool:
        return self.stdin is not None or self.expected_output is not None

    @model_validator(mode="after")
    def _check_single_kind(self) -> "TestCase":
        if self.is_stdin_test and self.run not in (None, ALWAYS_TRUE):
            raise ValueError(
                f"Test '{self.description}' mixes an assertion expression with stdin/expected_output"
            )
        return self


class LanguageTests(BaseModel):
    """The per-language block of a challenge definition."""

    model_config = ConfigDict(populate_by_name=True)

    starter: str = ""
    tests: list[TestCase] = Field(default_factory=list)
    stdin_tests: list[TestCase] = Field(default_factory=list, alias="stdinTests")

    def all_tests(self) -> list[TestCase]:
        return normalize_tests(self.tests, self.stdin_tests)


def normalize_tests(tests: Iterable[TestCase], stdin_tests: Iterable[TestCase] = ()) -> list[TestCase]:
    """Merge expression tests and stdin tests into one dispatch list.

    Stdin tests get the always-true placeholder as their expression so that the
    assertion path never decides their verdict.
    """
    merged = list(tests)
    for test in stdin_tests:
        merged.append(test.model_copy(update={"run": ALWAYS_TRUE}))
    return merged
