# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Mapping

from loguru import logger

from nodeo_eval.errors import UnsupportedLanguageError
from nodeo_eval.judge import JudgeBackend
from nodeo_eval.languages import LanguageSpec
from nodeo_eval.models import JudgeLimits, JudgeResult, TestCase, TestResult

ACCEPTED_STATUSES = frozenset({"Accepted", "OK"})


class RemoteJudgeAdapter:
    """Client for the external judging service.

    Maps language names to judge ids and turns every backend failure into an
    ``Error`` JudgeResult, so one broken request never aborts a run.
    """

    def __init__(
        self,
        backend: JudgeBackend,
        languages: Mapping[str, LanguageSpec],
        limits: JudgeLimits | None = None,
    ):
        self.backend = backend
        self.languages = languages
        self.limits = limits or JudgeLimits()

    def is_supported(self, language: str) -> bool:
        spec = self.languages.get(language.lower())
        return spec is not None and spec.judge_id is not None

    def language_id(self, language: str) -> int:
        """Resolve the judge's id for a language.

        Raises:
            UnsupportedLanguageError: If the judge does not know the language.
        """
        spec = self.languages.get(language.lower())
        if spec is None or spec.judge_id is None:
            raise UnsupportedLanguageError(language)
        return spec.judge_id

    async def submit(
        self,
        source_code: str,
        language: str,
        stdin: str = "",
        expected_output: str | None = None,
        limits: JudgeLimits | None = None,
    ) -> JudgeResult:
        """Run one submission remotely.

        Args:
            source_code: The program to run.
            language: Language name from the language table.
            stdin: Input fed to the program.
            expected_output: Output the program should produce, if any.
            limits: Overrides the adapter's default limits.

        Returns:
            JudgeResult: The judge's answer, or ``status="Error"`` with the
            failure in ``stderr`` when the request failed.

        Raises:
            UnsupportedLanguageError: Before any request, if the language is unknown.
        """
        language_id = self.language_id(language)
        logger.info(f"Submitting {language} code to judge (language_id={language_id})")
        try:
            return await self.backend.submit(
                source_code,
                language_id,
                stdin,
                expected_output,
                limits or self.limits,
            )
        except Exception as e:
            logger.error(f"Judge submission failed: {e}")
            return JudgeResult(stdout="", stderr=f"Execution error: {e}", status="Error")


def derive_verdict(test: TestCase, result: JudgeResult) -> TestResult:
    """Grade one remotely judged test.

    A reported error wins over the output comparison; an empty or
    missing expected output leaves the verdict to the judge's status.
    """
    if result.stderr:
        return TestResult(description=test.description, passed=False, error=result.stderr)

    if test.expected_output:
        expected = test.expected_output.strip()
        actual = result.stdout.strip()
        if actual == expected:
            return TestResult(description=test.description, passed=True)
        return TestResult(
            description=test.description,
            passed=False,
            error=f'Expected: "{expected}", Got: "{actual}"',
        )

    if result.status in ACCEPTED_STATUSES:
        return TestResult(description=test.description, passed=True)
    return TestResult(description=test.description, passed=False, error=f"Status: {result.status}")
