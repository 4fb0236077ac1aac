# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Sequence

import anyio
import httpx
from loguru import logger

from nodeo_eval.adapter import RemoteJudgeAdapter, derive_verdict
from nodeo_eval.config import EvaluatorConfig
from nodeo_eval.errors import UnsupportedLanguageError
from nodeo_eval.evaluator import LocalEvaluator
from nodeo_eval.factory import JudgeFactory
from nodeo_eval.judge import JudgeBackend
from nodeo_eval.languages import build_language_table, describe_language
from nodeo_eval.models import ExecutionResult, JudgeLimits, LanguageInfo, LanguageTests, TestCase, TestResult
from nodeo_eval.utils.audit import SubmissionAuditor


class CodeRunnerAsync:
    """Async-native unified runner (The Core).

    Dispatches a submission to the local evaluator or to the remote judge and
    always answers with an ExecutionResult.
    """

    def __init__(
        self,
        config: EvaluatorConfig | None = None,
        client: httpx.AsyncClient | None = None,
        backend: JudgeBackend | None = None,
    ):
        """Initializes the CodeRunnerAsync service.

        Args:
            config: Configuration for the evaluator.
            client: Optional httpx.AsyncClient for connection pooling.
            backend: Optional judge backend; built from config when omitted.
        """
        self.config = config or EvaluatorConfig()
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.config.request_timeout)
        self.languages = build_language_table(self.config.local_language)
        self.local_language = self.config.local_language.lower()
        self.evaluator = LocalEvaluator(self.config.allowed_modules)
        self._internal_backend = backend is None
        self.backend = backend or JudgeFactory.get_backend(self.config, self._client)
        self.adapter = RemoteJudgeAdapter(
            self.backend,
            self.languages,
            JudgeLimits(cpu_time_limit=self.config.cpu_time_limit, memory_limit=self.config.memory_limit),
        )
        self.auditor = SubmissionAuditor(enabled=self.config.enable_audit_logging)

    async def __aenter__(self) -> "CodeRunnerAsync":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Closes the judge backend and the internally created HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._internal_backend:
            await self.backend.aclose()
        if self._internal_client:
            await self._client.aclose()

    def supported_languages(self) -> list[str]:
        return sorted(self.languages)

    def describe_language(self, language: str) -> LanguageInfo:
        return describe_language(language, self.languages)

    async def run(self, language: str, code: str, tests: Sequence[TestCase]) -> ExecutionResult:
        """Runs a submission against its tests.

        Args:
            language: The language the code is written in.
            code: The learner's source code.
            tests: The tests to grade the submission with.

        Returns:
            ExecutionResult: The aggregated verdict. Execution faults never
            raise; an unsupported language yields a result with ``error`` set.
        """
        logger.info(f"Running {language} code with {len(tests)} test cases")
        self.auditor.log_submission(code, language)

        if language.lower() == self.local_language:
            return self.evaluator.evaluate(code, tests)

        if not self.adapter.is_supported(language):
            logger.warning(f"Rejected submission in unsupported language: {language}")
            return ExecutionResult.failure(str(UnsupportedLanguageError(language)))

        return await self._run_remote(language, code, tests)

    async def run_challenge(self, language: str, code: str, block: LanguageTests) -> ExecutionResult:
        """Runs a submission against a challenge's per-language test block."""
        return await self.run(language, code, block.all_tests())

    async def _run_remote(self, language: str, code: str, tests: Sequence[TestCase]) -> ExecutionResult:
        results: list[TestResult] = []
        total_time: float | None = None
        total_memory: int | None = None

        # One test at a time so telemetry sums and errors map to a single test.
        for test in tests:
            logger.debug(f"Running test: {test.description}")
            judged = await self.adapter.submit(
                code,
                language,
                stdin=test.stdin or "",
                expected_output=test.expected_output,
            )
            if judged.time is not None:
                total_time = (total_time or 0.0) + judged.time
            if judged.memory is not None:
                total_memory = (total_memory or 0) + judged.memory

            result = derive_verdict(test, judged)
            results.append(result)
            logger.debug(f"Test {test.description}: {'PASSED' if result.passed else 'FAILED'}")

        return ExecutionResult(
            passed=all(r.passed for r in results),
            results=results,
            time=total_time,
            memory=total_memory,
        )


class CodeRunner:
    """Sync Facade for CodeRunnerAsync (The Facade).

    Wraps CodeRunnerAsync and executes methods via anyio.run.
    """

    def __init__(
        self,
        config: EvaluatorConfig | None = None,
        backend: JudgeBackend | None = None,
    ):
        self.config = config or EvaluatorConfig()
        self._backend = backend

    def _runner(self) -> CodeRunnerAsync:
        # Each anyio.run call owns its event loop, so the HTTP client cannot outlive it.
        return CodeRunnerAsync(self.config, backend=self._backend)

    def supported_languages(self) -> list[str]:
        return sorted(build_language_table(self.config.local_language))

    def describe_language(self, language: str) -> LanguageInfo:
        return describe_language(language, build_language_table(self.config.local_language))

    def run(self, language: str, code: str, tests: Sequence[TestCase]) -> ExecutionResult:
        """Runs a submission synchronously."""

        async def _run() -> ExecutionResult:
            async with self._runner() as runner:
                return await runner.run(language, code, tests)

        return anyio.run(_run)

    def run_challenge(self, language: str, code: str, block: LanguageTests) -> ExecutionResult:
        """Runs a submission against a challenge block synchronously."""
        return self.run(language, code, block.all_tests())
