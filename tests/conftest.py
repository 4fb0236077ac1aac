from typing import Any, Generator
from unittest.mock import patch

import pytest

from nodeo_eval.config import EvaluatorConfig
from nodeo_eval.judge import JudgeBackend
from nodeo_eval.models import JudgeLimits, JudgeResult


class ScriptedJudge(JudgeBackend):
    """Judge backend that replays canned results and records every call."""

    def __init__(self, results: list[JudgeResult | Exception] | None = None):
        self.results = list(results or [])
        self.calls: list[dict[str, Any]] = []

    async def submit(
        self,
        source_code: str,
        language_id: int,
        stdin: str,
        expected_output: str | None,
        limits: JudgeLimits,
    ) -> JudgeResult:
        self.calls.append(
            {
                "source_code": source_code,
                "language_id": language_id,
                "stdin": stdin,
                "expected_output": expected_output,
                "limits": limits,
            }
        )
        outcome = self.results.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    with patch.dict("os.environ", {}, clear=True):
        yield


@pytest.fixture
def config(clean_env: None) -> EvaluatorConfig:
    return EvaluatorConfig(mock_delay=0.0, enable_audit_logging=False)


@pytest.fixture
def scripted_judge() -> ScriptedJudge:
    return ScriptedJudge()
