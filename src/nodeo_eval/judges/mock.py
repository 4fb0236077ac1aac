import asyncio

from loguru import logger

from nodeo_eval.judge import JudgeBackend
from nodeo_eval.models import JudgeLimits, JudgeResult

MOCK_STDOUT = "Mock output from Judge0"


class MockJudgeBackend(JudgeBackend):
    """Stand-in judge that accepts everything.

    Echoes the expected output back after an artificial delay, for running the
    tutor without Judge0 credentials.
    """

    def __init__(self, delay: float = 1.0, time: float = 0.001, memory: int = 1024):
        self.delay = delay
        self.time = time
        self.memory = memory

    async def submit(
        self,
        source_code: str,
        language_id: int,
        stdin: str,
        expected_output: str | None,
        limits: JudgeLimits,
    ) -> JudgeResult:
        logger.debug(f"Mock judge received {len(source_code)} chars for language_id={language_id}")
        if self.delay:
            await asyncio.sleep(self.delay)
        return JudgeResult(
            stdout=expected_output or MOCK_STDOUT,
            stderr="",
            status="Accepted",
            time=self.time,
            memory=self.memory,
        )
