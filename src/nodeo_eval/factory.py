import httpx

from nodeo_eval.config import EvaluatorConfig
from nodeo_eval.judge import JudgeBackend
from nodeo_eval.judges.judge0 import Judge0Backend
from nodeo_eval.judges.mock import MockJudgeBackend


class JudgeFactory:
    """
    Factory to create JudgeBackend instances based on configuration.
    """

    @staticmethod
    def get_backend(config: EvaluatorConfig, client: httpx.AsyncClient | None = None) -> JudgeBackend:
        """
        Returns an instance of the configured JudgeBackend.
        """
        if config.judge_backend == "judge0":
            return Judge0Backend(
                base_url=config.judge0_url,
                api_key=config.judge0_api_key,
                host=config.judge0_host,
                timeout=config.request_timeout,
                client=client,
            )
        elif config.judge_backend == "mock":
            return MockJudgeBackend(delay=config.mock_delay)
        else:
            # Unreachable given the Literal validation.
            raise ValueError(f"Unknown judge backend: {config.judge_backend}")  # pragma: no cover
