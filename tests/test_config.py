from unittest.mock import patch

from nodeo_eval.config import EvaluatorConfig, SecretsSettingsSource
from nodeo_eval.evaluator import DEFAULT_ALLOWED_MODULES


def test_defaults(clean_env: None) -> None:
    config = EvaluatorConfig()
    assert config.local_language == "python"
    assert config.judge_backend == "mock"
    assert config.cpu_time_limit == 5.0
    assert config.memory_limit == 128000
    assert config.judge0_api_key is None
    assert config.allowed_modules == set(DEFAULT_ALLOWED_MODULES)


def test_env_overrides(clean_env: None) -> None:
    with patch.dict(
        "os.environ",
        {
            "NODEO_EVAL_JUDGE_BACKEND": "judge0",
            "NODEO_EVAL_CPU_TIME_LIMIT": "2.5",
            "NODEO_EVAL_ALLOWED_MODULES": '["math"]',
        },
    ):
        config = EvaluatorConfig()
    assert config.judge_backend == "judge0"
    assert config.cpu_time_limit == 2.5
    assert config.allowed_modules == {"math"}


def test_secret_source_injects_api_key(clean_env: None) -> None:
    """The judge key is read from the secret store when not set explicitly."""
    with patch.dict("os.environ", {"JUDGE0_API_KEY": "secret_key"}):
        config = EvaluatorConfig()
        assert config.judge0_api_key == "secret_key"


def test_secret_source_ignores_missing(clean_env: None) -> None:
    source = SecretsSettingsSource(EvaluatorConfig)
    assert source() == {}


def test_init_value_wins_over_secret(clean_env: None) -> None:
    with patch.dict("os.environ", {"JUDGE0_API_KEY": "secret_key"}):
        config = EvaluatorConfig(judge0_api_key="explicit")
        assert config.judge0_api_key == "explicit"
