from typing import Any, Literal

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from nodeo_eval.evaluator import DEFAULT_ALLOWED_MODULES
from nodeo_eval.integrations.secrets import SecretStore


class SecretsSettingsSource(PydanticBaseSettingsSource):
    """
    Custom Pydantic Settings Source that reads credentials from the secret store.
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        # Unused because __call__ returns the full dict, but required by the ABC.
        return None, field_name, False  # pragma: no cover

    def __call__(self) -> dict[str, Any]:
        store = SecretStore()
        secrets: dict[str, Any] = {}

        # Config field -> secret name
        mapping = {
            "judge0_api_key": "JUDGE0_API_KEY",
        }

        for field, key in mapping.items():
            val = store.get_secret(key)
            if val:
                secrets[field] = val

        return secrets


class EvaluatorConfig(BaseSettings):
    """
    Configuration for the code evaluator.
    """

    local_language: str = "python"
    allowed_modules: set[str] = set(DEFAULT_ALLOWED_MODULES)

    # Remote judge
    judge_backend: Literal["judge0", "mock"] = "mock"
    judge0_url: str = "https://judge0-ce.p.rapidapi.com"
    judge0_host: str = "judge0-ce.p.rapidapi.com"
    judge0_api_key: str | None = None
    cpu_time_limit: float = 5.0
    memory_limit: int = 128000  # KB
    request_timeout: float = 30.0
    mock_delay: float = 1.0

    enable_audit_logging: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="NODEO_EVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            SecretsSettingsSource(settings_cls),
            file_secret_settings,
        )
