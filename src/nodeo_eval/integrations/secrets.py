import os

from loguru import logger


class SecretStore:
    """
    Reads secrets from environment variables.
    Accepts both the bare name and the ``NODEO_EVAL_`` prefixed one.
    """

    def __init__(self, prefix: str = "NODEO_EVAL_"):
        self.prefix = prefix

    def get_secret(self, key: str) -> str | None:
        val = os.getenv(key)
        if not val:
            val = os.getenv(f"{self.prefix}{key}")

        if not val:
            logger.debug(f"Secret {key} not found in environment.")

        return val
