from typing import Any

import httpx
from loguru import logger

from nodeo_eval.judge import JudgeBackend
from nodeo_eval.models import JudgeLimits, JudgeResult


class Judge0Backend(JudgeBackend):
    """Judge0 CE implementation of the JudgeBackend.

    Submits synchronously (``wait=true``) so each call returns the finished
    verdict.
    """

    def __init__(
        self,
        base_url: str = "https://judge0-ce.p.rapidapi.com",
        api_key: str | None = None,
        host: str | None = "judge0-ce.p.rapidapi.com",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initializes the Judge0Backend.

        Args:
            base_url: Root URL of the Judge0 deployment.
            api_key: RapidAPI key. Headers are only sent when a key is set.
            host: Value for the X-RapidAPI-Host header.
            timeout: HTTP timeout in seconds.
            client: Optional httpx.AsyncClient for connection pooling.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.host = host
        self.timeout = timeout
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"content-type": "application/json"}
        if self.api_key:
            headers["X-RapidAPI-Key"] = self.api_key
            if self.host:
                headers["X-RapidAPI-Host"] = self.host
        return headers

    async def submit(
        self,
        source_code: str,
        language_id: int,
        stdin: str,
        expected_output: str | None,
        limits: JudgeLimits,
    ) -> JudgeResult:
        payload = {
            "source_code": source_code,
            "language_id": language_id,
            "stdin": stdin,
            "expected_output": expected_output,
            "cpu_time_limit": limits.cpu_time_limit,
            "memory_limit": limits.memory_limit,
        }
        logger.debug(f"Posting submission to Judge0 (language_id={language_id})")
        response = await self._client.post(
            f"{self.base_url}/submissions",
            params={"base64_encoded": "false", "wait": "true"},
            json=payload,
            headers=self._headers(),
        )
        response.raise_for_status()
        return self._parse(response.json())

    @staticmethod
    def _parse(body: dict[str, Any]) -> JudgeResult:
        status = body.get("status") or {}
        stderr = (body.get("stderr") or "").strip() or (body.get("compile_output") or "").strip()
        time_value = body.get("time")
        memory_value = body.get("memory")
        return JudgeResult(
            stdout=(body.get("stdout") or "").strip(),
            stderr=stderr,
            status=status.get("description", "Unknown") if isinstance(status, dict) else str(status),
            time=float(time_value) if time_value not in (None, "") else None,
            memory=int(memory_value) if memory_value not in (None, "") else None,
        )

    async def aclose(self) -> None:
        if self._internal_client:
            await self._client.aclose()
