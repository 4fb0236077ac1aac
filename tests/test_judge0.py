import json
from typing import Any

import httpx
import pytest

from nodeo_eval.judges.judge0 import Judge0Backend
from nodeo_eval.models import JudgeLimits


def make_backend(handler: Any, api_key: str | None = "key") -> Judge0Backend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return Judge0Backend(base_url="https://judge0.test/", api_key=api_key, host="judge0.test", client=client)


@pytest.mark.asyncio
async def test_submit_success() -> None:
    seen: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            201,
            json={
                "stdout": "5\n",
                "stderr": None,
                "compile_output": None,
                "status": {"id": 3, "description": "Accepted"},
                "time": "0.002",
                "memory": 3200,
            },
        )

    backend = make_backend(handler)
    result = await backend.submit("print(5)", 71, "", "5", JudgeLimits())

    assert result.stdout == "5"
    assert result.stderr == ""
    assert result.status == "Accepted"
    assert result.time == pytest.approx(0.002)
    assert result.memory == 3200

    assert seen["url"] == "https://judge0.test/submissions?base64_encoded=false&wait=true"
    assert seen["headers"]["X-RapidAPI-Key"] == "key"
    assert seen["headers"]["X-RapidAPI-Host"] == "judge0.test"
    assert seen["body"] == {
        "source_code": "print(5)",
        "language_id": 71,
        "stdin": "",
        "expected_output": "5",
        "cpu_time_limit": 5.0,
        "memory_limit": 128000,
    }
    await backend._client.aclose()


@pytest.mark.asyncio
async def test_compile_output_is_reported_as_stderr() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "stdout": None,
                "stderr": None,
                "compile_output": "main.cpp:1:1: error: expected unqualified-id\n",
                "status": {"id": 6, "description": "Compilation Error"},
                "time": None,
                "memory": None,
            },
        )

    backend = make_backend(handler)
    result = await backend.submit("int x", 54, "", None, JudgeLimits())

    assert result.stdout == ""
    assert result.stderr == "main.cpp:1:1: error: expected unqualified-id"
    assert result.status == "Compilation Error"
    assert result.time is None
    assert result.memory is None
    await backend._client.aclose()


@pytest.mark.asyncio
async def test_no_rapidapi_headers_without_key() -> None:
    seen: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        return httpx.Response(200, json={"status": {"description": "Accepted"}})

    backend = make_backend(handler, api_key=None)
    await backend.submit("x", 71, "", None, JudgeLimits())

    assert "X-RapidAPI-Key" not in seen["headers"]
    assert "X-RapidAPI-Host" not in seen["headers"]
    await backend._client.aclose()


@pytest.mark.asyncio
async def test_http_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"message": "Too many requests"})

    backend = make_backend(handler)
    with pytest.raises(httpx.HTTPStatusError):
        await backend.submit("x", 71, "", None, JudgeLimits())
    await backend._client.aclose()


@pytest.mark.asyncio
async def test_aclose_only_closes_internal_client() -> None:
    shared = httpx.AsyncClient()
    backend = Judge0Backend(client=shared)
    await backend.aclose()
    assert shared.is_closed is False
    await shared.aclose()

    owned = Judge0Backend()
    await owned.aclose()
    assert owned._client.is_closed is True
