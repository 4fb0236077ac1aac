# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Any

import anyio
from mcp.server.fastmcp import FastMCP

from nodeo_eval.config import EvaluatorConfig
from nodeo_eval.models import TestCase
from nodeo_eval.runner import CodeRunnerAsync
from nodeo_eval.utils.logger import setup_logger

config = EvaluatorConfig()

# Initialize Runner Logic
runner = CodeRunnerAsync(config)

# Initialize MCP Server
mcp = FastMCP("nodeo-eval")


@mcp.tool()  # type: ignore[misc]
async def run_code(language: str, code: str, tests: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Run learner code against a list of tests.
    Each test has a description and either a `run` expression or stdin/expected_output.
    """
    try:
        cases = [TestCase.model_validate(t) for t in tests]
    except ValueError as e:
        return {"passed": False, "results": [], "error": f"Invalid tests: {e!s}"}

    result = await runner.run(language, code, cases)
    output = result.model_dump(exclude={"logs", "returns"})
    output["logs"] = _displayable(result.logs)
    output["returns"] = _displayable(result.returns)
    return output


def _displayable(values: list[Any] | None) -> list[Any] | None:
    # Captured values can be arbitrary learner objects; anything not JSON-native is shown by repr.
    if values is None:
        return None
    return [v if isinstance(v, (str, int, float, bool, type(None))) else repr(v) for v in values]


@mcp.tool()  # type: ignore[misc]
async def list_languages() -> list[str]:
    """
    List the languages submissions can be run in.
    """
    return runner.supported_languages()


@mcp.tool()  # type: ignore[misc]
async def describe_language(language: str) -> dict[str, Any]:
    """
    Describe how a language is executed.
    """
    return runner.describe_language(language).model_dump()


def main() -> None:
    """Entry point for the MCP server."""
    setup_logger(level=config.log_level)
    try:
        mcp.run()
    finally:
        anyio.run(runner.aclose)


if __name__ == "__main__":  # pragma: no cover
    main()
