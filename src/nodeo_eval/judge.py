# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from abc import ABC, abstractmethod

from nodeo_eval.models import JudgeLimits, JudgeResult


class JudgeBackend(ABC):
    """
    Abstract base class for remote judging services (e.g., Judge0, a mock).
    Follows the Strategy Pattern.
    """

    @abstractmethod
    async def submit(
        self,
        source_code: str,
        language_id: int,
        stdin: str,
        expected_output: str | None,
        limits: JudgeLimits,
    ) -> JudgeResult:
        """Run one submission on the judging service.

        Args:
            source_code: The program to run.
            language_id: The service's internal language identifier.
            stdin: Input fed to the program.
            expected_output: Output the program is expected to produce, if any.
            limits: CPU time and memory limits enforced by the service.

        Returns:
            JudgeResult: The normalized stdout, stderr, status and telemetry.

        Raises:
            httpx.HTTPError: If the service cannot be reached or rejects the request.
        """
        pass  # pragma: no cover

    async def aclose(self) -> None:
        """Release any resources held by the backend."""
        return None
