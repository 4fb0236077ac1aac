# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Any, Iterable, Sequence

from loguru import logger

from nodeo_eval.models import ALWAYS_TRUE, ExecutionResult, TestCase, TestResult
from nodeo_eval.policy import compile_restricted
from nodeo_eval.state import ExecutionState, build_namespace

# Interrupts of the host process itself; everything else raised by a submission is contained.
HOST_EXCEPTIONS = (KeyboardInterrupt, GeneratorExit)

DEFAULT_ALLOWED_MODULES = frozenset(
    {
        "bisect",
        "collections",
        "functools",
        "heapq",
        "itertools",
        "math",
        "re",
        "statistics",
    }
)


def describe_exception(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


class LocalEvaluator:
    """In-process evaluator for the locally executed language.

    Submitted code runs in a fresh namespace whose builtins are restricted to a
    safe subset, with ``print``/``reset``/``logs``/``returns`` as its only
    capabilities. Definitions made by the submission stay in that namespace, so
    test expressions can call them.
    """

    def __init__(self, allowed_modules: Iterable[str] | None = None):
        """Initializes the LocalEvaluator.

        Args:
            allowed_modules: Top-level modules submitted code may import.
                Defaults to a small set of pure standard library modules.
        """
        self.allowed_modules = frozenset(DEFAULT_ALLOWED_MODULES if allowed_modules is None else allowed_modules)

    def evaluate(self, code: str, tests: Sequence[TestCase]) -> ExecutionResult:
        """Execute code and grade it against the assertion expressions.

        Args:
            code: The learner's source code.
            tests: Tests whose ``run`` expressions are evaluated in order.

        Returns:
            ExecutionResult: Per-test verdicts plus the captured output. If the
            code cannot be loaded, ``error`` is set and no test is evaluated.
        """
        state = ExecutionState()
        namespace = build_namespace(state, self.allowed_modules)

        try:
            compiled = compile_restricted(code, "<submission>", "exec")
            exec(compiled, namespace)
        except HOST_EXCEPTIONS:
            raise
        except BaseException as e:
            logger.info(f"Submission failed to load: {describe_exception(e)}")
            return ExecutionResult.failure(describe_exception(e), logs=[], returns=[])

        results = [self._run_assertion(test, namespace, state) for test in tests]
        passed = all(r.passed for r in results)
        logger.debug(f"Local evaluation finished: {sum(r.passed for r in results)}/{len(results)} passed")

        return ExecutionResult(
            passed=passed,
            results=results,
            logs=state.snapshot(),
            returns=state.snapshot(),
        )

    def _run_assertion(self, test: TestCase, namespace: dict[str, Any], state: ExecutionState) -> TestResult:
        # capabilities win over any learner rebinding of the same names
        scope = dict(namespace)
        scope.update(state.capabilities())
        expression = test.run or ALWAYS_TRUE
        try:
            verdict = bool(eval(compile_restricted(expression, "<test>", "eval"), scope))
        except HOST_EXCEPTIONS:
            raise
        except BaseException as e:
            return TestResult(description=test.description, passed=False, error=describe_exception(e))
        return TestResult(description=test.description, passed=verdict)
