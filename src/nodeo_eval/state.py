# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import builtins
from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator

from nodeo_eval.policy import make_guarded_getattr

SAFE_BUILTINS = frozenset(
    {
        "__build_class__",
        "abs",
        "all",
        "any",
        "bin",
        "bool",
        "callable",
        "chr",
        "classmethod",
        "dict",
        "divmod",
        "enumerate",
        "filter",
        "float",
        "format",
        "frozenset",
        "getattr",
        "hasattr",
        "hash",
        "hex",
        "int",
        "isinstance",
        "issubclass",
        "iter",
        "len",
        "list",
        "map",
        "max",
        "min",
        "next",
        "object",
        "oct",
        "ord",
        "pow",
        "property",
        "range",
        "repr",
        "reversed",
        "round",
        "set",
        "slice",
        "sorted",
        "staticmethod",
        "str",
        "sum",
        "super",
        "tuple",
        "type",
        "zip",
        # exceptions learners raise and catch
        "ArithmeticError",
        "AssertionError",
        "AttributeError",
        "BaseException",
        "Exception",
        "ImportError",
        "IndexError",
        "KeyError",
        "LookupError",
        "NameError",
        "NotImplementedError",
        "OverflowError",
        "RecursionError",
        "RuntimeError",
        "StopIteration",
        "TypeError",
        "ValueError",
        "ZeroDivisionError",
    }
)

CAPABILITY_NAMES = ("print", "reset", "logs", "returns")


class CaptureView(Sequence):
    """Read-only view over the values captured during a run."""

    def __init__(self, values: list[Any]):
        self._values = values

    def __getitem__(self, index: Any) -> Any:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CaptureView):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._values)


class ExecutionState:
    """Side-channel output captured during one local evaluation.

    ``logs`` and ``returns`` are two views over the same list: every printed
    value shows up in both, and ``reset`` clears both in place.
    """

    def __init__(self) -> None:
        self._captured: list[Any] = []
        self.logs = CaptureView(self._captured)
        self.returns = CaptureView(self._captured)

    def capture(self, value: Any) -> None:
        self._captured.append(value)

    def reset(self) -> None:
        self._captured.clear()

    def snapshot(self) -> list[Any]:
        return list(self._captured)

    def make_print(self) -> Callable[..., None]:
        """Returns the print primitive handed to submitted code."""

        def sandbox_print(*args: Any, sep: str | None = " ", **_: Any) -> None:
            if len(args) == 1:
                self.capture(args[0])
            else:
                self.capture((" " if sep is None else sep).join(str(a) for a in args))

        return sandbox_print

    def capabilities(self) -> dict[str, Any]:
        return {
            "print": self.make_print(),
            "reset": self.reset,
            "logs": self.logs,
            "returns": self.returns,
        }


def make_guarded_import(allowed_modules: Iterable[str]) -> Callable[..., Any]:
    """Builds an ``__import__`` that only admits allowlisted top-level modules."""
    allowed = frozenset(allowed_modules)
    real_import = builtins.__import__

    def guarded_import(
        name: str,
        globals: Any = None,
        locals: Any = None,
        fromlist: Any = (),
        level: int = 0,
    ) -> Any:
        if level != 0 or name.split(".")[0] not in allowed:
            raise ImportError(f"Module '{name}' is not available in the sandbox")
        return real_import(name, globals, locals, fromlist, level)

    return guarded_import


def build_namespace(state: ExecutionState, allowed_modules: Iterable[str]) -> dict[str, Any]:
    """Creates the isolated global scope submitted code runs in."""
    safe_builtins = {name: getattr(builtins, name) for name in SAFE_BUILTINS}
    safe_builtins["__import__"] = make_guarded_import(allowed_modules)
    safe_builtins["getattr"] = make_guarded_getattr(getattr)
    safe_builtins["hasattr"] = make_guarded_getattr(hasattr)
    namespace: dict[str, Any] = {
        "__builtins__": safe_builtins,
        "__name__": "__submission__",
    }
    namespace.update(state.capabilities())
    return namespace
