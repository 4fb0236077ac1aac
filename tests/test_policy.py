import pytest

from nodeo_eval.errors import NodeoEvalError, SandboxViolationError
from nodeo_eval.policy import compile_restricted, make_guarded_getattr


@pytest.mark.parametrize(
    "source",
    [
        "for _ in range(3):\n    pass",
        "class A:\n    def __init__(self):\n        self.value = 1",
        "name = __name__",
        "doc = len.__doc__",
        "from math import floor",
    ],
)
def test_ordinary_code_compiles(source: str) -> None:
    assert compile_restricted(source, "<t>", "exec") is not None


@pytest.mark.parametrize(
    "source, fragment",
    [
        ("x = ().__class__", "'__class__'"),
        ("x = print.__globals__", "'__globals__'"),
        ("x = object.__subclasses__()", "'__subclasses__'"),
        ("class A:\n    def f(self):\n        return self._hidden", "'_hidden'"),
        ("x = __builtins__", "'__builtins__'"),
        ("from math import _private", "'_private'"),
    ],
)
def test_restricted_code_is_rejected(source: str, fragment: str) -> None:
    with pytest.raises(SandboxViolationError, match=fragment):
        compile_restricted(source, "<t>", "exec")


def test_rejection_reports_the_line() -> None:
    with pytest.raises(SandboxViolationError, match=r"line 3"):
        compile_restricted("a = 1\nb = 2\nc = a.__dict__", "<t>", "exec")


def test_eval_mode_is_checked() -> None:
    with pytest.raises(SandboxViolationError):
        compile_restricted("reset.__self__", "<t>", "eval")


def test_syntax_errors_pass_through() -> None:
    with pytest.raises(SyntaxError):
        compile_restricted("def broken(:", "<t>", "exec")


def test_violation_is_a_package_error() -> None:
    assert issubclass(SandboxViolationError, NodeoEvalError)


def test_guarded_getattr() -> None:
    guarded = make_guarded_getattr(getattr)

    assert guarded([1, 2], "count")(1) == 1
    assert guarded(object(), "missing", "fallback") == "fallback"
    with pytest.raises(SandboxViolationError, match="'__class__'"):
        guarded(1, "__class__")
    with pytest.raises(SandboxViolationError):
        guarded(1, "_anything", None)
