# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Static and runtime checks that keep submitted code inside its namespace.

Function, frame and class internals (``__globals__``, ``__class__``,
``__subclasses__``, ...) lead back to host modules, so any attribute starting
with an underscore is off limits, as are dunder names other than a few
harmless ones.
"""

import ast
from typing import Any, Callable

from nodeo_eval.errors import SandboxViolationError

ALLOWED_DUNDER_ATTRIBUTES = frozenset({"__init__", "__name__", "__doc__"})
ALLOWED_DUNDER_NAMES = frozenset({"__name__"})


def _is_private_attribute(name: str) -> bool:
    return name.startswith("_") and name not in ALLOWED_DUNDER_ATTRIBUTES


class RestrictedNodeChecker(ast.NodeVisitor):
    """Rejects attribute access and names that reach interpreter internals."""

    def visit_Attribute(self, node: ast.Attribute) -> None:
        if _is_private_attribute(node.attr):
            raise SandboxViolationError(f"Access to attribute '{node.attr}' is not allowed (line {node.lineno})")
        self.generic_visit(node)

    def visit_Name(self, node: ast.Name) -> None:
        if node.id.startswith("__") and node.id not in ALLOWED_DUNDER_NAMES:
            raise SandboxViolationError(f"Use of name '{node.id}' is not allowed (line {node.lineno})")

    def visit_alias(self, node: ast.alias) -> None:
        if node.name.split(".")[-1].startswith("_") or (node.asname or "").startswith("__"):
            raise SandboxViolationError(f"Importing '{node.name}' is not allowed")


def compile_restricted(source: str, filename: str, mode: str) -> Any:
    """Parse, check and compile source for the sandbox.

    Raises:
        SyntaxError: If the source does not parse.
        SandboxViolationError: If the source touches restricted names or attributes.
    """
    tree = ast.parse(source, filename, mode)
    RestrictedNodeChecker().visit(tree)
    return compile(tree, filename, mode)


def make_guarded_getattr(real: Callable[..., Any]) -> Callable[..., Any]:
    """Wraps getattr/hasattr so string lookups obey the same attribute rule."""

    def guarded(obj: Any, name: str, *default: Any) -> Any:
        if isinstance(name, str) and _is_private_attribute(name):
            raise SandboxViolationError(f"Access to attribute '{name}' is not allowed")
        return real(obj, name, *default)

    return guarded
