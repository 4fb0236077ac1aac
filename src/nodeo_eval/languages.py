# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

from nodeo_eval.models import LanguageInfo

# Judge0 CE language ids
JUDGE0_LANGUAGE_IDS: Mapping[str, int] = MappingProxyType(
    {
        "javascript": 63,  # Node.js 12.14.0
        "python": 71,  # Python 3.8.1
        "cpp": 54,  # GCC 9.2.0
        "java": 62,  # OpenJDK 13.0.1
        "c": 50,  # GCC 9.2.0
        "csharp": 51,  # Mono 6.6.0.161
        "go": 60,  # 1.13.5
        "rust": 73,  # 1.40.0
        "php": 68,  # 7.4.1
        "ruby": 72,  # 2.7.0
        "swift": 83,  # 5.2.3
        "kotlin": 78,  # 1.3.70
        "scala": 81,  # 2.13.2
        "haskell": 61,  # GHC 8.8.1
        "lua": 64,  # 5.3.4
        "perl": 85,  # 5.28.1
        "r": 80,  # 4.0.0
        "bash": 46,  # 5.0.0
        "sql": 82,  # SQLite 3.27.2
    }
)

_LANGUAGE_INFO: Mapping[str, tuple[str, str, list[str]]] = MappingProxyType(
    {
        "python": ("Python", "interpreted", ["Dynamic typing", "Indentation-based syntax", "Rich standard library"]),
        "javascript": ("JavaScript", "interpreted", ["Dynamic typing", "Prototype-based", "Event-driven"]),
        "cpp": ("C++", "compiled", ["Static typing", "Object-oriented", "High performance"]),
        "java": ("Java", "hybrid", ["Static typing", "Object-oriented", "Platform independent"]),
    }
)


@dataclass(frozen=True)
class LanguageSpec:
    """How one language is executed: locally, or remotely under a judge id."""

    name: str
    backend: Literal["local", "remote"]
    judge_id: int | None = None


def build_language_table(local_language: str = "python") -> Mapping[str, LanguageSpec]:
    """Build the immutable language -> backend mapping.

    The local language always takes the local path, even if the judge also
    knows it.
    """
    local = local_language.lower()
    table = {name: LanguageSpec(name, "remote", judge_id) for name, judge_id in JUDGE0_LANGUAGE_IDS.items()}
    table[local] = LanguageSpec(local, "local")
    return MappingProxyType(table)


def describe_language(language: str, table: Mapping[str, LanguageSpec]) -> LanguageInfo:
    key = language.lower()
    spec = table.get(key)
    execution: Literal["local", "remote"] = spec.backend if spec else "remote"
    if key in _LANGUAGE_INFO:
        name, kind, features = _LANGUAGE_INFO[key]
        return LanguageInfo(name=name, type=kind, execution=execution, features=list(features))  # type: ignore[arg-type]
    return LanguageInfo(name=language, type="unknown", execution=execution)
