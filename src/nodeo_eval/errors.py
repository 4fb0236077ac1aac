# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.


class NodeoEvalError(Exception):
    """Base class for evaluator errors."""


class SandboxViolationError(NodeoEvalError):
    """Raised when submitted code reaches for names or attributes outside the sandbox."""


class UnsupportedLanguageError(NodeoEvalError, ValueError):
    """Raised when a language is neither evaluated locally nor known to the judge."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")
