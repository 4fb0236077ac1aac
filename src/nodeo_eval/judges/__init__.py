from .judge0 import Judge0Backend
from .mock import MockJudgeBackend

__all__ = ["Judge0Backend", "MockJudgeBackend"]
