import hashlib

from loguru import logger


class SubmissionAuditor:
    """
    Writes an audit record for every submission that is run.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def log_submission(self, code: str, language: str) -> str:
        """
        Log the submission attempt. Returns a hash of the code.
        """
        code_hash = hashlib.sha256(code.encode("utf-8")).hexdigest()

        if self.enabled:
            logger.bind(
                event_type="SUBMISSION_START",
                language=language,
                code_hash=code_hash,
                code_length=len(code),
            ).info(f"Submission {code_hash[:12]} ({language})")

        return code_hash
