import sys
from pathlib import Path

from loguru import logger


def setup_logger(log_dir: Path | str = "logs", level: str = "INFO") -> None:
    """Configure loguru with a stderr sink and a JSON file sink.

    The file sink writes serialized records to ``<log_dir>/app.log``, rotated
    at 10 MB.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        log_path / "app.log",
        level=level,
        rotation="10 MB",
        retention=5,
        serialize=True,
        enqueue=True,
    )
