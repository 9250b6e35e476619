import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FILE = Path(__file__).resolve().parents[3] / "logs" / "widget.log"

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green>(<level>{level: <8}</level>) - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logger(level: str = "DEBUG", log_file: Optional[Path] = LOG_FILE):
    """Console sink always; a rotating file sink when ``log_file`` is writable."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)
    if log_file is None:
        return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation="5 MB", retention=3, encoding="utf-8")
    except OSError as exc:
        logger.warning("File logging disabled ({}): {}", log_file, exc)
    return logger
