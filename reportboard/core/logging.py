from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from reportboard.core.config import LOG_LEVEL, LOG_DIR

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: str = LOG_LEVEL, log_dir: Optional[str] = LOG_DIR) -> None:
    """stdout sink, plus a daily file sink when log_dir is set."""
    logger.remove()
    logger.configure(extra={"name": "reportboard"})

    logger.add(sys.stdout, level=level, format=_FORMAT, backtrace=True, diagnose=False)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "reportboard_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        )


def get_logger(name: Optional[str] = None):
    return logger.bind(name=name or "reportboard")
