"""
Logging Configuration
"""
import logging
import sys
from pathlib import Path

from app.core.config import Settings


def setup_logging(settings: Settings) -> logging.Logger:
    """Setup application logging"""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    # Format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Handlers
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "app.log"))

    # force=True so a second app instance (tests) replaces the handlers
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    # Disable noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger


logger = logging.getLogger("app")
