"""Logging configuration for gigmatch."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

# Parent of every engine logger (gigmatch.matching.ranking, ...service, ...)
ENGINE_LOGGER = "gigmatch"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    engine_level: Optional[str] = None,
) -> None:
    """Configure logging for scripts and embedding applications.

    Ranking functions log per-call candidate counts at DEBUG, which is far
    too chatty for a host application running at DEBUG itself. `engine_level`
    sets the `gigmatch` logger independently of the root logger.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for rotating file handler
        engine_level: Optional level for `gigmatch.*` loggers only
    """
    if engine_level:
        logging.getLogger(ENGINE_LOGGER).setLevel(_level(engine_level))

    root = logging.getLogger()

    # The host application already owns the root handlers
    if root.handlers:
        return

    root.setLevel(_level(level))
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
