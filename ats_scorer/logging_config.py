"""Logging configuration for the ATS scorer.

The scorer modules only create named loggers under ``ats_scorer``; handlers
belong to whoever runs them. Scripts call :func:`setup_logging` once. A host
application that already configured the root logger keeps its handlers, and
only the package level is applied.
"""
import logging
import logging.handlers
import sys
from pathlib import Path

PACKAGE_LOGGER = "ats_scorer"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUPS = 5


def parse_level(level: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not level:
        return default
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else default


def _file_handler(log_file: str, formatter: logging.Formatter) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    scorer_level: str | None = None,
) -> None:
    """Configure logging for scoring runs.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for a rotating file handler
        scorer_level: Optional level for the ``ats_scorer`` loggers alone,
            e.g. DEBUG to trace every computed score while the root stays at INFO
    """
    if scorer_level:
        logging.getLogger(PACKAGE_LOGGER).setLevel(parse_level(scorer_level))

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(parse_level(level))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # stderr, so --json output on stdout stays parseable
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        root.addHandler(_file_handler(log_file, formatter))
