import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from simon.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "SIMON_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "SIMON_LOG_TO_FILE"
LOG_LEVELS_ENV_VAR = "SIMON_LOG_LEVELS"
DEFAULT_LOG_SUBDIR = Path(".simon") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _sanitize_logger_name(name: str) -> str:
    sanitized = name.replace("/", "_").replace(os.sep, "_")
    sanitized = sanitized.replace("..", ".")
    return sanitized.replace(".", "_") or "root"


def _resolve_level(name: str, default_level: str) -> int:
    """Pick the most specific ``SIMON_LOG_LEVELS`` prefix that matches ``name``.

    ``SIMON_LOG_LEVELS="simon.runtime=DEBUG,simon.board.layout=ERROR"`` lets a
    noisy playback session be traced without turning every module up.
    """

    level_name = default_level
    best = -1
    for chunk in os.getenv(LOG_LEVELS_ENV_VAR, "").split(","):
        prefix, _, value = chunk.strip().partition("=")
        if not value:
            continue
        if (name == prefix or name.startswith(prefix + ".")) and len(prefix) > best:
            level_name = value.strip().upper()
            best = len(prefix)
    return getattr(logging, level_name, logging.INFO)


def _attach_handler(
    logger: logging.Logger,
    handler: logging.Handler,
    formatter: logging.Formatter,
    level: int,
) -> None:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = _resolve_level(logger.name, log_level)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    _attach_handler(logger, logging.StreamHandler(), formatter, level)

    if _env_flag(LOG_TO_FILE_ENV_VAR, default=True):
        log_filename = _resolve_log_directory() / f"{_sanitize_logger_name(logger.name)}.log"
        file_handler = RotatingFileHandler(
            log_filename,
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        )
        _attach_handler(logger, file_handler, formatter, level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stream handler and an optional rolling file handler."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger
