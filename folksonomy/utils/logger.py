import logging
from pathlib import Path
from typing import List, Optional

# Every module logs through this one logger; messages carry a "[Component]" prefix
LOGGER_NAME = "folksonomy"
LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def init_logging(verbose: bool = False, log_path: Optional[Path] = None) -> logging.Logger:
    """
    Configure the folksonomy logger for a command-line run.

    Messages always go to the console; with ``log_path`` they are also
    appended to that file (its directory is created on demand).

    Args:
        verbose (bool): Enable DEBUG logging, which includes per-widget render details.
        log_path (Optional[Path]): Extra log file, e.g. from ``--log-file``.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Re-running main() in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _build_handlers(log_path):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def _build_handlers(log_path: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
