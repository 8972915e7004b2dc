"""Logging for the API and the maintenance scripts

Handlers are attached once, to the ``aus_cms`` package logger. Module loggers
(``aus_cms.services.auth_service`` and so on) carry no handlers of their own
and propagate to it, so the API process and each script share one console
stream plus whichever log files they asked for.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
from aus_cms.core.config import settings

PACKAGE_LOGGER = "aus_cms"

LOGS_DIR = Path(__file__).parent.parent.parent / "logs"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: Optional[str]) -> int:
    if log_level is None:
        log_level = "DEBUG" if settings.DEBUG else "INFO"
    return getattr(logging, log_level.upper(), logging.INFO)


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = str(path.resolve())
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def setup_logging(
    name: str = PACKAGE_LOGGER,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger and return the logger called ``name``

    Args:
        name: Logger to hand back, normally a dotted name under ``aus_cms``
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL; defaults from settings.DEBUG
        log_file: File name under ``logs/``; added alongside any handlers already present

    Returns:
        The requested logger
    """
    level = _resolve_level(log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in package_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(console_handler)

    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_path = LOGS_DIR / log_file
        if not _has_file_handler(package_logger, file_path):
            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            package_logger.addHandler(file_handler)

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Module logger; configures the package logger on first use"""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logging()
    return logging.getLogger(name)
