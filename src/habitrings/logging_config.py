"""
Logging Configuration
=====================
One place that decides where the tracker's log records go.

Modules log through `logging.getLogger(__name__)`, which puts every record
under the `habitrings` namespace. The hosts (desktop preview, PNG exporter)
call `setup_logging` once at start-up. Qt's own diagnostics (missing fonts on
the offscreen platform, painter misuse) are routed into `habitrings.qt` so they
share the format and destination of our records instead of going to stderr.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

LOGGER_NAME = "habitrings"
QT_LOGGER_NAME = f"{LOGGER_NAME}.qt"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def forward_qt_message(msg_type: QtMsgType, context: Optional[QMessageLogContext], message: str) -> None:
    """Qt message handler: re-emit a Qt diagnostic as a log record."""
    level = _QT_LEVELS.get(msg_type, logging.WARNING)
    logging.getLogger(QT_LOGGER_NAME).log(level, message)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    qt_messages: bool = True,
) -> logging.Logger:
    """
    Configures the logger for the 'habitrings' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file (overwritten).
        qt_messages: Route Qt's diagnostics into the 'habitrings.qt' logger.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running the setup (app restart, repeated CLI calls in tests) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    if qt_messages:
        qInstallMessageHandler(forward_qt_message)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
