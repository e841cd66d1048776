import logging

import pytest
from PySide6.QtCore import QtMsgType

from habitrings.logging_config import QT_LOGGER_NAME, forward_qt_message, setup_logging


@pytest.fixture
def reset_logging():
    yield
    setup_logging(qt_messages=False)


def test_repeated_setup_keeps_one_console_handler(reset_logging):
    setup_logging(qt_messages=False)
    logger = setup_logging(logging.DEBUG, qt_messages=False)

    assert logger.name == "habitrings"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file_receives_package_records(tmp_path, reset_logging):
    log_file = tmp_path / "habitrings.log"
    logger = setup_logging(logging.DEBUG, log_file=log_file, qt_messages=False)

    logging.getLogger("habitrings.model.layout").debug("segment 31.50 deg")

    assert len(logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "habitrings.model.layout - DEBUG - segment 31.50 deg" in text


@pytest.mark.parametrize(
    "msg_type, level",
    [
        (QtMsgType.QtDebugMsg, logging.DEBUG),
        (QtMsgType.QtWarningMsg, logging.WARNING),
        (QtMsgType.QtCriticalMsg, logging.ERROR),
    ],
)
def test_qt_messages_become_log_records(caplog, msg_type, level):
    with caplog.at_level(logging.DEBUG, logger=QT_LOGGER_NAME):
        forward_qt_message(msg_type, None, "QFont: missing family")

    (record,) = [r for r in caplog.records if r.name == QT_LOGGER_NAME]
    assert record.levelno == level
    assert record.getMessage() == "QFont: missing family"
