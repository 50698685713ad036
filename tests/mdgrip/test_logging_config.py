import logging
import sys

import pytest
from loguru import logger

from mdgrip import Settings, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logging.basicConfig(handlers=[logging.StreamHandler()], level=logging.WARNING, force=True)


class TestConfigureLogging:
    def test_level_filters_stderr(self, capsys):
        configure_logging("WARNING")
        logger.info("quiet message")
        logger.warning("loud message")

        err = capsys.readouterr().err
        assert "loud message" in err
        assert "quiet message" not in err

    def test_settings_level(self, capsys):
        configure_logging(Settings(log_level="debug").log_level)
        logger.debug("debug message")
        assert "debug message" in capsys.readouterr().err

    def test_standard_logging_intercepted(self):
        configure_logging("DEBUG")
        messages: list[str] = []
        handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
        try:
            logging.getLogger("markdown_it").warning("from the standard library")
        finally:
            logger.remove(handler_id)

        assert "from the standard library" in messages

    def test_custom_level_number(self):
        configure_logging("DEBUG")
        levels: list[int] = []
        handler_id = logger.add(lambda message: levels.append(message.record["level"].no), level="DEBUG")
        try:
            logging.getLogger("markdown_it").log(15, "between debug and info")
        finally:
            logger.remove(handler_id)

        assert levels == [15]

    def test_stdlib_logger_name_kept(self):
        configure_logging("DEBUG")
        names: list[str] = []
        handler_id = logger.add(lambda message: names.append(message.record["extra"]["stdlib_logger"]), level="DEBUG")
        try:
            logging.getLogger("markdown_it.rules_core").info("named")
        finally:
            logger.remove(handler_id)

        assert names == ["markdown_it.rules_core"]
