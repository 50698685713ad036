import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect the messages loguru emits during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
