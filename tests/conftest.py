import logging
from collections.abc import Generator
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from filesender.clock.base import BaseClock

NOW = datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock() -> MagicMock:
    """Clock frozen at NOW."""
    fake = MagicMock(spec=BaseClock)
    fake.now.return_value = NOW
    return fake


@pytest.fixture()
def clean_logger() -> Generator[logging.Logger, None, None]:
    """Detach handlers from the filesender logger and restore its state afterwards."""
    logger = logging.getLogger("filesender")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
