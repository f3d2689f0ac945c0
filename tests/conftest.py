import os
import tempfile

# Keep log files out of the working tree; must happen before wurdle is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wurdle-logs-"))

import pytest

from wurdle import create_app
from wurdle.config import TestingConfig
from wurdle.services.guess_engine import GuessEngine

DICTIONARY = frozenset({
    "SPEED", "ERASE", "GEESE", "EERIE", "CRANE", "HELLO", "LLAMA",
    "WORLD", "FLUNK", "MIGHT", "BLOCK", "CHUMP", "SWIFT", "DOING",
})


@pytest.fixture
def engine() -> GuessEngine:
    return GuessEngine("SPEED", dictionary=DICTIONARY)


@pytest.fixture
def open_engine() -> GuessEngine:
    return GuessEngine("SPEED")


@pytest.fixture
def app(tmp_path):
    config_class = type("Config", (TestingConfig,), {"LOG_DIR": str(tmp_path)})
    return create_app(config_class)


@pytest.fixture
def client(app):
    return app.test_client()
