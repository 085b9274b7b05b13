import json
import logging

import pytest

from tests.fakes import YOUTUBE_URL
from video_tips.config import Settings
from video_tips.logging_core.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        gemini_model_primary="gemini-primary",
        gemini_model_fallback="gemini-fallback",
        gemini_timeout_seconds=0.05,
    )


@pytest.fixture
def valid_payload():
    return {
        "title": "Test Life Hack",
        "description": "This is a test description for the life hack.",
        "steps": [
            {"stepNumber": 1, "description": "First step description here."},
            {"stepNumber": 2, "description": "Second step description here."},
        ],
        "tags": ["test", "lifehack"],
        "videoUrl": YOUTUBE_URL,
    }


@pytest.fixture
def valid_reply(valid_payload):
    return json.dumps(valid_payload)
