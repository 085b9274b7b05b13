# video_tips/tip_generator/errors.py
"""
Error taxonomy for tip generation.

Every error carries a fixed, user-safe message (str(exc)) and a typed
FailureType. Model output, raw provider errors and tracebacks never reach
the message; the per-attempt cause is only chained via __cause__.
"""

from __future__ import annotations

from typing import Optional

from video_tips.tip_generator.constants import (
    GEMINI_API_ERROR,
    GEMINI_API_KEY_MISSING,
    GEMINI_INVALID_RESPONSE,
    GEMINI_TIMEOUT,
    VIDEO_URL_INVALID,
    VIDEO_URL_REQUIRED,
)
from video_tips.tip_generator.schema import FailureType


class TipGenerationError(Exception):
    """Base class for every error surfaced by the generator."""

    default_message: str = GEMINI_API_ERROR
    failure_type: FailureType = FailureType.PROVIDER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(TipGenerationError):
    """Provider credential is missing."""

    default_message = GEMINI_API_KEY_MISSING
    failure_type = FailureType.CONFIGURATION_ERROR


class VideoUrlError(TipGenerationError):
    failure_type = FailureType.INPUT_ERROR


class VideoUrlRequired(VideoUrlError):
    default_message = VIDEO_URL_REQUIRED


class VideoUrlInvalid(VideoUrlError):
    default_message = VIDEO_URL_INVALID


class GeminiAPIError(TipGenerationError):
    """Terminal provider failure after the fallback attempt."""


class GeminiInvalidResponse(GeminiAPIError):
    """The reply could not be parsed or failed the content grammar."""

    default_message = GEMINI_INVALID_RESPONSE
    failure_type = FailureType.INVALID_RESPONSE


class GeminiTimeout(GeminiAPIError):
    """The per-attempt deadline elapsed."""

    default_message = GEMINI_TIMEOUT
    failure_type = FailureType.TIMEOUT
