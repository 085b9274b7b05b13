"""Video-to-tip content generation."""

from video_tips.tip_generator.errors import (
    ConfigurationError,
    GeminiAPIError,
    GeminiInvalidResponse,
    GeminiTimeout,
    TipGenerationError,
    VideoUrlError,
    VideoUrlInvalid,
    VideoUrlRequired,
)
from video_tips.tip_generator.runner import TipContentGenerator, generate_tip_content_from_video
from video_tips.tip_generator.schema import GeminiTipContent, Platform, TipStep, VideoUrlValidation
from video_tips.tip_generator.stages.validate_input import validate_video_url

__all__ = [
    "ConfigurationError",
    "GeminiAPIError",
    "GeminiInvalidResponse",
    "GeminiTimeout",
    "GeminiTipContent",
    "Platform",
    "TipContentGenerator",
    "TipGenerationError",
    "TipStep",
    "VideoUrlError",
    "VideoUrlInvalid",
    "VideoUrlRequired",
    "VideoUrlValidation",
    "generate_tip_content_from_video",
    "validate_video_url",
]
