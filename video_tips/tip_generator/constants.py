# video_tips/tip_generator/constants.py
"""
Bounds, URL patterns and user-facing messages for tip generation.

These values mirror the tip API's own validation rules; the generator
must never hand back content the API would reject.
"""

from __future__ import annotations

import re


TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 2000
STEP_DESCRIPTION_MIN_LENGTH = 10
STEP_DESCRIPTION_MAX_LENGTH = 500
MIN_STEPS = 1
TAG_MIN_LENGTH = 1
TAG_MAX_LENGTH = 50
MAX_TAGS = 10

GEMINI_TIMEOUT_SECONDS = 60.0
VIDEO_MIME_TYPE = "video/*"

YOUTUBE_WATCH_REGEX = re.compile(r"^https://www\.youtube\.com/watch\?v=([a-zA-Z0-9_-]{11})$")
YOUTUBE_SHORTS_REGEX = re.compile(r"^https://www\.youtube\.com/shorts/([a-zA-Z0-9_-]{11})$")
INSTAGRAM_REGEX = re.compile(r"^https://www\.instagram\.com/p/([a-zA-Z0-9_-]+)/?$")


VIDEO_URL_REQUIRED = "Video URL is required"
VIDEO_URL_INVALID = "Please enter a valid YouTube or Instagram video URL"
GEMINI_API_KEY_MISSING = "Gemini API key is not configured."
GEMINI_INVALID_RESPONSE = "Received invalid response from AI. Please try again."
GEMINI_API_ERROR = "Failed to generate tip content from video. Please try again."
GEMINI_TIMEOUT = "Request timeout. Please try again."
