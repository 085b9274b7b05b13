# video_tips/tip_generator/stages/validate_input.py
"""
Stage 1: Video URL validation and video_id extraction.

Responsibility:
- Confirm the provided URL is a supported YouTube or Instagram URL
- Extract the canonical video_id
- Report a user-facing reason when it is not

No network calls and no logging: the form calls this on every keystroke.
"""

from __future__ import annotations

from typing import Optional

from video_tips.tip_generator.constants import (
    INSTAGRAM_REGEX,
    VIDEO_URL_INVALID,
    VIDEO_URL_REQUIRED,
    YOUTUBE_SHORTS_REGEX,
    YOUTUBE_WATCH_REGEX,
)
from video_tips.tip_generator.schema import Platform, VideoUrlValidation


# Checked in order; first match wins
URL_PATTERNS = (
    (Platform.YOUTUBE, YOUTUBE_WATCH_REGEX),
    (Platform.YOUTUBE, YOUTUBE_SHORTS_REGEX),
    (Platform.INSTAGRAM, INSTAGRAM_REGEX),
)


def validate_video_url(url: Optional[str]) -> VideoUrlValidation:
    """
    Classify a raw URL into (platform, video_id) or an error reason.

    Pure and idempotent.
    """
    if not isinstance(url, str) or not url.strip():
        return VideoUrlValidation.invalid(VIDEO_URL_REQUIRED)

    trimmed_url = url.strip()

    for platform, pattern in URL_PATTERNS:
        match = pattern.match(trimmed_url)
        if match:
            return VideoUrlValidation.valid(platform, match.group(1))

    return VideoUrlValidation.invalid(VIDEO_URL_INVALID)


# Valid formats:
# https://www.youtube.com/watch?v=dQw4w9WgXcQ
# https://www.youtube.com/shorts/dQw4w9WgXcQ
# https://www.instagram.com/p/ABC123xyz/  (trailing slash optional)
#
# Rejected with VIDEO_URL_INVALID: youtu.be links, extra query params,
# ids that are not exactly 11 characters, other hosts, non-URLs.
