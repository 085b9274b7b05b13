# video_tips/tip_generator/stages/parse_response.py
"""
Stage 3: Turn the provider's raw text reply into a candidate structure.

The model sometimes wraps its JSON in a markdown fence (```json ... ```);
the fence and its language hint are dropped before decoding.
The result is NOT validated here — see validate_content.
"""

from __future__ import annotations

import json
import re
from typing import Any

from video_tips.tip_generator.errors import GeminiInvalidResponse


LEADING_FENCE_REGEX = re.compile(r"^```[A-Za-z0-9_+-]*[ \t]*\n?")
TRAILING_FENCE_REGEX = re.compile(r"\n?```$")


def strip_code_fence(raw_text: str) -> str:
    text = raw_text.strip()
    text = LEADING_FENCE_REGEX.sub("", text, count=1)
    text = TRAILING_FENCE_REGEX.sub("", text, count=1)
    return text.strip()


def parse_response(raw_text: Any) -> Any:
    """
    Decode the reply as JSON.

    Raises GeminiInvalidResponse on empty or undecodable text; no partial recovery.
    """
    if not isinstance(raw_text, str):
        raise GeminiInvalidResponse()

    cleaned = strip_code_fence(raw_text)
    if not cleaned:
        raise GeminiInvalidResponse()

    try:
        return json.loads(cleaned)
    except (ValueError, RecursionError) as exc:
        raise GeminiInvalidResponse() from exc
