# video_tips/tip_generator/stages/build_prompt.py
"""
Stage 2: Build the instruction text sent alongside the video reference.

Prompt is versioned and isolated; bounds are rendered from the same
constants the response grammar enforces.
"""

from __future__ import annotations

from video_tips.tip_generator.constants import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    MAX_TAGS,
    STEP_DESCRIPTION_MAX_LENGTH,
    STEP_DESCRIPTION_MIN_LENGTH,
    TAG_MAX_LENGTH,
    TAG_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from video_tips.tip_generator.schema import Platform


PROMPT_VERSION = "1"

# Versioned prompt — change only with a matching schema review
TIP_PROMPT = """
Analyze this {platform} video and generate a life hack tip in JSON format.

Video URL: {video_url}

Generate a JSON response with the following structure:
{{
  "title": "A catchy title ({title_min}-{title_max} characters)",
  "description": "A detailed description of the life hack ({desc_min}-{desc_max} characters)",
  "steps": [
    {{
      "stepNumber": 1,
      "description": "First step description ({step_min}-{step_max} characters)"
    }},
    {{
      "stepNumber": 2,
      "description": "Second step description ({step_min}-{step_max} characters)"
    }}
  ],
  "tags": ["tag1", "tag2", "tag3"],
  "videoUrl": "{video_url}"
}}

Requirements:
- Title: {title_min}-{title_max} characters, engaging and descriptive
- Description: {desc_min}-{desc_max} characters, explain what the hack does and why it's useful
- Steps: At least 1 step, each with stepNumber (starting from 1) and description ({step_min}-{step_max} characters)
- Tags: 0-{max_tags} tags, each {tag_min}-{tag_max} characters, relevant keywords
- VideoUrl: Must be the exact URL provided

Return ONLY valid JSON, no markdown formatting or additional text.
""".strip()


def build_prompt(platform: Platform, video_url: str) -> str:
    """Render the tip prompt for a validated platform and URL."""
    return TIP_PROMPT.format(
        platform=Platform(platform).value,
        video_url=video_url,
        title_min=TITLE_MIN_LENGTH,
        title_max=TITLE_MAX_LENGTH,
        desc_min=DESCRIPTION_MIN_LENGTH,
        desc_max=DESCRIPTION_MAX_LENGTH,
        step_min=STEP_DESCRIPTION_MIN_LENGTH,
        step_max=STEP_DESCRIPTION_MAX_LENGTH,
        tag_min=TAG_MIN_LENGTH,
        tag_max=TAG_MAX_LENGTH,
        max_tags=MAX_TAGS,
    )
