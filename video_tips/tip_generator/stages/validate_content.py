# video_tips/tip_generator/stages/validate_content.py
"""
Stage 4: Validate and normalize the candidate tip content.

Responsibility:
- Reject anything that is not a JSON object
- Enforce the GeminiTipContent grammar (presence, types, lengths, counts)
- Return trimmed strings

Any violation aborts with a generic GeminiInvalidResponse. The failing
field paths are only logged at DEBUG, never returned to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError

from video_tips.tip_generator.errors import GeminiInvalidResponse
from video_tips.tip_generator.schema import GeminiTipContent


logger = logging.getLogger(__name__)


def _error_locations(exc: ValidationError) -> List[str]:
    return [".".join(str(part) for part in error["loc"]) or "<root>" for error in exc.errors()]


def validate_content(candidate: Any) -> GeminiTipContent:
    """Return the validated, trimmed content or raise GeminiInvalidResponse."""
    if not isinstance(candidate, dict):
        logger.debug("Tip content rejected: top-level value is %s", type(candidate).__name__)
        raise GeminiInvalidResponse()

    try:
        return GeminiTipContent.model_validate(candidate)
    except ValidationError as exc:
        logger.debug("Tip content rejected: invalid fields %s", _error_locations(exc))
        raise GeminiInvalidResponse() from exc
