# video_tips/tip_generator/schema.py
"""
Authoritative schema definitions for the tip generation pipeline.

This module defines:
- The URL validation result handed to the form for live feedback
- The validated tip content returned to the caller
- The per-attempt diagnostics record
- Typed failure categories for diagnostics

The tip content models ARE the response grammar: field types, trimming,
length bounds and counts are declared here and enforced by model validation.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)

from video_tips.tip_generator.constants import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    MAX_TAGS,
    MIN_STEPS,
    STEP_DESCRIPTION_MAX_LENGTH,
    STEP_DESCRIPTION_MIN_LENGTH,
    TAG_MAX_LENGTH,
    TAG_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)


class Platform(str, Enum):
    """Supported short-form video platforms."""
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"


class FailureType(str, Enum):
    """Typed failure categories for machine-parsable diagnostics."""
    CONFIGURATION_ERROR = "configuration_error"
    INPUT_ERROR = "input_error"
    INVALID_RESPONSE = "invalid_response"
    TIMEOUT = "timeout"
    PROVIDER_ERROR = "provider_error"


def _utf16_length(value: str) -> int:
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _length_between(min_length: int, max_length: Optional[int] = None) -> AfterValidator:
    # Lengths are counted in UTF-16 code units, so an emoji counts as two.
    def check(value: str) -> str:
        length = _utf16_length(value)
        if length < min_length:
            raise ValueError(f"must be at least {min_length} characters")
        if max_length is not None and length > max_length:
            raise ValueError(f"must be at most {max_length} characters")
        return value

    return AfterValidator(check)


# Whitespace is stripped before the length bounds are checked.
StrippedText = Annotated[str, StringConstraints(strip_whitespace=True, strict=True)]
TitleText = Annotated[StrippedText, _length_between(TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)]
DescriptionText = Annotated[StrippedText, _length_between(DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH)]
StepText = Annotated[StrippedText, _length_between(STEP_DESCRIPTION_MIN_LENGTH, STEP_DESCRIPTION_MAX_LENGTH)]
TagText = Annotated[StrippedText, _length_between(TAG_MIN_LENGTH, TAG_MAX_LENGTH)]
UrlText = Annotated[StrippedText, _length_between(1)]

class VideoUrlValidation(BaseModel):
    """
    Result of classifying a raw video URL.

    Exactly one of (platform + video_id) or error is populated.
    """
    is_valid: bool = Field(alias="isValid")
    platform: Optional[Platform] = None
    video_id: Optional[str] = Field(default=None, alias="videoId")
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def validate_exclusive_fields(self) -> "VideoUrlValidation":
        if self.is_valid:
            if not self.platform or not self.video_id or self.error is not None:
                raise ValueError("valid result requires platform and video_id and no error")
        elif not self.error or self.platform is not None or self.video_id is not None:
            raise ValueError("invalid result requires an error and no platform or video_id")
        return self

    @classmethod
    def valid(cls, platform: Platform, video_id: str) -> "VideoUrlValidation":
        return cls(is_valid=True, platform=platform, video_id=video_id)

    @classmethod
    def invalid(cls, error: str) -> "VideoUrlValidation":
        return cls(is_valid=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TipStep(BaseModel):
    """A single ordered step of a tip."""
    step_number: int = Field(alias="stepNumber", strict=True, ge=1)
    description: StepText

    model_config = ConfigDict(frozen=True)

    @field_validator("step_number", mode="before")
    @classmethod
    def accept_integral_float(cls, value: Any) -> Any:
        # JSON has one number type: 1.0 is a step number, 1.5, "1" and true are not.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class GeminiTipContent(BaseModel):
    """
    Validated, trimmed tip content produced from a video.

    Field names follow the tip API (camelCase aliases); unknown keys in the
    model reply are ignored.
    """
    title: TitleText
    description: DescriptionText
    steps: List[TipStep] = Field(min_length=MIN_STEPS)
    tags: List[TagText] = Field(max_length=MAX_TAGS)
    video_url: UrlText = Field(alias="videoUrl")

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class AttemptResult(BaseModel):
    """
    Diagnostics for one model attempt.

    Never returned to the caller; logged by the runner.
    """
    attempt: int = Field(ge=1, le=2)
    model: str
    success: bool
    failure_type: Optional[FailureType] = None
    execution_time_ms: Optional[float] = None

    model_config = ConfigDict(frozen=True)
