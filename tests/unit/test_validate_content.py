import pytest
from pydantic import ValidationError

from video_tips.tip_generator.constants import (
    DESCRIPTION_MAX_LENGTH,
    MAX_TAGS,
    STEP_DESCRIPTION_MAX_LENGTH,
    TAG_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from video_tips.tip_generator.errors import GeminiInvalidResponse
from video_tips.tip_generator.schema import GeminiTipContent, TipStep
from video_tips.tip_generator.stages.validate_content import validate_content


def _with(payload, **changes):
    updated = dict(payload)
    updated.update(changes)
    return updated


def test_valid_payload_passes(valid_payload):
    content = validate_content(valid_payload)

    assert isinstance(content, GeminiTipContent)
    assert content.to_dict() == valid_payload
    assert content.steps[0] == TipStep.model_validate({"stepNumber": 1, "description": "First step description here."})


def test_string_fields_are_trimmed(valid_payload):
    padded = {
        "title": "  Test Life Hack  ",
        "description": "  This is a test description.  ",
        "steps": [{"stepNumber": 1, "description": "  First step.  "}],
        "tags": ["  tag1  ", "  tag2  "],
        "videoUrl": f"  {valid_payload['videoUrl']} ",
    }

    content = validate_content(padded)

    assert content.to_dict() == {
        "title": "Test Life Hack",
        "description": "This is a test description.",
        "steps": [{"stepNumber": 1, "description": "First step."}],
        "tags": ["tag1", "tag2"],
        "videoUrl": valid_payload["videoUrl"],
    }


def test_already_valid_content_round_trips(valid_payload):
    content = validate_content(valid_payload)
    assert validate_content(content.to_dict()) == content


def test_step_order_is_preserved(valid_payload):
    steps = [
        {"stepNumber": 3, "description": "Third step, listed first."},
        {"stepNumber": 1, "description": "First step, listed second."},
    ]
    content = validate_content(_with(valid_payload, steps=steps))
    assert [step.step_number for step in content.steps] == [3, 1]


def test_unknown_keys_are_ignored(valid_payload):
    content = validate_content(_with(valid_payload, difficulty="easy"))
    assert "difficulty" not in content.to_dict()


def test_empty_tags_are_allowed(valid_payload):
    assert validate_content(_with(valid_payload, tags=[])).tags == []


@pytest.mark.parametrize(
    "field, accepted, rejected",
    [
        ("title", "a" * TITLE_MAX_LENGTH, "a" * (TITLE_MAX_LENGTH + 1)),
        ("title", "a" * TITLE_MIN_LENGTH, "a" * (TITLE_MIN_LENGTH - 1)),
        ("title", "  abcde  ", "  abcd  "),
        ("description", "a" * DESCRIPTION_MAX_LENGTH, "a" * (DESCRIPTION_MAX_LENGTH + 1)),
        ("description", "a" * 10, "Short"),
    ],
)
def test_text_length_boundaries(valid_payload, field, accepted, rejected):
    assert validate_content(_with(valid_payload, **{field: accepted}))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, **{field: rejected}))


def test_step_description_boundary(valid_payload):
    ok = [{"stepNumber": 1, "description": "a" * STEP_DESCRIPTION_MAX_LENGTH}]
    too_long = [{"stepNumber": 1, "description": "a" * (STEP_DESCRIPTION_MAX_LENGTH + 1)}]

    assert validate_content(_with(valid_payload, steps=ok))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, steps=too_long))


def test_tag_length_boundary(valid_payload):
    assert validate_content(_with(valid_payload, tags=["a" * TAG_MAX_LENGTH]))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, tags=["a" * (TAG_MAX_LENGTH + 1)]))


def test_tag_count_boundary(valid_payload):
    assert validate_content(_with(valid_payload, tags=["tag"] * MAX_TAGS))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, tags=["tag"] * (MAX_TAGS + 1)))


def test_lengths_count_utf16_code_units(valid_payload):
    # Each emoji is two UTF-16 code units.
    assert validate_content(_with(valid_payload, title="\U0001F600" * (TITLE_MAX_LENGTH // 2)))
    assert validate_content(_with(valid_payload, tags=["\U0001F600" * (TAG_MAX_LENGTH // 2)]))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, title="\U0001F600" * (TITLE_MAX_LENGTH // 2 + 1)))
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, tags=["\U0001F600" * (TAG_MAX_LENGTH // 2 + 1)]))


def test_integral_float_step_number_is_accepted(valid_payload):
    steps = [{"stepNumber": 1.0, "description": "Float step number here."}]

    content = validate_content(_with(valid_payload, steps=steps))

    assert content.steps[0].step_number == 1
    assert type(content.steps[0].step_number) is int
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, steps=[{"stepNumber": 1.5, "description": "Float step number here."}]))


@pytest.mark.parametrize(
    "changes",
    [
        {"title": "Hi"},
        {"title": None},
        {"title": 12345},
        {"description": ["not", "a", "string"]},
        {"steps": []},
        {"steps": "not an array"},
        {"steps": ["not an object"]},
        {"steps": [{"stepNumber": 0, "description": "Invalid step number"}]},
        {"steps": [{"stepNumber": -1, "description": "Negative step number"}]},
        {"steps": [{"stepNumber": 1.5, "description": "Fractional step number"}]},
        {"steps": [{"stepNumber": "1", "description": "String step number"}]},
        {"steps": [{"stepNumber": True, "description": "Boolean step number"}]},
        {"steps": [{"description": "Missing step number"}]},
        {"steps": [{"stepNumber": 1}]},
        {"steps": [{"stepNumber": 1, "description": "Short"}]},
        {"tags": "not an array"},
        {"tags": [""]},
        {"tags": ["   "]},
        {"tags": [42]},
        {"videoUrl": ""},
        {"videoUrl": "   "},
        {"videoUrl": 42},
    ],
)
def test_invalid_fields_are_rejected(valid_payload, changes):
    with pytest.raises(GeminiInvalidResponse):
        validate_content(_with(valid_payload, **changes))


@pytest.mark.parametrize("missing", ["title", "description", "steps", "tags", "videoUrl"])
def test_missing_fields_are_rejected(valid_payload, missing):
    payload = dict(valid_payload)
    del payload[missing]
    with pytest.raises(GeminiInvalidResponse):
        validate_content(payload)


def test_snake_case_keys_do_not_replace_camel_case_keys(valid_payload):
    renamed_url = dict(valid_payload)
    renamed_url["video_url"] = renamed_url.pop("videoUrl")
    renamed_step = _with(valid_payload, steps=[{"step_number": 1, "description": "Snake case step number"}])

    with pytest.raises(GeminiInvalidResponse):
        validate_content(renamed_url)
    with pytest.raises(GeminiInvalidResponse):
        validate_content(renamed_step)


@pytest.mark.parametrize("candidate", [None, "string response", [], [{"title": "x"}], 42, True])
def test_non_object_candidates_are_rejected(candidate):
    with pytest.raises(GeminiInvalidResponse):
        validate_content(candidate)


def test_error_message_is_generic(valid_payload):
    with pytest.raises(GeminiInvalidResponse) as exc_info:
        validate_content(_with(valid_payload, title="Hi"))
    assert "title" not in str(exc_info.value)
    assert str(exc_info.value) == "Received invalid response from AI. Please try again."


def test_content_is_immutable(valid_payload):
    content = validate_content(valid_payload)
    with pytest.raises(ValidationError):
        content.title = "Another title"
