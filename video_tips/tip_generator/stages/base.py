# video_tips/tip_generator/stages/base.py
"""
Shared utilities for the generation stages.

Stages are plain functions: pure transformations that either return their
result or raise a TipGenerationError. No business logic belongs here.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Callable, Iterator


VALIDATE_INPUT = "validate_input"
BUILD_PROMPT = "build_prompt"
INVOKE_MODEL = "invoke_model"
PARSE_RESPONSE = "parse_response"
VALIDATE_CONTENT = "validate_content"


@contextmanager
def timer() -> Iterator[Callable[[], float]]:
    """
    Context manager that provides a stop() function returning elapsed time in milliseconds.

    Usage:
        with timer() as end:
            # do work
            pass
        execution_time_ms = end()
    """
    start = time.perf_counter()

    def end() -> float:
        return (time.perf_counter() - start) * 1000

    yield end
