# video_tips/tip_generator/runner.py
"""
Orchestration runner for video-to-tip generation.

Responsibilities:
- Check the provider precondition and the video URL before any network call
- Run the primary model attempt, escalate to the fallback on any failure
- Bound every provider call with its own deadline
- Normalize the final failure into the error taxonomy
- Log per-attempt diagnostics

Attempts are strictly sequential; nothing is shared between runs.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import List, Optional, Sequence

from video_tips.config import Settings
from video_tips.config import settings as default_settings
from video_tips.logging_core.logger import RunLogger, get_logger, log_event
from video_tips.tip_generator.client import ModelClient, build_model_clients
from video_tips.tip_generator.constants import VIDEO_URL_REQUIRED
from video_tips.tip_generator.diagnostics.collector import DiagnosticsCollector
from video_tips.tip_generator.errors import (
    ConfigurationError,
    GeminiAPIError,
    GeminiTimeout,
    TipGenerationError,
    VideoUrlInvalid,
    VideoUrlRequired,
)
from video_tips.tip_generator.schema import AttemptResult, FailureType, GeminiTipContent
from video_tips.tip_generator.stages import base
from video_tips.tip_generator.stages.base import timer
from video_tips.tip_generator.stages.build_prompt import PROMPT_VERSION, build_prompt
from video_tips.tip_generator.stages.parse_response import parse_response
from video_tips.tip_generator.stages.validate_content import validate_content
from video_tips.tip_generator.stages.validate_input import validate_video_url


RETRY_POLICY_LENGTH = 2


class TipContentGenerator:
    """
    Generates validated tip content from a video URL.

    Args:
        settings: Provider configuration; defaults to the process settings.
        clients: Ordered [primary, fallback] model clients. Built from
            settings on each call when omitted.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clients: Optional[Sequence[ModelClient]] = None,
    ) -> None:
        self.settings = settings or default_settings
        self._clients = list(clients) if clients is not None else None

    async def generate(self, video_url: str) -> GeminiTipContent:
        """
        Run the full pipeline for one URL.

        Raises:
            ConfigurationError: API key missing.
            VideoUrlRequired / VideoUrlInvalid: URL rejected.
            GeminiInvalidResponse / GeminiTimeout / GeminiAPIError: both attempts failed.
        """
        run_id = uuid.uuid4()
        logger = get_logger(run_id)

        log_event(
            logger,
            logging.INFO,
            "Starting tip generation",
            event_type="pipeline_start",
            metadata={"url": video_url, "prompt_version": PROMPT_VERSION},
        )

        if not self.settings.gemini_api_key.strip():
            log_event(
                logger,
                logging.ERROR,
                "Gemini API key is not configured",
                event_type="failure",
                metadata={"failure_type": FailureType.CONFIGURATION_ERROR.value},
            )
            raise ConfigurationError()

        validation = validate_video_url(video_url)
        if not validation.is_valid:
            log_event(
                logger,
                logging.WARNING,
                "Video URL rejected",
                stage_name=base.VALIDATE_INPUT,
                event_type="failure",
                metadata={"reason": validation.error},
            )
            if validation.error == VIDEO_URL_REQUIRED:
                raise VideoUrlRequired(validation.error)
            raise VideoUrlInvalid(validation.error)

        canonical_url = video_url.strip()
        prompt = build_prompt(validation.platform, canonical_url)
        primary, fallback = self._resolve_clients()
        collector = DiagnosticsCollector(run_id)

        try:
            try:
                return await self._run_attempt(1, primary, prompt, canonical_url, logger, collector)
            except Exception as exc:  # pylint: disable=broad-except
                # Any primary failure escalates; it is never surfaced
                log_event(
                    logger,
                    logging.WARNING,
                    "Primary model failed, escalating to fallback",
                    event_type="escalation",
                    metadata={
                        "primary_model": primary.model,
                        "fallback_model": fallback.model,
                        "failure_type": _failure_type(exc).value,
                    },
                )

            try:
                return await self._run_attempt(2, fallback, prompt, canonical_url, logger, collector)
            except TipGenerationError:
                raise
            except Exception as exc:  # pylint: disable=broad-except
                raise GeminiAPIError() from exc
        finally:
            diagnostics = collector.build_diagnostics()
            log_event(
                logger,
                logging.INFO if diagnostics["success"] else logging.ERROR,
                "Tip generation finished",
                event_type="pipeline_success" if diagnostics["success"] else "pipeline_failure",
                metadata=diagnostics,
            )

    def _resolve_clients(self) -> List[ModelClient]:
        clients = self._clients if self._clients is not None else build_model_clients(self.settings)
        if len(clients) != RETRY_POLICY_LENGTH:
            raise ValueError(f"Expected {RETRY_POLICY_LENGTH} model clients (primary, fallback), got {len(clients)}")
        return clients

    async def _run_attempt(
        self,
        attempt: int,
        client: ModelClient,
        prompt: str,
        video_url: str,
        logger: RunLogger,
        collector: DiagnosticsCollector,
    ) -> GeminiTipContent:
        """One attempt: invoke under deadline → parse → validate."""
        stage_name = base.INVOKE_MODEL
        log_event(
            logger,
            logging.INFO,
            "Invoking model",
            stage_name=stage_name,
            event_type="start",
            metadata={"attempt": attempt, "model": client.model},
        )

        with timer() as end:
            try:
                raw_text = await self._invoke_with_deadline(client, prompt, video_url)
                stage_name = base.PARSE_RESPONSE
                candidate = parse_response(raw_text)
                stage_name = base.VALIDATE_CONTENT
                content = validate_content(candidate)
            except Exception as exc:  # pylint: disable=broad-except
                failure_type = _failure_type(exc)
                collector.add_attempt_result(
                    AttemptResult(
                        attempt=attempt,
                        model=client.model,
                        success=False,
                        failure_type=failure_type,
                        execution_time_ms=end(),
                    )
                )
                log_event(
                    logger,
                    logging.WARNING,
                    "Model attempt failed",
                    stage_name=stage_name,
                    event_type="failure",
                    metadata={
                        "attempt": attempt,
                        "model": client.model,
                        "failure_type": failure_type.value,
                        "exception_type": type(exc).__name__,
                    },
                )
                raise

            collector.add_attempt_result(
                AttemptResult(attempt=attempt, model=client.model, success=True, execution_time_ms=end())
            )

        log_event(
            logger,
            logging.INFO,
            "Tip content validated",
            stage_name=stage_name,
            event_type="success",
            metadata={
                "attempt": attempt,
                "model": client.model,
                "step_count": len(content.steps),
                "tag_count": len(content.tags),
            },
        )
        return content

    async def _invoke_with_deadline(self, client: ModelClient, prompt: str, video_url: str) -> str:
        """
        Invoke the client under the per-attempt deadline.

        The deadline is armed when the call starts and disarmed as soon as
        the call settles; expiry cancels the call and raises GeminiTimeout.
        """
        try:
            async with asyncio.timeout(self.settings.gemini_timeout_seconds):
                return await client.invoke(prompt, video_url)
        except TimeoutError as exc:
            raise GeminiTimeout() from exc


def _failure_type(exc: BaseException) -> FailureType:
    if isinstance(exc, TipGenerationError):
        return exc.failure_type
    return FailureType.PROVIDER_ERROR


async def generate_tip_content_from_video(
    video_url: str,
    *,
    settings: Optional[Settings] = None,
    clients: Optional[Sequence[ModelClient]] = None,
) -> GeminiTipContent:
    """Entry point used by the tip form: URL in, validated content out (or raise)."""
    generator = TipContentGenerator(settings=settings, clients=clients)
    return await generator.generate(video_url)


# Data Flow
# generate(url)
# → api key check → validate_video_url → build_prompt
# → attempt 1 (primary): invoke under deadline → parse_response → validate_content
# → on any failure: attempt 2 (fallback), same chain
# → success: GeminiTipContent | failure: GeminiTimeout / GeminiInvalidResponse / GeminiAPIError
#
# Edge Cases
# Empty/blank URL → VideoUrlRequired before any client is built.
# Client raising TimeoutError itself is treated like the deadline firing.
# Caller cancellation (CancelledError) propagates untouched.
