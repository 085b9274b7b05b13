# video_tips/tip_generator/client.py
"""
Model client abstraction.

The runner only knows ModelClient.invoke(prompt, resource_uri) -> text.
Cancellation is asyncio task cancellation: when the per-attempt deadline
fires, the awaiting task is cancelled and the in-flight request with it.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from google import genai
from google.genai import types

from video_tips.config import Settings
from video_tips.tip_generator.constants import VIDEO_MIME_TYPE


@runtime_checkable
class ModelClient(Protocol):
    """One configured model reference."""

    model: str

    async def invoke(self, prompt: str, resource_uri: str) -> str:
        ...


def _video_contents(resource_uri: str, prompt: str) -> List[types.Part]:
    """Video reference first, then the instruction text."""
    return [
        types.Part(file_data=types.FileData(file_uri=resource_uri, mime_type=VIDEO_MIME_TYPE)),
        types.Part(text=prompt),
    ]


class GeminiModelClient:
    """ModelClient backed by the google-genai SDK."""

    def __init__(self, model: str, *, api_key: str = "", client: Optional[genai.Client] = None) -> None:
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    async def invoke(self, prompt: str, resource_uri: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=_video_contents(resource_uri, prompt),
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )
        return response.text or ""

    def __repr__(self) -> str:
        return f"GeminiModelClient(model={self.model!r})"


def build_model_clients(settings: Settings) -> List[ModelClient]:
    """
    Build the ordered retry policy: [primary, fallback].

    Both share one SDK client; they differ only by model identity.
    """
    client = genai.Client(api_key=settings.gemini_api_key)
    return [
        GeminiModelClient(settings.gemini_model_primary, client=client),
        GeminiModelClient(settings.gemini_model_fallback, client=client),
    ]
