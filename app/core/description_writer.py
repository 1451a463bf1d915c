# app/core/description_writer.py
"""
AI copywriter for plan descriptions (Gemini).

Enrichment only: called from the trainer authoring flow to pre-fill the
description field. It never raises; any failure (no API key, timeout,
network error, empty answer) degrades to a fixed fallback string so
plan creation is never blocked by it.
"""

import logging
from typing import Any

from google import genai
from google.genai import types as genai_types

from app.core.config import get_settings

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = (
    "Error connecting to AI assistant. Please write description manually."
)
EMPTY_DESCRIPTION = "Could not generate description."

PROMPT_TEMPLATE = """
You are an expert fitness copywriter assisting a trainer named {trainer_name}.
Write a compelling, energetic, and professional description for a fitness plan titled "{title}" which lasts for {duration_days} days.

Structure the response:
1. A catchy hook.
2. Key benefits (bullet points).
3. Who this is for.

Keep it under 200 words. Format as plain text (no markdown symbols like ** or #).
"""


def build_prompt(title: str, duration_days: int, trainer_name: str) -> str:
    return PROMPT_TEMPLATE.format(
        title=title.strip(),
        duration_days=duration_days,
        trainer_name=trainer_name.strip() or "Trainer",
    )


class DescriptionWriter:
    """
    Thin wrapper around a `google.genai.Client`.

    A client can be injected (tests, custom transport); otherwise one is
    created from settings with a hard HTTP timeout.
    """

    def __init__(
        self,
        client: Any | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
    ):
        settings = get_settings()
        self.model = model or settings.GEMINI_MODEL
        self.timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else settings.GEMINI_TIMEOUT_SECONDS
        )
        self._client = client
        self._api_key = settings.GEMINI_API_KEY

    def _get_client(self) -> Any | None:
        if self._client is None and self._api_key:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=genai_types.HttpOptions(
                    # milliseconds
                    timeout=int(self.timeout_seconds * 1000),
                ),
            )
        return self._client

    def generate(self, title: str, duration_days: int, trainer_name: str) -> str:
        """
        Return a plan description, or a fallback string on any failure.
        """
        client = self._get_client()
        if client is None:
            logger.warning("Description writer has no Gemini client configured")
            return FALLBACK_DESCRIPTION

        prompt = build_prompt(title, duration_days, trainer_name)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as exc:
            logger.warning("Gemini description request failed: %s", exc)
            return FALLBACK_DESCRIPTION

        text = (getattr(response, "text", None) or "").strip()
        if not text:
            return EMPTY_DESCRIPTION
        return text
