"""Gemini generative source (text + image) via the ``google-genai`` SDK.

API docs: https://ai.google.dev/gemini-api/docs

``GenerativeSource`` is the interface the flows depend on; ``GeminiSource``
is the production implementation.  Text calls raise on failure (the flow
decides what a failure means); image calls never raise.
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

if TYPE_CHECKING:
    from species_atlas.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


@runtime_checkable
class GenerativeSource(Protocol):
    """What the flows need from a generative backend."""

    def generate_text(
        self,
        system_instruction: str | None,
        prompt: str,
        *,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str: ...

    def generate_image(self, prompt: str) -> str | None: ...


class GeminiSource:
    """Gemini text and image generation."""

    __slots__ = ("_client", "image_model", "text_model")

    def __init__(
        self,
        api_key: str,
        *,
        text_model: str = DEFAULT_TEXT_MODEL,
        image_model: str = DEFAULT_IMAGE_MODEL,
        timeout_ms: int = 60_000,
    ) -> None:
        self.text_model = text_model
        self.image_model = image_model
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_ms),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiSource:
        """Build from settings; raises ``ConfigurationMissing`` without a key."""
        return cls(
            settings.require_api_key(),
            text_model=settings.text_model,
            image_model=settings.image_model,
            timeout_ms=settings.generator_timeout_ms,
        )

    def generate_text(
        self,
        system_instruction: str | None,
        prompt: str,
        *,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        """
        Generate text for a prompt.

        Args:
            system_instruction: Optional system role text.
            prompt: User prompt.
            json_mode: Ask for ``application/json`` output.
            temperature: Sampling temperature (model default when None).

        Returns:
            The generated text, possibly empty.

        Raises:
            google.genai.errors.APIError: On API failure.
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json" if json_mode else None,
            temperature=temperature,
        )
        response = self._client.models.generate_content(
            model=self.text_model,
            contents=prompt,
            config=config,
        )
        return response.text or ""

    def generate_image(self, prompt: str) -> str | None:
        """
        Generate an image and return it as a ``data:`` URI.

        Returns None when the model declines, returns no inline image, or the
        call fails.
        """
        try:
            response = self._client.models.generate_content(
                model=self.image_model,
                contents=prompt,
            )
        except (genai_errors.APIError, OSError, ValueError) as exc:
            logger.debug("Image generation skipped: %s", exc)
            return None

        for candidate in response.candidates or []:
            parts = candidate.content.parts if candidate.content else None
            for part in parts or []:
                inline = part.inline_data
                if inline is not None and inline.data:
                    mime = inline.mime_type or "image/png"
                    encoded = base64.b64encode(inline.data).decode("ascii")
                    return f"data:{mime};base64,{encoded}"
        logger.debug("Image model returned no inline image")
        return None
