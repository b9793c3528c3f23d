"""Shared fixtures: a scripted stand-in for the generative source."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from species_atlas.config import Settings

if TYPE_CHECKING:
    from pathlib import Path

MONARCH_ENTRY: dict[str, Any] = {
    "commonName": "Monarch Butterfly",
    "scientificName": "Danaus plexippus",
    "kingdom": "Animalia",
    "family": "Nymphalidae",
    "diet": "Milkweed as larvae, nectar as adults",
    "migration": "Up to 4,800 km to overwinter in central Mexico",
    "description": "An orange-and-black milkweed butterfly.",
}


class FakeGenerator:
    """
    Scripted generative source.

    ``text`` answers entry and listing prompts; ``suggestion`` answers the
    suggestion prompt (the only call made without a system instruction).
    Either may be an exception instance, which is raised instead.
    """

    def __init__(
        self,
        text: str | Exception = "",
        *,
        image: str | Exception | None = None,
        suggestion: str | Exception = "null",
    ) -> None:
        self.text = text
        self.image = image
        self.suggestion = suggestion
        self.text_calls: list[dict[str, Any]] = []
        self.suggestion_calls: list[str] = []
        self.image_prompts: list[str] = []

    def generate_text(
        self,
        system_instruction: str | None,
        prompt: str,
        *,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        if system_instruction is None:
            self.suggestion_calls.append(prompt)
            answer = self.suggestion
        else:
            self.text_calls.append(
                {"system": system_instruction, "prompt": prompt, "json_mode": json_mode, "temperature": temperature}
            )
            answer = self.text
        if isinstance(answer, Exception):
            raise answer
        return answer

    def generate_image(self, prompt: str) -> str | None:
        self.image_prompts.append(prompt)
        if isinstance(self.image, Exception):
            raise self.image
        return self.image


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with a fake key and a temporary data directory."""
    return Settings(GEMINI_API_KEY="test-key", data_dir=tmp_path)


@pytest.fixture
def monarch_json() -> str:
    return json.dumps(MONARCH_ENTRY)
