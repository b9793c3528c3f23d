"""Corrected-name suggestions for queries the archives could not answer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from species_atlas.datasources.gemini import prompts

if TYPE_CHECKING:
    from species_atlas.datasources.gemini.client import GenerativeSource

logger = logging.getLogger(__name__)

_QUOTES = "\"'`"


def clean_suggestion(query: str, answer: str | None) -> str | None:
    """
    Reduce a raw suggestion answer to a usable name.

    Returns None for empty answers, the explicit no-match token, or a
    suggestion equal to the original query (case-insensitive).
    """
    if not answer:
        return None
    name = answer.strip()
    for quote in _QUOTES:
        name = name.replace(quote, "")
    name = name.strip().rstrip(".")
    if not name or name.casefold() in (prompts.NO_MATCH_TOKEN, query.strip().casefold()):
        return None
    return name


def suggest_correction(query: str, generator: GenerativeSource) -> str | None:
    """
    Ask the generator for one corrected species name.

    Never raises: any failure of the lookup itself yields None.
    """
    if not query.strip():
        return None
    try:
        answer = generator.generate_text(None, prompts.suggestion_prompt(query))
    except Exception as exc:  # noqa: BLE001
        logger.debug("Suggestion lookup failed for %r: %s", query, exc)
        return None
    return clean_suggestion(query, answer)
