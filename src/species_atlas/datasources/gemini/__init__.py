"""Gemini generative data source.

Public API:
  - client: GenerativeSource protocol, GeminiSource (text + image)
  - prompts: schemas and prompt builders for entries and listings
  - suggestion: suggest_correction, clean_suggestion
"""

from species_atlas.datasources.gemini.client import GeminiSource, GenerativeSource
from species_atlas.datasources.gemini.suggestion import clean_suggestion, suggest_correction

__all__ = [
    "GeminiSource",
    "GenerativeSource",
    "clean_suggestion",
    "suggest_correction",
]
