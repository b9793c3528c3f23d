"""
Prefect flows for the browse listings.

  - list-related:   species related to one entry (same family)
  - list-by-letter: the A-Z index
  - list-featured:  the home page carousel

Each flow makes one generative call with a strict list schema, keeps the
valid items, then looks up one encyclopedia thumbnail per item in parallel.
A failed lookup leaves that item's image empty; a failed or unparseable
generation yields an empty list.

Run locally:
    python -m species_atlas.flows.listings Q
"""

from __future__ import annotations

import logging
import string
import sys
from typing import Any, TypeVar

from prefect import flow, task, unmapped
from prefect.cache_policies import NO_CACHE
from pydantic import ValidationError

from species_atlas.config import Settings, get_settings
from species_atlas.datasources import wikipedia
from species_atlas.datasources.gemini import GeminiSource, GenerativeSource, prompts
from species_atlas.flows.aggregate import settle
from species_atlas.normalizer import extract_items
from species_atlas.schemas import FeaturedSpecies, RelatedSpeciesStub

logger = logging.getLogger(__name__)

ListingModel = TypeVar("ListingModel", RelatedSpeciesStub, FeaturedSpecies)


# =============================================================================
# Tasks
# =============================================================================


@task(name="lookup-thumbnail", cache_policy=NO_CACHE)
def lookup_thumbnail(name: str, timeout: float) -> str | None:
    """Encyclopedia lead image for one listing item."""
    return wikipedia.fetch_wiki_image(name, timeout=timeout).image_url


# =============================================================================
# Helpers
# =============================================================================


def generate_items(
    generator: GenerativeSource,
    system_instruction: str,
    prompt: str,
    *,
    temperature: float | None = None,
) -> list[dict[str, Any]]:
    """Run one listing generation; any failure is an empty listing."""
    try:
        raw = generator.generate_text(system_instruction, prompt, json_mode=True, temperature=temperature)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Listing generation failed: %s", exc)
        return []
    return extract_items(raw)


def build_models(items: list[dict[str, Any]], model: type[ListingModel], count: int) -> list[ListingModel]:
    """Validate raw items, skipping the unusable ones, up to ``count``."""
    models: list[ListingModel] = []
    for item in items:
        try:
            models.append(model.model_validate(item))
        except ValidationError as exc:
            logger.debug("Skipping listing item %r: %s", item, exc.error_count())
        if len(models) == count:
            break
    return models


def with_thumbnails(models: list[ListingModel], timeout: float) -> list[ListingModel]:
    """Attach a thumbnail to every item, looked up in parallel."""
    if not models:
        return []
    futures = lookup_thumbnail.map([m.search_name for m in models], unmapped(timeout))
    return [
        m.model_copy(update={"image_url": settle(future, None)})
        for m, future in zip(models, futures, strict=True)
    ]


def _resolve(generator: GenerativeSource | None, settings: Settings | None) -> tuple[GenerativeSource, Settings]:
    settings = settings or get_settings()
    return generator or GeminiSource.from_settings(settings), settings


# =============================================================================
# Flows
# =============================================================================


@flow(name="list-related", log_prints=True, validate_parameters=False)
def list_related_flow(name: str, family: str, generator: GenerativeSource, settings: Settings) -> list[RelatedSpeciesStub]:
    items = generate_items(generator, prompts.list_system_instruction(), prompts.related_prompt(name, family))
    stubs = with_thumbnails(build_models(items, RelatedSpeciesStub, prompts.RELATED_COUNT), settings.source_timeout)
    print(f"Found {len(stubs)} species related to {name}")
    return stubs


@flow(name="list-by-letter", log_prints=True, validate_parameters=False)
def list_by_letter_flow(letter: str, generator: GenerativeSource, settings: Settings) -> list[RelatedSpeciesStub]:
    items = generate_items(generator, prompts.list_system_instruction(), prompts.letter_prompt(letter))
    stubs = with_thumbnails(build_models(items, RelatedSpeciesStub, prompts.LETTER_COUNT), settings.source_timeout)
    print(f"Found {len(stubs)} species under {letter}")
    return stubs


@flow(name="list-featured", log_prints=True, validate_parameters=False)
def list_featured_flow(generator: GenerativeSource, settings: Settings) -> list[FeaturedSpecies]:
    items = generate_items(
        generator,
        prompts.featured_system_instruction(),
        prompts.featured_prompt(),
        temperature=prompts.FEATURED_TEMPERATURE,
    )
    featured = with_thumbnails(build_models(items, FeaturedSpecies, prompts.FEATURED_COUNT), settings.source_timeout)
    print(f"Curated {len(featured)} featured species")
    return featured


# =============================================================================
# Public entry points
# =============================================================================


def list_related(
    name: str,
    family: str,
    generator: GenerativeSource | None = None,
    settings: Settings | None = None,
) -> list[RelatedSpeciesStub]:
    """Up to four species related to ``name`` within ``family``."""
    if not name or not name.strip():
        msg = "Species name must not be empty"
        raise ValueError(msg)
    generator, settings = _resolve(generator, settings)
    return list_related_flow(name.strip(), family.strip(), generator, settings)


def list_by_letter(
    letter: str,
    generator: GenerativeSource | None = None,
    settings: Settings | None = None,
) -> list[RelatedSpeciesStub]:
    """
    Up to twelve species whose names start with ``letter``.

    Raises:
        ValueError: ``letter`` is not a single letter A-Z.
    """
    letter = (letter or "").strip().upper()
    if len(letter) != 1 or letter not in string.ascii_uppercase:
        msg = f"Expected a single letter A-Z, got {letter!r}"
        raise ValueError(msg)
    generator, settings = _resolve(generator, settings)
    return list_by_letter_flow(letter, generator, settings)


def list_featured(
    generator: GenerativeSource | None = None,
    settings: Settings | None = None,
) -> list[FeaturedSpecies]:
    """Five featured species for the home page."""
    generator, settings = _resolve(generator, settings)
    return list_featured_flow(generator, settings)


if __name__ == "__main__":
    for stub in list_by_letter(sys.argv[1] if len(sys.argv) > 1 else "A"):
        print(f"{stub.common_name} ({stub.scientific_name}) {stub.image_url or ''}")
