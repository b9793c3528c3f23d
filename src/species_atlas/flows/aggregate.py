"""
Prefect flow that builds one encyclopedia entry.

Stages::

    generate text (10%) → normalize (40%) → generate image (50%)
      → tier 1, in parallel (70%): GBIF occurrences, iNaturalist,
        GBIF gallery, xeno-canto (animals only), Wikipedia (no generated image)
      → tier 2 (85%): Open-Meteo at the first geotagged occurrence
      → merge (95%) → done (100%)

Only a failed generation or an unparseable answer stops the flow; it then
tries one corrected-name suggestion and raises ``SpeciesNotFoundError``.
Every enrichment source failure just leaves its fields empty.

Run locally:
    python -m species_atlas.flows.aggregate "Monarch Butterfly"
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TypeVar

from prefect import flow, task
from prefect.cache_policies import NO_CACHE
from prefect.futures import PrefectFuture, wait

from species_atlas.analysis import Contributions, first_geotagged, merge_record
from species_atlas.config import Settings, get_settings
from species_atlas.datasources import gbif, inaturalist, weather, wikipedia, xeno_canto
from species_atlas.datasources.gemini import GeminiSource, GenerativeSource, prompts, suggest_correction
from species_atlas.errors import SpeciesNotFoundError
from species_atlas.normalizer import NormalizationFailure, extract_record
from species_atlas.progress import ProgressCallback, ProgressReporter
from species_atlas.schemas import Observation, SpeciesRecord, WeatherSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Tier 1 tasks
# =============================================================================


@task(name="fetch-occurrences", cache_policy=NO_CACHE)
def fetch_occurrences(name: str, limit: int, years: int, timeout: float) -> list[Observation]:
    """Recent geotagged GBIF occurrences."""
    return gbif.fetch_recent_observations(name, limit=limit, years=years, timeout=timeout)


@task(name="fetch-community", cache_policy=NO_CACHE)
def fetch_community(name: str, timeout: float) -> inaturalist.CommunityContribution:
    """iNaturalist photos, hero image and seasonality."""
    contribution = inaturalist.fetch_inaturalist_data(name, timeout=timeout)
    if contribution.is_empty:
        logger.info("No community data for %s", name)
    return contribution


@task(name="fetch-gbif-gallery", cache_policy=NO_CACHE)
def fetch_gbif_gallery(name: str, max_images: int, timeout: float) -> list[str]:
    """GBIF occurrence photos."""
    return gbif.fetch_gbif_images(name, max_images=max_images, timeout=timeout)


@task(name="fetch-audio", cache_policy=NO_CACHE)
def fetch_audio(name: str, timeout: float) -> xeno_canto.AudioClip:
    """Top-rated xeno-canto recording."""
    return xeno_canto.fetch_nature_audio(name, timeout=timeout)


@task(name="fetch-wiki-image", cache_policy=NO_CACHE)
def fetch_wiki_image(name: str, timeout: float) -> wikipedia.WikiImage:
    """Wikipedia lead image and page URL."""
    return wikipedia.fetch_wiki_image(name, timeout=timeout)


# =============================================================================
# Tier 2 task
# =============================================================================


@task(name="fetch-site-weather", cache_policy=NO_CACHE)
def fetch_site_weather(lat: float, lon: float, location: str, timeout: float) -> WeatherSnapshot | None:
    """Current conditions where the species was last seen."""
    return weather.fetch_location_weather(lat, lon, location, timeout=timeout)


# =============================================================================
# Helpers
# =============================================================================


def settle(future: PrefectFuture[Any] | None, default: T) -> T:
    """
    Result of a finished future, or ``default`` if it failed or never ran.

    This is the join policy for the fan-out: a failed source becomes an
    empty contribution and never reaches the merge as an exception.
    """
    if future is None:
        return default
    result = future.result(raise_on_failure=False)
    if isinstance(result, BaseException):
        logger.warning("Source task %s failed: %s", future.task_run_id, result)
        return default
    return default if result is None else result


def generate_entry_image(generator: GenerativeSource, record: SpeciesRecord) -> str | None:
    """Generated photo of the species, or None when the model has nothing."""
    try:
        return generator.generate_image(prompts.image_prompt(record.common_name, record.scientific_name))
    except Exception as exc:  # noqa: BLE001
        logger.warning("Image generation skipped for %s: %s", record.search_name, exc)
        return None


def not_found(query: str, generator: GenerativeSource, reason: str) -> SpeciesNotFoundError:
    """Build the terminal failure, with at most one suggestion attached."""
    logger.info("No entry for %r (%s); asking for a suggestion", query, reason)
    return SpeciesNotFoundError(query, suggestion=suggest_correction(query, generator), reason=reason)


# =============================================================================
# Flow
# =============================================================================


@flow(name="aggregate-species", log_prints=True, validate_parameters=False)
def aggregate_species_flow(
    query: str,
    on_progress: ProgressCallback | None,
    generator: GenerativeSource,
    settings: Settings,
) -> SpeciesRecord:
    """
    Build a complete entry for ``query``.

    Callers should use ``aggregate_species()``, which validates the query and
    resolves configuration before any network call.
    """
    progress = ProgressReporter(on_progress)

    # --- Generate + normalize ---
    progress.report(10, "Consulting the archives...")
    try:
        raw = generator.generate_text(
            prompts.entry_system_instruction(),
            prompts.entry_prompt(query),
            json_mode=True,
            temperature=prompts.ENTRY_TEMPERATURE,
        )
    except Exception as exc:  # noqa: BLE001
        raise not_found(query, generator, f"generator call failed: {exc}") from exc

    parsed = extract_record(raw)
    if isinstance(parsed, NormalizationFailure):
        raise not_found(query, generator, parsed.reason)
    record = parsed.record
    progress.report(40, f"Identifying {record.scientific_name or record.common_name}...")

    # --- Image ---
    progress.report(50, "Visualizing species...")
    generated_image = generate_entry_image(generator, record)

    # --- Tier 1 ---
    progress.report(70, "Gathering field observations...")
    name = record.search_name
    timeout = settings.source_timeout
    occurrences = fetch_occurrences.submit(
        name, settings.observation_limit, settings.observation_years, timeout
    )
    community = fetch_community.submit(name, settings.community_timeout)
    gallery = fetch_gbif_gallery.submit(name, settings.gallery_cap, timeout)
    audio = fetch_audio.submit(name, timeout) if record.is_animal else None
    wiki = fetch_wiki_image.submit(name, timeout) if generated_image is None else None
    wait([f for f in (occurrences, community, gallery, audio, wiki) if f is not None])

    contributions = Contributions(
        observations=settle(occurrences, []),
        community=settle(community, inaturalist.CommunityContribution()),
        gbif_images=settle(gallery, []),
        audio=settle(audio, xeno_canto.AudioClip()),
        wiki=settle(wiki, wikipedia.WikiImage()),
    )

    # --- Tier 2 ---
    site = first_geotagged(contributions.observations)
    if site is not None and site.latitude is not None and site.longitude is not None:
        progress.report(85, "Analyzing live conditions...")
        conditions = fetch_site_weather.submit(site.latitude, site.longitude, site.location_label, timeout)
        contributions.weather = settle(conditions, None)

    # --- Merge ---
    progress.report(95, "Finalizing entry...")
    entry = merge_record(record, generated_image, contributions, gallery_cap=settings.gallery_cap)
    print(
        f"Merged entry for {entry.display_name}: {len(entry.observations)} observations, "
        f"{len(entry.gallery_images)} gallery images, audio={'yes' if entry.audio_url else 'no'}, "
        f"weather={'yes' if entry.weather else 'no'}"
    )
    progress.report(100, "Entry complete")
    logger.debug("Progress feed for %r: %s", query, " | ".join(progress.messages))
    return entry


def aggregate_species(
    query: str,
    on_progress: ProgressCallback | None = None,
    generator: GenerativeSource | None = None,
    settings: Settings | None = None,
) -> SpeciesRecord:
    """
    Build the merged encyclopedia entry for a free-text query.

    Args:
        query: Species name (common or scientific) or a habitat.
        on_progress: Called with ``(percent, message)``; percentages never
            decrease and end at 100 on success.
        generator: Generative source (defaults to Gemini from settings).
        settings: Configuration (defaults to ``get_settings()``).

    Raises:
        ValueError: Empty query.
        ConfigurationMissing: No generator given and no API key configured.
        SpeciesNotFoundError: Generation failed or produced nothing usable.
    """
    if not query or not query.strip():
        msg = "Query must not be empty"
        raise ValueError(msg)
    settings = settings or get_settings()
    generator = generator or GeminiSource.from_settings(settings)
    return aggregate_species_flow(query.strip(), on_progress, generator, settings)


if __name__ == "__main__":
    entry = aggregate_species(" ".join(sys.argv[1:]) or "Monarch Butterfly")
    print(entry.model_dump_json(by_alias=True, indent=2, exclude={"image_url"}))
