"""Merge a generated entry with every source's contribution.

Precedence rules:
  - Primary image: generated > iNaturalist hero > Wikipedia lead image.
  - Attribution URL: only without a generated image; the Wikipedia page,
    else an iNaturalist search for the species.
  - Gallery: iNaturalist and GBIF photos interleaved position by position,
    deduplicated, capped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest
from typing import TYPE_CHECKING

from species_atlas.datasources.inaturalist import CommunityContribution, search_url
from species_atlas.datasources.wikipedia import WikiImage
from species_atlas.datasources.xeno_canto import AudioClip

if TYPE_CHECKING:
    from species_atlas.schemas import Observation, SpeciesRecord, WeatherSnapshot

GALLERY_CAP = 8


@dataclass
class Contributions:
    """Everything the enrichment sources returned for one entry."""

    observations: list[Observation] = field(default_factory=list)
    community: CommunityContribution = field(default_factory=CommunityContribution)
    gbif_images: list[str] = field(default_factory=list)
    audio: AudioClip = field(default_factory=AudioClip)
    wiki: WikiImage = field(default_factory=WikiImage)
    weather: WeatherSnapshot | None = None


def interleave_galleries(first: list[str], second: list[str], cap: int = GALLERY_CAP) -> list[str]:
    """
    Alternate two image lists (a1, b1, a2, b2, ...), dedupe, then cap.

    Interleaving keeps one source from crowding out the other.
    """
    merged: list[str] = []
    for a, b in zip_longest(first, second):
        if a:
            merged.append(a)
        if b:
            merged.append(b)
    return list(dict.fromkeys(merged))[:cap]


def select_primary_image(
    generated: str | None,
    community: CommunityContribution,
    wiki: WikiImage,
) -> str | None:
    return generated or community.hero_image or wiki.image_url


def first_geotagged(observations: list[Observation]) -> Observation | None:
    """First observation carrying both coordinates, if any."""
    return next((obs for obs in observations if obs.has_coordinates), None)


def merge_record(
    record: SpeciesRecord,
    generated_image: str | None,
    contributions: Contributions,
    *,
    gallery_cap: int = GALLERY_CAP,
) -> SpeciesRecord:
    """Return a copy of ``record`` with every enrichment field filled in."""
    source_url = None
    if generated_image is None:
        source_url = contributions.wiki.source_url or search_url(record.search_name)

    return record.model_copy(
        update={
            "image_url": select_primary_image(
                generated_image, contributions.community, contributions.wiki
            ),
            "source_url": source_url,
            "observations": list(contributions.observations),
            "gallery_images": interleave_galleries(
                contributions.community.images, contributions.gbif_images, gallery_cap
            ),
            "seasonal_activity": dict(contributions.community.seasonality),
            "audio_url": contributions.audio.audio_url,
            "audio_author": contributions.audio.author,
            "weather": contributions.weather,
        }
    )
