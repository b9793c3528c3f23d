"""Community photos and seasonality for one taxon."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from species_atlas.datasources.inaturalist import client

GALLERY_SIZE = 6

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class CommunityContribution:
    """What iNaturalist adds to an entry.  Empty when nothing was found."""

    images: list[str] = field(default_factory=list)
    hero_image: str | None = None
    seasonality: dict[int, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.images and self.hero_image is None and not self.seasonality


# =============================================================================
# Parsing helpers
# =============================================================================


def _resize(url: str, size: str) -> str:
    """Swap the ``square`` thumbnail in a photo URL for another size."""
    return url.replace("square", size)


def _first_photo_urls(rows: list[dict[str, Any]]) -> list[str]:
    urls: list[str] = []
    for row in rows:
        photos = row.get("photos")
        if not isinstance(photos, list) or not photos or not isinstance(photos[0], dict):
            continue
        url = photos[0].get("url")
        if isinstance(url, str) and url:
            urls.append(url)
    return urls


def parse_month_histogram(results: dict[str, Any]) -> dict[int, int]:
    """Month-of-year histogram → ``{1..12: count}``, ignoring junk keys."""
    months = results.get("month_of_year") or {}
    seasonality: dict[int, int] = {}
    for key, count in months.items():
        try:
            month = int(key)
        except (TypeError, ValueError):
            continue
        if 1 <= month <= 12 and isinstance(count, int):
            seasonality[month] = count
    return seasonality


# =============================================================================
# API Fetching
# =============================================================================


def fetch_inaturalist_data(name: str, *, timeout: float = client.DEFAULT_TIMEOUT) -> CommunityContribution:
    """
    Fetch research-grade photos and month-of-year activity for a species.

    The photo and histogram calls run concurrently once the taxon resolves.
    Gallery URLs use the ``medium`` photo size; the hero image is the first
    photo at ``large`` size.

    Returns:
        A ``CommunityContribution``; empty if the name does not resolve or the
        source is unavailable.
    """
    taxon_id = client.search_taxon_id(name, timeout=timeout)
    if taxon_id is None:
        return CommunityContribution()

    with ThreadPoolExecutor(max_workers=2) as pool:
        observations = pool.submit(
            client.get_observations,
            {
                "taxon_id": taxon_id,
                "photos": "true",
                "quality_grade": "research",
                "per_page": GALLERY_SIZE,
                "order_by": "votes",
            },
            timeout=timeout,
        )
        histogram = pool.submit(
            client.get_histogram,
            {"taxon_id": taxon_id, "date_field": "observed", "interval": "month_of_year"},
            timeout=timeout,
        )

    raw = _first_photo_urls(observations.result())
    return CommunityContribution(
        images=[_resize(url, "medium") for url in raw],
        hero_image=_resize(raw[0], "large") if raw else None,
        seasonality=parse_month_histogram(histogram.result()),
    )
