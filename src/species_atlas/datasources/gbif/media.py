"""Still images attached to GBIF occurrences."""

from __future__ import annotations

from typing import Any

from species_atlas.datasources.gbif import client

MEDIA_SEARCH_LIMIT = 10
MAX_IMAGES = 8

STILL_IMAGE = "StillImage"


def _image_urls(rows: list[dict[str, Any]]) -> list[str]:
    urls: list[str] = []
    for row in rows:
        entries = row.get("media")
        if not isinstance(entries, list):
            continue
        for media in entries:
            if not isinstance(media, dict) or media.get("type") != STILL_IMAGE:
                continue
            url = media.get("identifier")
            if isinstance(url, str) and url:
                urls.append(url)
    return urls


def fetch_gbif_images(
    name: str,
    *,
    max_images: int = MAX_IMAGES,
    timeout: float = client.DEFAULT_TIMEOUT,
) -> list[str]:
    """
    Fetch occurrence photo URLs for a species, deduplicated, in source order.

    Returns an empty list when the name does not resolve or the source is
    unavailable.
    """
    taxon_key = client.match_taxon_key(name, timeout=timeout)
    if taxon_key is None:
        return []

    params = {"taxonKey": taxon_key, "mediaType": STILL_IMAGE, "limit": MEDIA_SEARCH_LIMIT}
    rows = client.search_occurrences(params, timeout=timeout)
    return list(dict.fromkeys(_image_urls(rows)))[:max_images]
