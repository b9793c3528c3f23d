"""
iNaturalist API client.

Thin wrappers over the endpoints the atlas uses.  Every helper returns
``None``/empty when the source is unavailable.

API docs: https://api.inaturalist.org/v1/docs/
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from species_atlas.services.http import fetch_json

API_BASE = "https://api.inaturalist.org/v1"
SITE_BASE = "https://www.inaturalist.org"

DEFAULT_TIMEOUT = 6.0  # seconds, iNaturalist is the slowest source


def _get(endpoint: str, params: dict[str, Any], timeout: float) -> dict[str, Any] | None:
    data = fetch_json(f"{API_BASE}/{endpoint}", params, timeout=timeout)
    return data if isinstance(data, dict) else None


def search_taxon_id(name: str, *, timeout: float = DEFAULT_TIMEOUT) -> int | None:
    """GET /taxa: id of the best species-rank match for a name."""
    data = _get("taxa", {"q": name, "rank": "species", "per_page": 1}, timeout)
    results = (data or {}).get("results") or []
    if not results or not isinstance(results[0], dict):
        return None
    taxon_id = results[0].get("id")
    return taxon_id if isinstance(taxon_id, int) else None


def get_observations(params: dict[str, Any], *, timeout: float = DEFAULT_TIMEOUT) -> list[dict[str, Any]]:
    """GET /observations: the ``results`` rows."""
    data = _get("observations", params, timeout)
    results = (data or {}).get("results")
    return [r for r in results if isinstance(r, dict)] if isinstance(results, list) else []


def get_histogram(params: dict[str, Any], *, timeout: float = DEFAULT_TIMEOUT) -> dict[str, Any]:
    """GET /observations/histogram: the ``results`` mapping (interval → buckets)."""
    data = _get("observations/histogram", params, timeout)
    results = (data or {}).get("results")
    return results if isinstance(results, dict) else {}


def search_url(name: str) -> str:
    """Public site search page for a name."""
    return f"{SITE_BASE}/search?q={quote(name, safe='')}"
