"""
GBIF API client.

API docs: https://www.gbif.org/developer/summary
  - Species match: https://api.gbif.org/v1/species/match
  - Occurrence search: https://api.gbif.org/v1/occurrence/search
"""

from __future__ import annotations

import logging
from typing import Any

from species_atlas.services.http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)

API_BASE = "https://api.gbif.org/v1"
SPECIES_MATCH_URL = f"{API_BASE}/species/match"
OCCURRENCE_SEARCH_URL = f"{API_BASE}/occurrence/search"

# matchType GBIF reports when the backbone has no confident match
NO_MATCH = "NONE"


def match_taxon_key(name: str, *, timeout: float = DEFAULT_TIMEOUT) -> int | None:
    """
    Resolve a free-text name to a GBIF backbone taxon key.

    Returns None when the name is blank, the source is unavailable, or the
    fuzzy match is not confident.
    """
    if not name.strip():
        return None
    data = fetch_json(SPECIES_MATCH_URL, {"name": name, "verbose": "false"}, timeout=timeout)
    if not isinstance(data, dict):
        return None
    key = data.get("usageKey")
    if not isinstance(key, int) or not key or data.get("matchType") == NO_MATCH:
        logger.debug("GBIF has no confident match for %r", name)
        return None
    return key


def search_occurrences(params: dict[str, Any], *, timeout: float = DEFAULT_TIMEOUT) -> list[dict[str, Any]]:
    """GET /occurrence/search and return the ``results`` rows (empty if unavailable)."""
    data = fetch_json(OCCURRENCE_SEARCH_URL, params, timeout=timeout)
    if not isinstance(data, dict):
        return []
    results = data.get("results")
    return [row for row in results if isinstance(row, dict)] if isinstance(results, list) else []
