"""GBIF occurrence data source.

Resolves names against the GBIF backbone and pulls recent occurrences and
their photos.

Public API:
  - client: match_taxon_key, search_occurrences, API URLs
  - occurrences: fetch_recent_observations, BASIS_OF_RECORD
  - media: fetch_gbif_images
"""

from species_atlas.datasources.gbif.client import match_taxon_key, search_occurrences
from species_atlas.datasources.gbif.media import fetch_gbif_images
from species_atlas.datasources.gbif.occurrences import (
    BASIS_OF_RECORD,
    fetch_recent_observations,
    format_event_date,
    parse_occurrence,
)

__all__ = [
    "BASIS_OF_RECORD",
    "fetch_gbif_images",
    "fetch_recent_observations",
    "format_event_date",
    "match_taxon_key",
    "parse_occurrence",
    "search_occurrences",
]
