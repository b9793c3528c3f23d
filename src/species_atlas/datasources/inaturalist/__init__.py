"""iNaturalist community observation data source.

Public API:
  - client: Low-level HTTP helpers (taxa, observations, histogram)
  - taxa: CommunityContribution, fetch_inaturalist_data
"""

from species_atlas.datasources.inaturalist.client import search_taxon_id, search_url
from species_atlas.datasources.inaturalist.taxa import (
    CommunityContribution,
    fetch_inaturalist_data,
    parse_month_histogram,
)

__all__ = [
    "CommunityContribution",
    "fetch_inaturalist_data",
    "parse_month_histogram",
    "search_taxon_id",
    "search_url",
]
