"""
Prefect flows for the encyclopedia.

Flows:
- aggregate: one merged entry per query (text, image, sources, weather)
- listings: related species, A-Z index, featured carousel

Usage (local):
    python -m species_atlas.flows.aggregate "Snow Leopard"
    python -m species_atlas.flows.listings Q

Usage (Prefect):
    prefect server start  # Optional, for dashboard
"""

from species_atlas.datasources.gemini import suggest_correction
from species_atlas.flows.aggregate import aggregate_species
from species_atlas.flows.listings import list_by_letter, list_featured, list_related

__all__ = [
    "aggregate_species",
    "list_by_letter",
    "list_featured",
    "list_related",
    "suggest_correction",
]
