"""Species Atlas - one-query species encyclopedia entries from many sources.

Architecture::

    datasources/   External APIs (Gemini, GBIF, iNaturalist, Wikipedia,
                   xeno-canto, Open-Meteo)
    normalizer.py  Tolerant JSON extraction from generated text
    flows/         Prefect orchestration (aggregate one species, list flows)
    progress.py    Monotonic progress reporting for the caller
    store.py       Per-user favorites and search history (JSON files)
    services/      Shared utilities (HTTP client with bounded timeouts)

Data flow: generator → normalizer → datasources (parallel) → merge → SpeciesRecord

Extension points (see each package's docstring for step-by-step guides):
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from species_atlas.config import Settings, get_settings
from species_atlas.errors import ConfigurationMissing, SpeciesAtlasError, SpeciesNotFoundError
from species_atlas.schemas import (
    FeaturedSpecies,
    Observation,
    RecordBasis,
    RelatedSpeciesStub,
    SpeciesRecord,
    WeatherSnapshot,
)

__all__ = [
    "ConfigurationMissing",
    "FeaturedSpecies",
    "Observation",
    "RecordBasis",
    "RelatedSpeciesStub",
    "Settings",
    "SpeciesAtlasError",
    "SpeciesNotFoundError",
    "SpeciesRecord",
    "WeatherSnapshot",
    "__version__",
    "get_settings",
]
