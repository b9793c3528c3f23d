"""
Domain models for species atlas.

Pydantic models for the merged species entry and its parts.  The generator
speaks camelCase JSON (``commonName``, ``conservationStatus``), so every model
accepts camelCase or snake_case and dumps camelCase ``by_alias``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from species_atlas.conditions import describe_condition


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# =============================================================================
# Observations
# =============================================================================


class RecordBasis(StrEnum):
    """How an occurrence was recorded."""

    FIELD_SIGHTED = "field_sighted"
    MUSEUM_SPECIMEN = "museum_specimen"
    AUTOMATED_SENSOR = "automated_sensor"
    FOSSIL = "fossil"
    UNSPECIFIED = "unspecified"

    @property
    def label(self) -> str:
        return _BASIS_LABELS[self]


_BASIS_LABELS: dict[RecordBasis, str] = {
    RecordBasis.FIELD_SIGHTED: "Sighted in wild",
    RecordBasis.MUSEUM_SPECIMEN: "Museum Specimen",
    RecordBasis.AUTOMATED_SENSOR: "Automated sensor",
    RecordBasis.FOSSIL: "Fossil",
    RecordBasis.UNSPECIFIED: "Observation",
}


class Observation(_CamelModel):
    """One occurrence record, as shown on the entry."""

    model_config = ConfigDict(frozen=True)

    country: str = "International Waters"
    date: str = "Unknown Date"
    basis: RecordBasis = RecordBasis.UNSPECIFIED
    recorded_by: str = "Anonymous"
    locality: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def location_label(self) -> str:
        """Locality when known, otherwise the country."""
        return self.locality or self.country


# =============================================================================
# Weather
# =============================================================================


class WeatherSnapshot(_CamelModel):
    """Current conditions at an observation site."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    condition_code: int
    is_day: bool
    location: str
    latitude: float
    longitude: float

    @property
    def condition(self) -> str:
        return describe_condition(self.condition_code)


# =============================================================================
# Species entries
# =============================================================================

#: Narrative fields, in display order.  Opaque strings from the generator.
NARRATIVE_FIELDS: tuple[str, ...] = (
    "first_named_by",
    "etymology",
    "ancestral_home",
    "native_range",
    "relatives",
    "size",
    "record_size_weight",
    "colors",
    "movement",
    "reproduction",
    "lifespan",
    "longest_life",
    "diet",
    "defense",
    "toxin",
    "symbiotic",
    "migration",
    "sleep",
    "scent",
    "sound",
    "history",
    "myths",
    "culture",
    "threats",
    "conservation_status",
    "success_stories",
    "unknown_fact",
    "record_fact",
    "wild_status",
    "description",
)


def _as_text(value: Any) -> str:
    """Coerce a loosely-typed generated value to a display string."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(_as_text(v) for v in value if v is not None)
    if isinstance(value, dict):
        return "; ".join(f"{k}: {_as_text(v)}" for k, v in value.items())
    return str(value)


def _fill_identity(data: Any) -> Any:
    """Require at least one name; copy it into the other when missing."""
    if not isinstance(data, dict):
        return data
    data = dict(data)
    common_key = "commonName" if "commonName" in data else "common_name"
    sci_key = "scientificName" if "scientificName" in data else "scientific_name"
    common = _as_text(data.get(common_key)).strip()
    scientific = _as_text(data.get(sci_key)).strip()
    if not common and not scientific:
        msg = "record has neither a common nor a scientific name"
        raise ValueError(msg)
    data[common_key] = common or scientific
    data[sci_key] = scientific or common
    return data


class SpeciesRecord(_CamelModel):
    """The merged encyclopedia entry for one species."""

    # Identity
    common_name: str = Field(..., min_length=1)
    scientific_name: str = Field(..., min_length=1)
    kingdom: str = ""
    family: str = ""

    # Narrative (generator only)
    first_named_by: str = ""
    etymology: str = ""
    ancestral_home: str = ""
    native_range: str = ""
    relatives: str = ""
    size: str = ""
    record_size_weight: str = ""
    colors: str = ""
    movement: str = ""
    reproduction: str = ""
    lifespan: str = ""
    longest_life: str = ""
    diet: str = ""
    defense: str = ""
    toxin: str = ""
    symbiotic: str = ""
    migration: str = ""
    sleep: str = ""
    scent: str = ""
    sound: str = ""
    history: str = ""
    myths: str = ""
    culture: str = ""
    threats: str = ""
    conservation_status: str = ""
    success_stories: str = ""
    unknown_fact: str = ""
    record_fact: str = ""
    wild_status: str = ""
    description: str = ""

    # Enrichment (every field optional)
    image_url: str | None = None
    source_url: str | None = None
    observations: list[Observation] = Field(default_factory=list)
    gallery_images: list[str] = Field(default_factory=list)
    seasonal_activity: dict[int, int] = Field(default_factory=dict)
    audio_url: str | None = None
    audio_author: str | None = None
    weather: WeatherSnapshot | None = None

    @model_validator(mode="before")
    @classmethod
    def require_identity(cls, data: Any) -> Any:
        return _fill_identity(data)

    @field_validator("kingdom", "family", *NARRATIVE_FIELDS, mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @property
    def display_name(self) -> str:
        """Human-friendly name: common name with scientific name in parentheses."""
        if self.common_name != self.scientific_name:
            return f"{self.common_name} ({self.scientific_name})"
        return self.common_name

    @property
    def search_name(self) -> str:
        """Name used to query the data sources: scientific name preferred."""
        return self.scientific_name or self.common_name

    @property
    def is_animal(self) -> bool:
        return self.kingdom.strip() == "Animalia"

    def narrative(self) -> dict[str, str]:
        """Non-empty narrative fields in display order."""
        return {name: getattr(self, name) for name in NARRATIVE_FIELDS if getattr(self, name)}


class RelatedSpeciesStub(_CamelModel):
    """Lightweight listing entry for related/browse views."""

    common_name: str = ""
    scientific_name: str = ""
    image_url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def require_identity(cls, data: Any) -> Any:
        return _fill_identity(data)

    @property
    def search_name(self) -> str:
        return self.scientific_name or self.common_name


class FeaturedSpecies(_CamelModel):
    """Reduced SpeciesRecord used on the home page carousel."""

    common_name: str = ""
    scientific_name: str = ""
    kingdom: str = ""
    description: str = ""
    unknown_fact: str = ""
    image_url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def require_identity(cls, data: Any) -> Any:
        return _fill_identity(data)

    @field_validator("kingdom", "description", "unknown_fact", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @property
    def search_name(self) -> str:
        return self.scientific_name or self.common_name
