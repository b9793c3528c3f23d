"""Tests for the domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from species_atlas.schemas import (
    FeaturedSpecies,
    Observation,
    RecordBasis,
    RelatedSpeciesStub,
    SpeciesRecord,
    WeatherSnapshot,
)


class TestSpeciesRecord:
    """Identity, coercion and derived properties."""

    def test_accepts_camel_case(self) -> None:
        record = SpeciesRecord.model_validate(
            {"commonName": "Snow Leopard", "scientificName": "Panthera uncia", "wildStatus": "Rare"}
        )
        assert record.common_name == "Snow Leopard"
        assert record.wild_status == "Rare"

    def test_accepts_snake_case(self) -> None:
        record = SpeciesRecord(common_name="Snow Leopard", scientific_name="Panthera uncia")
        assert record.scientific_name == "Panthera uncia"

    def test_dumps_camel_case(self) -> None:
        record = SpeciesRecord(common_name="Snow Leopard", scientific_name="Panthera uncia")
        dumped = record.model_dump(by_alias=True)
        assert dumped["commonName"] == "Snow Leopard"
        assert "galleryImages" in dumped

    def test_requires_a_name(self) -> None:
        with pytest.raises(ValidationError):
            SpeciesRecord.model_validate({"kingdom": "Animalia"})

    def test_blank_names_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SpeciesRecord.model_validate({"commonName": "  ", "scientificName": ""})

    def test_missing_name_filled_from_other(self) -> None:
        record = SpeciesRecord.model_validate({"commonName": "Axolotl"})
        assert record.scientific_name == "Axolotl"
        assert record.display_name == "Axolotl"

    def test_list_values_coerced_to_text(self) -> None:
        record = SpeciesRecord.model_validate(
            {"commonName": "Red Fox", "diet": ["rodents", "berries"], "threats": None}
        )
        assert record.diet == "rodents, berries"
        assert record.threats == ""

    def test_display_and_search_name(self) -> None:
        record = SpeciesRecord(common_name="Red Fox", scientific_name="Vulpes vulpes")
        assert record.display_name == "Red Fox (Vulpes vulpes)"
        assert record.search_name == "Vulpes vulpes"

    def test_is_animal(self) -> None:
        assert SpeciesRecord(common_name="Red Fox", kingdom="Animalia").is_animal
        assert not SpeciesRecord(common_name="Oak", kingdom="Plantae").is_animal
        assert not SpeciesRecord(common_name="Mystery").is_animal

    def test_narrative_skips_empty_fields(self) -> None:
        record = SpeciesRecord(common_name="Red Fox", diet="Omnivore", description="A small canid")
        assert record.narrative() == {"diet": "Omnivore", "description": "A small canid"}

    def test_enrichment_defaults_empty(self) -> None:
        record = SpeciesRecord(common_name="Red Fox")
        assert record.image_url is None
        assert record.observations == []
        assert record.gallery_images == []
        assert record.seasonal_activity == {}
        assert record.weather is None

    def test_json_round_trip_keeps_month_keys(self) -> None:
        record = SpeciesRecord(common_name="Red Fox", seasonal_activity={1: 3, 6: 40})
        restored = SpeciesRecord.model_validate_json(record.model_dump_json(by_alias=True))
        assert restored.seasonal_activity == {1: 3, 6: 40}


class TestObservation:
    def test_defaults(self) -> None:
        obs = Observation()
        assert obs.country == "International Waters"
        assert obs.date == "Unknown Date"
        assert obs.recorded_by == "Anonymous"
        assert obs.basis is RecordBasis.UNSPECIFIED
        assert not obs.has_coordinates

    def test_location_label_prefers_locality(self) -> None:
        assert Observation(country="Mexico", locality="Michoacán").location_label == "Michoacán"
        assert Observation(country="Mexico").location_label == "Mexico"

    def test_basis_labels(self) -> None:
        assert RecordBasis.FIELD_SIGHTED.label == "Sighted in wild"
        assert RecordBasis.MUSEUM_SPECIMEN.label == "Museum Specimen"
        assert RecordBasis.UNSPECIFIED.label == "Observation"


class TestWeatherSnapshot:
    def test_condition_label(self) -> None:
        snap = WeatherSnapshot(
            temperature=21.5, condition_code=61, is_day=True, location="Mexico", latitude=19.4, longitude=-100.3
        )
        assert snap.condition == "Rainy"


class TestListingModels:
    def test_stub_fills_identity(self) -> None:
        stub = RelatedSpeciesStub.model_validate({"scientificName": "Quercus alba"})
        assert stub.common_name == "Quercus alba"
        assert stub.image_url is None

    def test_stub_requires_a_name(self) -> None:
        with pytest.raises(ValidationError):
            RelatedSpeciesStub.model_validate({"imageUrl": "https://example.org/x.jpg"})

    def test_featured_coerces_text(self) -> None:
        featured = FeaturedSpecies.model_validate(
            {"commonName": "Axolotl", "scientificName": "Ambystoma mexicanum", "unknownFact": ["regrows limbs"]}
        )
        assert featured.unknown_fact == "regrows limbs"
        assert featured.search_name == "Ambystoma mexicanum"
