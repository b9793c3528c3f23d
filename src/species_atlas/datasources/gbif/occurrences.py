"""Recent geotagged occurrence records from GBIF."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from species_atlas.datasources.gbif import client
from species_atlas.schemas import Observation, RecordBasis

DEFAULT_LIMIT = 4
DEFAULT_YEARS = 5

#: GBIF basisOfRecord → display classification.  Anything else is unspecified.
BASIS_OF_RECORD: dict[str, RecordBasis] = {
    "HUMAN_OBSERVATION": RecordBasis.FIELD_SIGHTED,
    "PRESERVED_SPECIMEN": RecordBasis.MUSEUM_SPECIMEN,
    "MACHINE_OBSERVATION": RecordBasis.AUTOMATED_SENSOR,
    "FOSSIL_SPECIMEN": RecordBasis.FOSSIL,
}


# =============================================================================
# Parsing
# =============================================================================


def format_basis(basis: str | None) -> RecordBasis:
    return BASIS_OF_RECORD.get(basis or "", RecordBasis.UNSPECIFIED)


def format_event_date(event_date: str | None) -> str:
    """
    Render a GBIF ``eventDate`` as e.g. ``"Jun 15, 2024"``.

    Intervals (``2024-06-01/2024-06-30``) use their start; anything
    unparseable becomes ``"Unknown Date"``.
    """
    if not event_date:
        return "Unknown Date"
    start = event_date.split("/")[0].strip()
    try:
        parsed: date = datetime.fromisoformat(start).date()
    except ValueError:
        try:
            parsed = date.fromisoformat(start[:10])
        except ValueError:
            return "Unknown Date"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _coordinate(value: Any) -> float | None:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def parse_occurrence(row: dict[str, Any]) -> Observation:
    """Map one occurrence search row to an ``Observation``."""
    return Observation(
        country=row.get("country") or "International Waters",
        date=format_event_date(row.get("eventDate")),
        basis=format_basis(row.get("basisOfRecord")),
        recorded_by=row.get("recordedBy") or "Anonymous",
        locality=row.get("locality") or row.get("stateProvince") or None,
        latitude=_coordinate(row.get("decimalLatitude")),
        longitude=_coordinate(row.get("decimalLongitude")),
    )


# =============================================================================
# API Fetching
# =============================================================================


def fetch_recent_observations(
    name: str,
    *,
    limit: int = DEFAULT_LIMIT,
    years: int = DEFAULT_YEARS,
    today: date | None = None,
    timeout: float = client.DEFAULT_TIMEOUT,
) -> list[Observation]:
    """
    Fetch recent geotagged occurrences of a species.

    Args:
        name: Scientific (preferred) or common name.
        limit: Maximum records to return.
        years: How far back to look, counting the current year.
        today: Reference date (defaults to today).
        timeout: Per-call timeout in seconds.

    Returns:
        Observations, newest search results first; empty when the name does
        not resolve or the source is unavailable.
    """
    taxon_key = client.match_taxon_key(name, timeout=timeout)
    if taxon_key is None:
        return []

    current_year = (today or date.today()).year
    params: dict[str, Any] = {
        "taxonKey": taxon_key,
        "limit": limit,
        "hasCoordinate": "true",
        "year": f"{current_year - years},{current_year}",
    }
    rows = client.search_occurrences(params, timeout=timeout)
    return [parse_occurrence(row) for row in rows[:limit]]
