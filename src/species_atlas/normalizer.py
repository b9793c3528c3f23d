"""
Tolerant extraction of structured records from generated text.

The generator is asked for strict JSON but is not bound to deliver it: output
may arrive inside Markdown code fences or between sentences of commentary.
``extract_json_payload`` strips fences and slices from the earliest opening
brace/bracket to the latest closing one; the ``extract_*`` functions parse
that span and validate it against the domain models.

Everything here is pure.  Failures are returned as values, never raised.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from species_atlas.schemas import SpeciesRecord

FENCE_MARKERS = ("```json", "```JSON", "```")

#: Keys under which a list-shaped answer may be wrapped in an object.
LIST_KEYS = ("items", "species")


# =============================================================================
# Result types
# =============================================================================


@dataclass(frozen=True)
class ParsedRecord:
    """Successful normalization."""

    record: SpeciesRecord


@dataclass(frozen=True)
class NormalizationFailure:
    """Generated text could not be turned into a record."""

    reason: str
    raw_text: str = ""


# =============================================================================
# Extraction
# =============================================================================


def extract_json_payload(raw_text: str | None) -> str:
    """
    Strip formatting noise around a JSON container.

    Removes code-fence markers, trims, then slices from the first ``{`` or
    ``[`` (whichever comes first) to the last ``}`` or ``]`` (whichever comes
    last).  When no such span exists the trimmed text is returned unchanged.
    """
    if not raw_text:
        return ""
    cleaned = raw_text
    for marker in FENCE_MARKERS:
        cleaned = cleaned.replace(marker, "")
    cleaned = cleaned.strip()

    starts = [i for i in (cleaned.find("{"), cleaned.find("[")) if i != -1]
    start = min(starts) if starts else -1
    end = max(cleaned.rfind("}"), cleaned.rfind("]"))

    if start != -1 and end != -1 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned


def parse_json_payload(raw_text: str | None) -> Any | None:
    """Extract and decode the JSON payload, or ``None`` if it doesn't parse."""
    payload = extract_json_payload(raw_text)
    if not payload:
        return None
    try:
        return json.loads(payload)
    except json.JSONDecodeError:
        return None


def extract_record(raw_text: str | None) -> ParsedRecord | NormalizationFailure:
    """
    Turn generated text into a validated ``SpeciesRecord``.

    Returns ``NormalizationFailure`` when the text holds no parseable JSON
    object or the object lacks identity (common or scientific name).
    """
    raw = raw_text or ""
    if not raw.strip():
        return NormalizationFailure("generator returned empty content", raw)

    data = parse_json_payload(raw)
    if data is None:
        return NormalizationFailure("no parseable JSON in generated text", raw)
    if isinstance(data, list) and len(data) == 1 and isinstance(data[0], dict):
        data = data[0]
    if not isinstance(data, dict):
        return NormalizationFailure(f"expected a JSON object, got {type(data).__name__}", raw)

    try:
        record = SpeciesRecord.model_validate(data)
    except ValidationError as exc:
        return NormalizationFailure(f"record failed validation: {exc.error_count()} error(s)", raw)
    return ParsedRecord(record)


def extract_items(raw_text: str | None) -> list[dict[str, Any]]:
    """
    Extract the list payload of a listing answer.

    Accepts a top-level array or an object wrapping one under ``items`` or
    ``species``.  Non-object entries are dropped; anything else is ``[]``.
    """
    data = parse_json_payload(raw_text)
    if isinstance(data, dict):
        data = next((data[k] for k in LIST_KEYS if isinstance(data.get(k), list)), [])
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]
