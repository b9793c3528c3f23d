"""Prompt text and response schemas for the generative source."""

from __future__ import annotations

import json

#: Shape of one species entry, shown to the model verbatim.
SPECIES_SCHEMA: dict[str, str] = {
    "commonName": "String",
    "scientificName": "String",
    "kingdom": "String ('Animalia', 'Plantae', or 'Fungi')",
    "firstNamedBy": "String (Year & Scientist)",
    "etymology": "String (Origin of name)",
    "ancestralHome": "String",
    "nativeRange": "String",
    "family": "String",
    "relatives": "String",
    "size": "String",
    "recordSizeWeight": "String",
    "colors": "String",
    "movement": "String",
    "reproduction": "String",
    "lifespan": "String",
    "longestLife": "String",
    "diet": "String",
    "defense": "String",
    "toxin": "String",
    "symbiotic": "String",
    "migration": "String",
    "sleep": "String",
    "scent": "String",
    "sound": "String",
    "history": "String",
    "myths": "String",
    "culture": "String",
    "threats": "String",
    "conservationStatus": "String",
    "successStories": "String",
    "unknownFact": "String",
    "recordFact": "String",
    "wildStatus": "String",
    "description": "String (Summary)",
}

FEATURED_SCHEMA: dict[str, str] = {
    "commonName": "String",
    "scientificName": "String",
    "kingdom": "String",
    "description": "String",
    "unknownFact": "String",
}

STUB_SCHEMA = '{ "commonName": "...", "scientificName": "..." }'

ENTRY_TEMPERATURE = 0.3
FEATURED_TEMPERATURE = 0.5

RELATED_COUNT = 4
LETTER_COUNT = 12
FEATURED_COUNT = 5

# Answer the suggestion prompt uses to say "nothing relevant".
NO_MATCH_TOKEN = "null"

_STRICT_JSON = (
    "Ensure all JSON property names and string values are double-quoted. "
    "Escape any double quotes within strings. Do not include trailing commas or comments."
)


def entry_system_instruction() -> str:
    return (
        "You are a biological encyclopedia. "
        f"Return a strict JSON object matching this schema: {json.dumps(SPECIES_SCHEMA)}. "
        f"{_STRICT_JSON} "
        "Tone: Quiet, educational, slightly poetic nature writing."
    )


def entry_prompt(query: str) -> str:
    return (
        f'Generate a detailed entry for: "{query}". '
        'If the query is a generic habitat (e.g. "Forest"), choose a representative organism. '
        "RETURN ONLY JSON."
    )


def image_prompt(common_name: str, scientific_name: str) -> str:
    return (
        f"A photorealistic, highly detailed nature photograph of {common_name} "
        f"({scientific_name}) in its natural habitat. Cinematic lighting, "
        "8k resolution, National Geographic style."
    )


def suggestion_prompt(query: str) -> str:
    return (
        f'User searched for "{query}". Suggest ONE corrected species name. '
        f'If unrelated to nature, return "{NO_MATCH_TOKEN}".'
    )


def list_system_instruction() -> str:
    return (
        "You are a taxonomy index. Return a valid JSON object with a key 'items' "
        f"containing an array of objects shaped {STUB_SCHEMA}. {_STRICT_JSON}"
    )


def related_prompt(name: str, family: str) -> str:
    return f'List {RELATED_COUNT} species related to "{name}" (Family: {family}).'


def letter_prompt(letter: str) -> str:
    return f'List {LETTER_COUNT} interesting species starting with letter "{letter}".'


def featured_system_instruction() -> str:
    return (
        f"You are a nature curator. Generate {FEATURED_COUNT} unique, fascinating nature entries. "
        f"Return a valid JSON OBJECT with a key 'items' containing an array of {FEATURED_COUNT} "
        f"objects. Schema: {json.dumps(FEATURED_SCHEMA)} {_STRICT_JSON}"
    )


def featured_prompt() -> str:
    return f"Generate {FEATURED_COUNT} featured species."
