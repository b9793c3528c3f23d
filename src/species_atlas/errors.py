"""Exceptions that cross the package boundary.

Per-source failures never show up here: every adapter recovers to an empty
contribution.  Only configuration problems and "nothing found" reach callers.
"""

from __future__ import annotations


class SpeciesAtlasError(Exception):
    """Base class for all species-atlas errors."""


class ConfigurationMissing(SpeciesAtlasError):
    """Required credentials are absent; raised before any network call."""


class SpeciesNotFoundError(SpeciesAtlasError):
    """The archives had nothing usable for a query.

    Carries at most one corrected name the caller may offer instead.
    """

    def __init__(self, query: str, suggestion: str | None = None, reason: str = "") -> None:
        self.query = query
        self.suggestion = suggestion
        self.reason = reason
        super().__init__(f"The archives are silent on {query!r}")


class StoreError(SpeciesAtlasError):
    """A favorites/history operation was given an invalid key."""
