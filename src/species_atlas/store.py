"""Per-user favorites and search history.

JSON files under the data directory, one per user and collection::

    {base}/favorites/{user_id}.json
    {base}/history/{user_id}.json

Every file is wrapped in a metadata envelope (``meta`` + ``data``) so it can
be inspected by hand.  Both collections are kept newest first.
"""

from __future__ import annotations

import json
import re
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

from species_atlas.errors import StoreError
from species_atlas.schemas import SpeciesRecord

HISTORY_LIMIT = 50

_USER_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.@-]{0,127}$")


class CollectionStore:
    """Reads and writes favorites and history for local users."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.favorites = base_dir / "favorites"
        self.history = base_dir / "history"

    # -- Favorites -----------------------------------------------------------

    def save_favorite(self, user_id: str, record: SpeciesRecord) -> None:
        """Save ``record``, replacing any favorite with the same common name."""
        entries = [
            e for e in self._load(self.favorites, user_id)
            if not _same_name(e.get("commonName", ""), record.common_name)
        ]
        entries.insert(0, {
            "commonName": record.common_name,
            "createdAt": _now(),
            "record": record.model_dump(mode="json", by_alias=True),
        })
        self._save(self.favorites, user_id, entries, source="favorites")

    def remove_favorite(self, user_id: str, common_name: str) -> bool:
        """Remove a favorite by common name; True if one was removed."""
        entries = self._load(self.favorites, user_id)
        kept = [e for e in entries if not _same_name(e.get("commonName", ""), common_name)]
        if len(kept) == len(entries):
            return False
        self._save(self.favorites, user_id, kept, source="favorites")
        return True

    def list_favorites(self, user_id: str) -> list[SpeciesRecord]:
        return [
            SpeciesRecord.model_validate(e["record"])
            for e in self._load(self.favorites, user_id)
            if isinstance(e.get("record"), dict)
        ]

    # -- History -------------------------------------------------------------

    def add_history(self, user_id: str, query: str) -> None:
        query = query.strip()
        if not query:
            return
        entries = self._load(self.history, user_id)
        entries.insert(0, {"query": query, "created_at": _now()})
        self._save(self.history, user_id, entries, source="history")

    def list_history(self, user_id: str, limit: int = HISTORY_LIMIT) -> list[dict[str, str]]:
        """Most recent searches, each ``{"query", "created_at"}``."""
        return self._load(self.history, user_id)[: max(limit, 0)]

    def clear_history(self, user_id: str) -> None:
        path = self._path(self.history, user_id)
        if path.exists():
            path.unlink()

    # -- Files ---------------------------------------------------------------

    def _path(self, collection: Path, user_id: str) -> Path:
        if not isinstance(user_id, str) or not _USER_ID.match(user_id):
            msg = f"Invalid user id: {user_id!r}"
            raise StoreError(msg)
        full = collection / f"{user_id}.json"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {full}"
            raise StoreError(msg) from None
        return full

    def _load(self, collection: Path, user_id: str) -> list[dict[str, Any]]:
        full = self._path(collection, user_id)
        if not full.exists():
            return []
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        data = envelope.get("data", [])
        return [e for e in data if isinstance(e, dict)] if isinstance(data, list) else []

    def _save(self, collection: Path, user_id: str, entries: list[dict[str, Any]], source: str) -> Path:
        full = self._path(collection, user_id)
        full.parent.mkdir(parents=True, exist_ok=True)
        envelope = {
            "meta": {"source": source, "user_id": user_id, "updated_at": _now()},
            "data": entries,
        }
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)
        return full


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _same_name(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()
