"""Nature sound recordings from xeno-canto.

API docs: https://xeno-canto.org/explore/api
"""

from __future__ import annotations

from dataclasses import dataclass

from species_atlas.services.http import DEFAULT_TIMEOUT, fetch_json

XENO_CANTO_API = "https://xeno-canto.org/api/2/recordings"

# Only recordings rated "A" (best quality)
QUALITY_FILTER = "q:A"


@dataclass(frozen=True)
class AudioClip:
    """First matching recording.  Both fields None when nothing was found."""

    audio_url: str | None = None
    author: str | None = None


def fetch_nature_audio(name: str, *, timeout: float = DEFAULT_TIMEOUT) -> AudioClip:
    """
    Fetch the top-quality recording for a species.

    Returns an empty ``AudioClip`` for a blank name, no recordings, or an
    unavailable source.
    """
    if not name.strip():
        return AudioClip()
    data = fetch_json(XENO_CANTO_API, {"query": f"{name} {QUALITY_FILTER}"}, timeout=timeout)
    recordings = data.get("recordings") if isinstance(data, dict) else None
    if not recordings or not isinstance(recordings[0], dict):
        return AudioClip()
    first = recordings[0]
    return AudioClip(audio_url=first.get("file") or None, author=first.get("rec") or None)
