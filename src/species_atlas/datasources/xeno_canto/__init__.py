"""xeno-canto bioacoustic archive data source.

Public API:
  - recordings: AudioClip, fetch_nature_audio
"""

from species_atlas.datasources.xeno_canto.recordings import (
    XENO_CANTO_API,
    AudioClip,
    fetch_nature_audio,
)

__all__ = ["XENO_CANTO_API", "AudioClip", "fetch_nature_audio"]
