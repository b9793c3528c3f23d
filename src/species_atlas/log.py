"""Logging setup for the CLI and scripts.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module is what turns them on.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers kept at WARNING unless debugging.
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai", "prefect")


def configure_logging(level: str = "WARNING", *, debug: bool = False) -> None:
    """Configure root logging once for the process."""
    app_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=app_level, format=LOG_FORMAT)
    logging.getLogger("species_atlas").setLevel(app_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if debug else logging.WARNING)
