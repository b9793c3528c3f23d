"""Wikipedia web-encyclopedia data source.

Public API:
  - pages: WikiImage, fetch_wiki_image, fetch_title_suggestions
"""

from species_atlas.datasources.wikipedia.pages import (
    WIKI_API_URL,
    WikiImage,
    fetch_title_suggestions,
    fetch_wiki_image,
)

__all__ = [
    "WIKI_API_URL",
    "WikiImage",
    "fetch_title_suggestions",
    "fetch_wiki_image",
]
