"""Lead images and title suggestions from Wikipedia.

API docs: https://www.mediawiki.org/wiki/API:Main_page
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from species_atlas.services.http import DEFAULT_TIMEOUT, fetch_json

WIKI_API_URL = "https://en.wikipedia.org/w/api.php"

THUMBNAIL_SIZE = 1000
MAX_TITLE_SUGGESTIONS = 5

# =============================================================================
# Data Model
# =============================================================================


@dataclass(frozen=True)
class WikiImage:
    """Lead image of the best-matching article, plus its page URL."""

    image_url: str | None = None
    source_url: str | None = None


# =============================================================================
# API Fetching
# =============================================================================


def search_page_title(query: str, *, timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """Full-text search; title of the top hit."""
    params = {"action": "query", "format": "json", "list": "search", "srsearch": query, "srlimit": 1}
    data = fetch_json(WIKI_API_URL, params, timeout=timeout)
    hits = ((data or {}).get("query") or {}).get("search") if isinstance(data, dict) else None
    if not hits or not isinstance(hits[0], dict):
        return None
    return hits[0].get("title") or None


def _first_page(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    pages = (data.get("query") or {}).get("pages")
    if not isinstance(pages, dict) or not pages:
        return None
    page = next(iter(pages.values()))
    if not isinstance(page, dict) or page.get("pageid", -1) == -1 or "missing" in page:
        return None
    return page


def fetch_wiki_image(query: str, *, timeout: float = DEFAULT_TIMEOUT) -> WikiImage:
    """
    Find the article for ``query`` and return its lead image and URL.

    Prefers the original image over the 1000px thumbnail.  Returns an empty
    ``WikiImage`` when no article or image is found.
    """
    if not query.strip():
        return WikiImage()
    title = search_page_title(query, timeout=timeout)
    if title is None:
        return WikiImage()

    params = {
        "action": "query",
        "format": "json",
        "prop": "pageimages|info",
        "piprop": "thumbnail|original",
        "pithumbsize": THUMBNAIL_SIZE,
        "inprop": "url",
        "titles": title,
        "redirects": 1,
    }
    page = _first_page(fetch_json(WIKI_API_URL, params, timeout=timeout))
    if page is None:
        return WikiImage()

    image = (page.get("original") or {}).get("source") or (page.get("thumbnail") or {}).get("source")
    return WikiImage(image_url=image or None, source_url=page.get("fullurl") or None)


def fetch_title_suggestions(query: str, *, timeout: float = DEFAULT_TIMEOUT) -> list[str]:
    """OpenSearch autocomplete: up to five article titles for a partial query."""
    if not query.strip():
        return []
    params = {"action": "opensearch", "search": query, "limit": 10, "namespace": 0, "format": "json"}
    data = fetch_json(WIKI_API_URL, params, timeout=timeout)
    if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
        return []
    return [title for title in data[1] if isinstance(title, str)][:MAX_TITLE_SUGGESTIONS]
