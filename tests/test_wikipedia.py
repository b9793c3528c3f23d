"""Tests for Wikipedia lead images and title suggestions."""

from __future__ import annotations

from unittest.mock import Mock, patch

import requests

from species_atlas.datasources.wikipedia import WikiImage, fetch_title_suggestions, fetch_wiki_image

SAMPLE_SEARCH_RESPONSE: dict = {"query": {"search": [{"title": "Snow leopard", "pageid": 28223}]}}

SAMPLE_PAGE_RESPONSE: dict = {
    "query": {
        "pages": {
            "28223": {
                "pageid": 28223,
                "title": "Snow leopard",
                "fullurl": "https://en.wikipedia.org/wiki/Snow_leopard",
                "original": {"source": "https://upload.wikimedia.org/snow_leopard.jpg"},
                "thumbnail": {"source": "https://upload.wikimedia.org/1000px-snow_leopard.jpg"},
            }
        }
    }
}


def _response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestFetchWikiImage:
    @patch("species_atlas.services.http.session.get")
    def test_prefers_original(self, mock_get: Mock) -> None:
        mock_get.side_effect = [_response(SAMPLE_SEARCH_RESPONSE), _response(SAMPLE_PAGE_RESPONSE)]

        result = fetch_wiki_image("Panthera uncia")

        assert result.image_url == "https://upload.wikimedia.org/snow_leopard.jpg"
        assert result.source_url == "https://en.wikipedia.org/wiki/Snow_leopard"
        assert mock_get.call_args_list[1].kwargs["params"]["titles"] == "Snow leopard"

    @patch("species_atlas.services.http.session.get")
    def test_falls_back_to_thumbnail(self, mock_get: Mock) -> None:
        page = {"query": {"pages": {"1": {"pageid": 1, "thumbnail": {"source": "https://x/thumb.jpg"}}}}}
        mock_get.side_effect = [_response(SAMPLE_SEARCH_RESPONSE), _response(page)]

        result = fetch_wiki_image("Panthera uncia")

        assert result.image_url == "https://x/thumb.jpg"
        assert result.source_url is None

    @patch("species_atlas.services.http.session.get")
    def test_no_search_hits(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"query": {"search": []}})
        assert fetch_wiki_image("zzzz") == WikiImage()

    @patch("species_atlas.services.http.session.get")
    def test_missing_page(self, mock_get: Mock) -> None:
        missing = {"query": {"pages": {"-1": {"title": "Snow leopard", "missing": ""}}}}
        mock_get.side_effect = [_response(SAMPLE_SEARCH_RESPONSE), _response(missing)]
        assert fetch_wiki_image("Panthera uncia") == WikiImage()

    @patch("species_atlas.services.http.session.get")
    def test_unavailable(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("down")
        assert fetch_wiki_image("Panthera uncia") == WikiImage()


class TestFetchTitleSuggestions:
    @patch("species_atlas.services.http.session.get")
    def test_opensearch_titles(self, mock_get: Mock) -> None:
        titles = ["Snow leopard", "Snow goose", "Snowy owl", "Snow crab", "Snowshoe hare", "Snow bunting"]
        mock_get.return_value = _response(["snow", titles, [], []])

        assert fetch_title_suggestions("snow") == titles[:5]
        assert mock_get.call_args.kwargs["params"]["action"] == "opensearch"

    @patch("species_atlas.services.http.session.get")
    def test_blank_query(self, mock_get: Mock) -> None:
        assert fetch_title_suggestions(" ") == []
        mock_get.assert_not_called()

    @patch("species_atlas.services.http.session.get")
    def test_unexpected_shape(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"error": "bad request"})
        assert fetch_title_suggestions("snow") == []
