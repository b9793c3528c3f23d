"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from species_atlas.cli import (
    cmd_complete,
    cmd_favorites,
    cmd_history,
    cmd_info,
    cmd_letter,
    cmd_search,
    create_parser,
    main,
)
from species_atlas.errors import ConfigurationMissing, SpeciesNotFoundError
from species_atlas.schemas import Observation, RelatedSpeciesStub, SpeciesRecord, WeatherSnapshot
from species_atlas.store import CollectionStore

if TYPE_CHECKING:
    from species_atlas.config import Settings


def _record() -> SpeciesRecord:
    return SpeciesRecord(
        common_name="Snow Leopard",
        scientific_name="Panthera uncia",
        kingdom="Animalia",
        family="Felidae",
        diet="Blue sheep and ibex",
        observations=[Observation(country="Nepal", date="Mar 2, 2025", latitude=28.0, longitude=84.0)],
        weather=WeatherSnapshot(
            temperature=-4.0, condition_code=73, is_day=False, location="Nepal", latitude=28.0, longitude=84.0
        ),
        source_url="https://en.wikipedia.org/wiki/Snow_leopard",
    )


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "species-atlas"

    def test_parser_has_version(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_search_joins_words(self) -> None:
        args = create_parser().parse_args(["search", "snow", "leopard", "--user", "ana"])
        assert args.command == "search"
        assert args.query == ["snow", "leopard"]
        assert args.user == "ana"

    def test_related_family(self) -> None:
        args = create_parser().parse_args(["related", "Red", "Fox", "--family", "Canidae"])
        assert args.name == ["Red", "Fox"]
        assert args.family == "Canidae"

    def test_favorites_defaults(self) -> None:
        args = create_parser().parse_args(["favorites"])
        assert args.action == "list"
        assert args.user == "local"

    def test_history_rejects_unknown_action(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["history", "purge"])


class TestCmdSearch:
    def test_prints_entry(self, settings: Settings) -> None:
        args = argparse.Namespace(query=["snow", "leopard"], user=None)
        with (
            patch("species_atlas.cli.aggregate_species", return_value=_record()) as mock_aggregate,
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            result = cmd_search(args)

        assert result == 0
        assert mock_aggregate.call_args.args[0] == "snow leopard"
        output = mock_stdout.getvalue()
        assert "Snow Leopard (Panthera uncia)" in output
        assert "Diet: Blue sheep and ibex" in output
        assert "Snowy" in output
        assert "night" in output

    def test_not_found_with_suggestion(self, settings: Settings) -> None:
        args = argparse.Namespace(query=["snow", "leperd"], user=None)
        error = SpeciesNotFoundError("snow leperd", suggestion="Snow Leopard")
        with (
            patch("species_atlas.cli.aggregate_species", side_effect=error),
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            result = cmd_search(args)

        assert result == 1
        assert "The archives are silent on 'snow leperd'." in mock_stdout.getvalue()
        assert "Did you mean: Snow Leopard?" in mock_stdout.getvalue()

    def test_records_history_for_user(self, settings: Settings) -> None:
        args = argparse.Namespace(query=["snow", "leopard"], user="ana")
        with (
            patch("species_atlas.cli.aggregate_species", return_value=_record()),
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()),
        ):
            cmd_search(args)

        history = CollectionStore(settings.data_dir).list_history("ana")
        assert history[0]["query"] == "snow leopard"


class TestCmdLetter:
    def test_prints_stubs(self) -> None:
        stubs = [RelatedSpeciesStub(common_name="Quokka", scientific_name="Setonix brachyurus")]
        with (
            patch("species_atlas.cli.list_by_letter", return_value=stubs) as mock_list,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            result = cmd_letter(argparse.Namespace(letter="q"))

        assert result == 0
        mock_list.assert_called_once_with("q")
        assert "- Quokka (Setonix brachyurus)" in mock_stdout.getvalue()

    def test_empty_listing(self) -> None:
        with (
            patch("species_atlas.cli.list_by_letter", return_value=[]),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_letter(argparse.Namespace(letter="x"))
        assert "Nothing to show." in mock_stdout.getvalue()


class TestCmdComplete:
    def test_prints_titles(self) -> None:
        with (
            patch("species_atlas.cli.fetch_title_suggestions", return_value=["Snow leopard", "Snow goose"]),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            result = cmd_complete(argparse.Namespace(query=["snow"]))
        assert result == 0
        assert mock_stdout.getvalue().splitlines() == ["Snow leopard", "Snow goose"]


class TestCmdFavorites:
    def test_add_then_list_then_remove(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.aggregate_species", return_value=_record()),
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_favorites(argparse.Namespace(action="add", name=["Snow", "Leopard"], user="ana")) == 0
            assert cmd_favorites(argparse.Namespace(action="list", name=[], user="ana")) == 0
            assert cmd_favorites(argparse.Namespace(action="remove", name=["Snow", "Leopard"], user="ana")) == 0
            assert cmd_favorites(argparse.Namespace(action="remove", name=["Snow", "Leopard"], user="ana")) == 1

        output = mock_stdout.getvalue()
        assert "Saved Snow Leopard (Panthera uncia)." in output
        assert "- Snow Leopard (Panthera uncia)" in output
        assert "Removed Snow Leopard." in output

    def test_add_requires_name(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_favorites(argparse.Namespace(action="add", name=[], user="ana")) == 2


class TestCmdHistory:
    def test_list_and_clear(self, settings: Settings) -> None:
        CollectionStore(settings.data_dir).add_history("ana", "red fox")
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_history(argparse.Namespace(action="list", user="ana", limit=None))
            cmd_history(argparse.Namespace(action="clear", user="ana", limit=None))
            cmd_history(argparse.Namespace(action="list", user="ana", limit=None))

        output = mock_stdout.getvalue()
        assert "red fox" in output
        assert "History cleared." in output
        assert output.rstrip().endswith("No searches yet.")


class TestCmdInfo:
    def test_prints_app_info(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            result = cmd_info(argparse.Namespace())

        assert result == 0
        output = mock_stdout.getvalue()
        assert "Species Atlas" in output
        assert "API key configured: yes" in output


class TestMain:
    """Tests for main entry point."""

    def test_no_command_shows_help(self) -> None:
        with patch("sys.stdout", new=StringIO()):
            assert main([]) == 0

    def test_dispatches_command(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("species_atlas.cli.cmd_info", return_value=0) as mock_cmd,
        ):
            assert main(["info"]) == 0
        mock_cmd.assert_called_once()

    def test_configuration_missing_exit_code(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("species_atlas.cli.list_featured", side_effect=ConfigurationMissing("no key")),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert main(["featured"]) == 2
        assert "no key" in mock_stderr.getvalue()

    def test_bad_letter_exit_code(self, settings: Settings) -> None:
        with (
            patch("species_atlas.cli.get_settings", return_value=settings),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert main(["letter", "42"]) == 1
        assert "single letter" in mock_stderr.getvalue()
