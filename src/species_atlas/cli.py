"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
import textwrap
from typing import TYPE_CHECKING

from species_atlas import __version__
from species_atlas.conditions import c_to_f
from species_atlas.config import get_settings
from species_atlas.datasources.gemini import GeminiSource
from species_atlas.datasources.wikipedia import fetch_title_suggestions
from species_atlas.errors import ConfigurationMissing, SpeciesNotFoundError, StoreError
from species_atlas.flows import (
    aggregate_species,
    list_by_letter,
    list_featured,
    list_related,
    suggest_correction,
)
from species_atlas.log import configure_logging
from species_atlas.store import CollectionStore

if TYPE_CHECKING:
    from species_atlas.schemas import RelatedSpeciesStub, SpeciesRecord

DEFAULT_USER = "local"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="species-atlas",
        description="One-query species encyclopedia built from generated text and open biodiversity data",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Build the full entry for a species")
    search_parser.add_argument("query", nargs="+", help="Common name, scientific name or habitat")
    search_parser.add_argument("--user", default=None, help="Record the search in this user's history")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest a corrected species name")
    suggest_parser.add_argument("query", nargs="+")

    related_parser = subparsers.add_parser("related", help="List species related to a species")
    related_parser.add_argument("name", nargs="+")
    related_parser.add_argument("--family", default="", help="Taxonomic family of the species")

    letter_parser = subparsers.add_parser("letter", help="List species starting with a letter")
    letter_parser.add_argument("letter")

    subparsers.add_parser("featured", help="List featured species")

    complete_parser = subparsers.add_parser("complete", help="Autocomplete encyclopedia titles")
    complete_parser.add_argument("query", nargs="+")

    favorites_parser = subparsers.add_parser("favorites", help="Manage saved species")
    favorites_parser.add_argument(
        "action", choices=["list", "add", "remove"], nargs="?", default="list"
    )
    favorites_parser.add_argument("name", nargs="*", help="Species to add or remove")
    favorites_parser.add_argument("--user", default=DEFAULT_USER)

    history_parser = subparsers.add_parser("history", help="Show or clear search history")
    history_parser.add_argument("action", choices=["list", "clear"], nargs="?", default="list")
    history_parser.add_argument("--user", default=DEFAULT_USER)
    history_parser.add_argument("--limit", type=int, default=None)

    subparsers.add_parser("info", help="Show application info")

    return parser


# =============================================================================
# Output helpers
# =============================================================================


def print_progress(percent: int, message: str) -> None:
    print(f"[{percent:3d}%] {message}")


def print_entry(record: SpeciesRecord) -> None:
    """Render an entry as plain text."""
    print()
    print(record.display_name)
    print("=" * len(record.display_name))
    if record.kingdom or record.family:
        print(f"Kingdom: {record.kingdom or '?'}  Family: {record.family or '?'}")
    for field_name, text in record.narrative().items():
        label = field_name.replace("_", " ").capitalize()
        print(textwrap.fill(f"{label}: {text}", width=88, subsequent_indent="    "))

    if record.observations:
        print("\nRecent sightings:")
        for obs in record.observations:
            print(f"  - {obs.date}  {obs.location_label}  [{obs.basis.label}]  by {obs.recorded_by}")
    if record.weather is not None:
        w = record.weather
        period = "day" if w.is_day else "night"
        print(
            f"\nConditions at {w.location}: {w.temperature:.1f}°C ({c_to_f(w.temperature):.0f}°F), "
            f"{w.condition}, {period}"
        )
    if record.seasonal_activity:
        peak = max(record.seasonal_activity, key=lambda m: record.seasonal_activity[m])
        print(f"Peak activity: month {peak}")
    if record.audio_url:
        print(f"Call recording: {record.audio_url} (by {record.audio_author or 'unknown'})")
    if record.gallery_images:
        print(f"Gallery: {len(record.gallery_images)} images")
    if record.source_url:
        print(f"Source: {record.source_url}")


def print_stubs(stubs: list[RelatedSpeciesStub]) -> None:
    if not stubs:
        print("Nothing to show.")
        return
    for stub in stubs:
        image = f"  {stub.image_url}" if stub.image_url else ""
        print(f"- {stub.common_name} ({stub.scientific_name}){image}")


def print_not_found(error: SpeciesNotFoundError) -> None:
    print(f"The archives are silent on '{error.query}'.")
    if error.suggestion:
        print(f"Did you mean: {error.suggestion}?")


# =============================================================================
# Commands
# =============================================================================


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    query = " ".join(args.query)
    if args.user:
        CollectionStore(get_settings().data_dir).add_history(args.user, query)
    try:
        record = aggregate_species(query, on_progress=print_progress)
    except SpeciesNotFoundError as e:
        print_not_found(e)
        return 1
    print_entry(record)
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the 'suggest' command."""
    query = " ".join(args.query)
    suggestion = suggest_correction(query, GeminiSource.from_settings(get_settings()))
    if suggestion is None:
        print(f"No suggestion for '{query}'.")
        return 1
    print(suggestion)
    return 0


def cmd_related(args: argparse.Namespace) -> int:
    """Handle the 'related' command."""
    print_stubs(list_related(" ".join(args.name), args.family))
    return 0


def cmd_letter(args: argparse.Namespace) -> int:
    """Handle the 'letter' command."""
    print_stubs(list_by_letter(args.letter))
    return 0


def cmd_featured(_args: argparse.Namespace) -> int:
    """Handle the 'featured' command."""
    featured = list_featured()
    if not featured:
        print("Nothing to show.")
    for item in featured:
        print(f"- {item.common_name} ({item.scientific_name}) [{item.kingdom or '?'}]")
        if item.description:
            print(textwrap.indent(textwrap.fill(item.description, width=84), "    "))
    return 0


def cmd_complete(args: argparse.Namespace) -> int:
    """Handle the 'complete' command."""
    for title in fetch_title_suggestions(" ".join(args.query)):
        print(title)
    return 0


def cmd_favorites(args: argparse.Namespace) -> int:
    """Handle the 'favorites' command."""
    store = CollectionStore(get_settings().data_dir)
    name = " ".join(args.name)

    if args.action == "list":
        saved = store.list_favorites(args.user)
        if not saved:
            print("No saved species.")
        for record in saved:
            print(f"- {record.display_name}")
        return 0

    if not name:
        print(f"favorites {args.action}: a species name is required", file=sys.stderr)
        return 2

    if args.action == "remove":
        if store.remove_favorite(args.user, name):
            print(f"Removed {name}.")
            return 0
        print(f"{name} is not in your collection.")
        return 1

    try:
        record = aggregate_species(name, on_progress=print_progress)
    except SpeciesNotFoundError as e:
        print_not_found(e)
        return 1
    store.save_favorite(args.user, record)
    print(f"Saved {record.display_name}.")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """Handle the 'history' command."""
    settings = get_settings()
    store = CollectionStore(settings.data_dir)
    if args.action == "clear":
        store.clear_history(args.user)
        print("History cleared.")
        return 0

    entries = store.list_history(args.user, args.limit or settings.history_limit)
    if not entries:
        print("No searches yet.")
    for entry in entries:
        print(f"{entry['created_at'][:19].replace('T', ' ')}  {entry['query']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Text model: {settings.text_model}")
    print(f"Image model: {settings.image_model}")
    print(f"API key configured: {'yes' if settings.has_api_key else 'no'}")
    print(f"Data directory: {settings.data_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings.log_level, debug=args.debug or settings.debug)

    commands = {
        "search": cmd_search,
        "suggest": cmd_suggest,
        "related": cmd_related,
        "letter": cmd_letter,
        "featured": cmd_featured,
        "complete": cmd_complete,
        "favorites": cmd_favorites,
        "history": cmd_history,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except ConfigurationMissing as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (StoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
