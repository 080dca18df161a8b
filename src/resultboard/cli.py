"""resultboard CLI - daily result board."""

import json
import logging
import sys

import click

from .config import load_config
from .core.cards import Card, CardType
from .core.history import HistoryEntry
from .core.results import GameNotFoundError
from .ports import StoreUnavailableError
from .workflows import (
    get_board,
    get_catalog_check,
    get_game_history,
    get_latest_result,
    get_recent_results,
    get_upcoming_cards,
)


@click.group()
@click.version_option(package_name="resultboard")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """resultboard - recent and upcoming daily results."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _format_card(card: Card) -> str:
    """One human-readable line per card."""
    if card.is_placeholder:
        return "  --"
    marker = "*" if card.type is CardType.RECENT else " "
    time_str = card.result_time or "--:--"
    line = f"{marker} {time_str:5}  {card.name}"
    if card.latest_result:
        line += f"  = {card.latest_result}"
    if card.minutes_until_next is not None:
        line += f"  (next in {card.minutes_until_next} min)"
    return line


@main.command()
@click.option("--limit", "-n", default=None, help="Number of cards (1-10)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def upcoming(limit: str | None, as_json: bool):
    """Show recent and upcoming results."""
    config = load_config()
    try:
        result = get_upcoming_cards(config, limit=limit)
    except StoreUnavailableError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(f"As of {result.server_time.strftime('%d/%m/%Y, %H:%M')}")
    for card in result.cards:
        click.echo(_format_card(card))


@main.command()
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def latest(name: str, as_json: bool):
    """Show today's and yesterday's result for one game."""
    config = load_config()
    try:
        result = get_latest_result(config, name)
    except (GameNotFoundError, StoreUnavailableError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(f"{result.name} ({result.result_time})")
    click.echo(f"  Today:     {result.latest_result or 'waiting'}")
    click.echo(f"  Yesterday: {result.previous_result or '--'}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def board(as_json: bool):
    """Show every game with today's result."""
    config = load_config()
    try:
        entries = get_board(config)
    except StoreUnavailableError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps({"all": [e.to_dict() for e in entries]}, indent=2))
        return

    if not entries:
        click.echo("No games configured.")
        return

    for entry in entries:
        result = entry.latest_result or "--"
        when = f"in {entry.minutes_until} min" if entry.minutes_until is not None else "untimed"
        click.echo(f"  {entry.result_time:5}  {entry.name:20} {result:6} ({when})")


def _format_history(entry: HistoryEntry, with_name: bool = True) -> str:
    line = f"  {entry.result_date.strftime('%d/%m/%Y')} {entry.result_time:5}"
    if with_name:
        line += f"  {entry.name}"
    line += f"  = {entry.value}"
    if entry.declared_at:
        line += f"  (declared {entry.declared_at.strftime('%d/%m/%Y, %H:%M')})"
    return line


@main.command()
@click.option("--limit", "-n", default=20, type=click.IntRange(min=1), help="Number of results")
@click.option("--months", default=2, type=click.IntRange(min=1), help="Months of charts to scan")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def recent(limit: int, months: int, as_json: bool):
    """Show the latest declared results across all games."""
    config = load_config()
    try:
        entries = get_recent_results(config, limit=limit, months=months)
    except StoreUnavailableError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo("No results declared yet.")
        return

    for entry in entries:
        click.echo(_format_history(entry))


@main.command()
@click.argument("name")
@click.option("--months", default=3, type=click.IntRange(min=1), help="Months of charts to scan")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def history(name: str, months: int, as_json: bool):
    """Show declared results for one game."""
    config = load_config()
    try:
        entries = get_game_history(config, name, months=months)
    except (GameNotFoundError, StoreUnavailableError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo(f"No results declared for {name}.")
        return

    click.echo(entries[0].name)
    for entry in entries:
        click.echo(_format_history(entry, with_name=False))


@main.command()
def check():
    """Validate configured result times."""
    config = load_config()
    try:
        checks = get_catalog_check(config)
    except StoreUnavailableError as e:
        _fail(str(e))

    invalid = 0
    for c in checks:
        if c.is_valid:
            click.echo(f"  ok       {c.name}: {c.raw_time!r} -> {c.canonical}")
        else:
            invalid += 1
            click.echo(f"  invalid  {c.name}: {c.raw_time!r}")

    if invalid:
        click.echo(f"\n{invalid} game(s) will only appear as untimed fallback cards.")
        sys.exit(1)
