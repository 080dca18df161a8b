"""Shared workflow layer between the CLI and any other entry point.

Each function captures `now` once, performs at most one catalog fetch and
one batched value fetch per month touched, then hands off to the pure core.
Store failures propagate as StoreUnavailableError.
"""

import logging
from datetime import datetime, timedelta

from .adapters.file_store import FileResultStore
from .adapters.http_store import HttpResultStore
from .config import Config
from .core.cards import CardList, compose_cards
from .core.classify import classify, pin_recent
from .core.games import find_game
from .core.history import RECENT_LIMIT, Declaration, HistoryEntry, game_history, months_back, recent_results
from .core.occurrence import build_occurrences
from .core.results import (
    BoardEntry,
    CatalogCheck,
    GameNotFoundError,
    LatestResult,
    board_entries,
    check_catalog,
    latest_result,
)
from .ports import GameCatalog, ResultStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileResultStore | HttpResultStore:
    """Resolve the configured store; HTTP when a URL is set, else local files."""
    if config.store_url:
        return HttpResultStore(config.store_url, token=config.store_token, timeout=config.store_timeout)
    return FileResultStore(config.data_path())


def current_time(config: Config) -> datetime:
    """Now in the reference timezone."""
    return datetime.now(config.tzinfo())


def get_upcoming_cards(
    config: Config,
    limit: int | str | None = None,
    now: datetime | None = None,
    catalog: GameCatalog | None = None,
    store: ResultStore | None = None,
) -> CardList:
    """Classify the catalog at `now` and compose the card list."""
    settings = config.board_settings()
    limit = settings.clamp_limit(limit)
    now = (now or current_time(config)).astimezone(config.tzinfo())
    if catalog is None or store is None:
        default = get_store(config)
        catalog = catalog or default
        store = store or default

    games = catalog.list_games()
    occurrences, untimed = build_occurrences(games, now)
    if untimed:
        logger.debug(f"{len(untimed)} game(s) with malformed result time: {[g.name for g in untimed]}")

    classification = classify(occurrences, now, settings, limit)
    candidates = classification.candidate_ids()
    values = store.get_declared_values(candidates, now.year, now.month) if candidates else {}

    pins = pin_recent(classification, values, settings)
    logger.debug(
        f"{len(classification.passed)} passed, {len(classification.window)} in window, "
        f"{len(pins)} pinned, {len(candidates)} looked up"
    )
    return compose_cards(classification, pins, untimed, values, settings, limit)


def get_latest_result(
    config: Config,
    name: str,
    now: datetime | None = None,
    catalog: GameCatalog | None = None,
    store: ResultStore | None = None,
) -> LatestResult:
    """Today's and yesterday's result for one game, looked up by name."""
    now = (now or current_time(config)).astimezone(config.tzinfo())
    if catalog is None or store is None:
        default = get_store(config)
        catalog = catalog or default
        store = store or default

    game = find_game(catalog.list_games(), name)
    if game is None:
        raise GameNotFoundError(f"Game not found: {name}")

    today_values = store.get_declared_values([game.id], now.year, now.month)
    yesterday = (now - timedelta(days=1)).date()
    if (yesterday.year, yesterday.month) == (now.year, now.month):
        yesterday_values = today_values
    else:
        yesterday_values = store.get_declared_values([game.id], yesterday.year, yesterday.month)

    return latest_result(game, now, today_values, yesterday, yesterday_values)


def get_board(
    config: Config,
    now: datetime | None = None,
    catalog: GameCatalog | None = None,
    store: ResultStore | None = None,
) -> list[BoardEntry]:
    """Every game with today's result and time to next run."""
    now = (now or current_time(config)).astimezone(config.tzinfo())
    if catalog is None or store is None:
        default = get_store(config)
        catalog = catalog or default
        store = store or default

    games = catalog.list_games()
    if not games:
        return []
    values = store.get_declared_values([g.id for g in games], now.year, now.month)
    return board_entries(games, now, values)


def get_catalog_check(config: Config, catalog: GameCatalog | None = None) -> list[CatalogCheck]:
    """Normalize every configured result time for review."""
    catalog = catalog or get_store(config)
    checks = check_catalog(catalog.list_games())
    invalid = [c.name for c in checks if not c.is_valid]
    if invalid:
        logger.info(f"{len(invalid)} game(s) have malformed result times: {invalid}")
    return checks


def _fetch_declarations(store: ResultStore, game_ids: list[str], now: datetime, months: int) -> list[Declaration]:
    """One declaration fetch per month, current month first."""
    declarations = []
    for year, month in months_back(now, months):
        declarations.extend(store.get_declarations(game_ids, year, month))
    return declarations


def get_recent_results(
    config: Config,
    limit: int = RECENT_LIMIT,
    months: int = 2,
    now: datetime | None = None,
    catalog: GameCatalog | None = None,
    store: ResultStore | None = None,
) -> list[HistoryEntry]:
    """Latest declared results across every game, newest declaration first."""
    now = (now or current_time(config)).astimezone(config.tzinfo())
    if catalog is None or store is None:
        default = get_store(config)
        catalog = catalog or default
        store = store or default

    games = catalog.list_games()
    if not games:
        return []
    declarations = _fetch_declarations(store, [g.id for g in games], now, months)
    logger.debug(f"{len(declarations)} declaration(s) across {months} month(s)")
    return recent_results(games, declarations, now, limit)


def get_game_history(
    config: Config,
    name: str,
    months: int = 3,
    now: datetime | None = None,
    catalog: GameCatalog | None = None,
    store: ResultStore | None = None,
) -> list[HistoryEntry]:
    """Declared results for one game over the last `months` months."""
    now = (now or current_time(config)).astimezone(config.tzinfo())
    if catalog is None or store is None:
        default = get_store(config)
        catalog = catalog or default
        store = store or default

    game = find_game(catalog.list_games(), name)
    if game is None:
        raise GameNotFoundError(f"Game not found: {name}")

    return game_history(game, _fetch_declarations(store, [game.id], now, months), now)
