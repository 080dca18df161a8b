"""Functional core - pure business logic with no I/O."""

from .games import Game, TimeOfDay, parse_time_of_day, normalize_value, find_game
from .occurrence import Occurrence, build_occurrences, next_occurrence, minutes_until
from .classify import BoardSettings, Classification, Pin, classify, pin_recent
from .cards import Card, CardList, CardType, compose_cards
from .results import GameNotFoundError, LatestResult, BoardEntry, latest_result, board_entries, check_catalog
from .history import Declaration, HistoryEntry, recent_results, game_history

__all__ = [
    # Games
    "Game",
    "TimeOfDay",
    "parse_time_of_day",
    "normalize_value",
    "find_game",
    # Occurrences
    "Occurrence",
    "build_occurrences",
    "next_occurrence",
    "minutes_until",
    # Classification
    "BoardSettings",
    "Classification",
    "Pin",
    "classify",
    "pin_recent",
    # Cards
    "Card",
    "CardList",
    "CardType",
    "compose_cards",
    # Results
    "GameNotFoundError",
    "LatestResult",
    "BoardEntry",
    "latest_result",
    "board_entries",
    "check_catalog",
    # History
    "Declaration",
    "HistoryEntry",
    "recent_results",
    "game_history",
]
