"""Shared fixtures: the 10:05 reference board."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from resultboard.core.games import Game

IST = ZoneInfo("Asia/Kolkata")


@pytest.fixture
def now():
    return datetime(2024, 1, 1, 10, 5, tzinfo=IST)


@pytest.fixture
def make_game():
    """Factory for creating games; id defaults to the lowercased name."""

    def _make(name: str, result_time: str, game_id: str | None = None) -> Game:
        return Game(id=game_id or name.lower(), name=name, result_time=result_time)

    return _make


@pytest.fixture
def example_games(make_game):
    """A ran 5 min ago, B 15 min ago, C runs at 11:00, D ran 125 min ago."""
    return [
        make_game("A", "10:00"),
        make_game("B", "09:50"),
        make_game("C", "11:00"),
        make_game("D", "08:00"),
    ]


@pytest.fixture
def example_values():
    """Declared values for 2024-01-01."""
    return {"a": {1: "42"}, "b": {1: "17"}, "d": {1: "9"}}
