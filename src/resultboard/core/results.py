"""Pure per-game result views - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .classify import DayValues, value_for
from .games import UNTIMED_DISPLAY, Game
from .occurrence import minutes_until, next_occurrence, scheduled_today


class GameNotFoundError(Exception):
    """Raised when no catalog entry matches a requested game name."""

    pass


@dataclass
class LatestResult:
    """Today's and yesterday's result for a single game."""

    name: str
    result_time: str
    latest_result: str | None
    previous_result: str | None

    def to_dict(self) -> dict:
        return {
            "game": self.name,
            "latestResult": self.latest_result,
            "previousResult": self.previous_result,
            "resultTime": self.result_time,
        }


@dataclass
class BoardEntry:
    """One row of the all-games board."""

    name: str
    result_time: str
    latest_result: str | None
    minutes_until: int | None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "resultTime": self.result_time,
            "latestResult": self.latest_result,
            "minutesUntil": self.minutes_until,
        }


def latest_result(
    game: Game,
    now: datetime,
    today_values: DayValues,
    yesterday: date,
    yesterday_values: DayValues,
) -> LatestResult:
    """
    Resolve a game's latest and previous results.

    Today's value only shows once the result time has been reached.
    `yesterday_values` holds the month containing `yesterday`, which
    differs from `today_values` on the 1st.
    """
    tod = game.time_of_day
    latest = None
    if tod is not None and now >= scheduled_today(now, tod):
        latest = value_for(today_values, game.id, now.day)

    return LatestResult(
        name=game.name,
        result_time=tod.format_12h() if tod else UNTIMED_DISPLAY,
        latest_result=latest,
        previous_result=value_for(yesterday_values, game.id, yesterday.day),
    )


def board_entries(games: list[Game], now: datetime, values: DayValues) -> list[BoardEntry]:
    """
    Summarize every game in catalog order.

    Pure function - no I/O.
    """
    entries = []
    for game in games:
        tod = game.time_of_day
        if tod is None:
            entries.append(BoardEntry(game.name, UNTIMED_DISPLAY, None, None))
            continue
        latest = None
        if now >= scheduled_today(now, tod):
            latest = value_for(values, game.id, now.day)
        entries.append(
            BoardEntry(
                name=game.name,
                result_time=tod.format(),
                latest_result=latest,
                minutes_until=minutes_until(next_occurrence(now, tod), now),
            )
        )
    return entries


@dataclass
class CatalogCheck:
    """Validation outcome for one catalog entry."""

    name: str
    raw_time: str
    canonical: str | None

    @property
    def is_valid(self) -> bool:
        return self.canonical is not None


def check_catalog(games: list[Game]) -> list[CatalogCheck]:
    """Report how each game's configured time normalizes."""
    checks = []
    for game in games:
        tod = game.time_of_day
        checks.append(CatalogCheck(game.name, game.result_time, tod.format() if tod else None))
    return checks
