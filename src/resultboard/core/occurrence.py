"""Pure occurrence arithmetic - no I/O dependencies."""

import math
from dataclasses import dataclass
from datetime import datetime, time, timedelta

from .games import Game, TimeOfDay


@dataclass
class Occurrence:
    """A game's result instant for the current scheduling day."""

    game: Game
    time_of_day: TimeOfDay
    scheduled: datetime
    next_at: datetime

    @property
    def name(self) -> str:
        return self.game.name

    def has_passed(self, now: datetime) -> bool:
        """True once the scheduled instant is reached (inclusive)."""
        return now >= self.scheduled


def scheduled_today(now: datetime, tod: TimeOfDay) -> datetime:
    """Today's date at the given time, in now's timezone."""
    return datetime.combine(now.date(), time(tod.hour, tod.minute), tzinfo=now.tzinfo)


def next_occurrence(now: datetime, tod: TimeOfDay) -> datetime:
    """Today's instant if still ahead, otherwise the same time tomorrow."""
    scheduled = scheduled_today(now, tod)
    if scheduled > now:
        return scheduled
    return scheduled + timedelta(days=1)


def minutes_until(instant: datetime, now: datetime) -> int:
    """Whole minutes from now until instant, rounded up, never negative."""
    return max(0, math.ceil((instant - now).total_seconds() / 60))


def build_occurrences(games: list[Game], now: datetime) -> tuple[list[Occurrence], list[Game]]:
    """
    Compute an Occurrence for every game with a valid result time.

    Returns: (occurrences, untimed_games), both in catalog order.
    Pure function - no I/O.
    """
    occurrences = []
    untimed = []
    for game in games:
        tod = game.time_of_day
        if tod is None:
            untimed.append(game)
            continue
        occurrences.append(
            Occurrence(
                game=game,
                time_of_day=tod,
                scheduled=scheduled_today(now, tod),
                next_at=next_occurrence(now, tod),
            )
        )
    return occurrences, untimed
