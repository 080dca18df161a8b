"""Pure recent/upcoming classification - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from .occurrence import Occurrence, minutes_until

# game id -> day of month -> declared value
DayValues = dict[str, dict[int, str]]


@dataclass(frozen=True)
class BoardSettings:
    """Tunables for classification and card composition."""

    recent_window_minutes: int = 120
    suppression_threshold_minutes: int = 30
    default_limit: int = 3
    min_limit: int = 1
    max_limit: int = 10
    max_pins: int = 2
    prefetch_minimum: int = 6

    @property
    def recent_window(self) -> timedelta:
        return timedelta(minutes=self.recent_window_minutes)

    def clamp_limit(self, limit: int | str | None) -> int:
        """Clamp a requested card count; missing or garbage input gets the default."""
        try:
            value = int(limit) if limit is not None else self.default_limit
        except (TypeError, ValueError, OverflowError):
            value = self.default_limit
        return max(self.min_limit, min(self.max_limit, value))


@dataclass
class Classification:
    """Occurrences split for one request, all relative to a single `now`."""

    now: datetime
    passed: list[Occurrence] = field(default_factory=list)
    future: list[Occurrence] = field(default_factory=list)
    window: list[Occurrence] = field(default_factory=list)
    prefetch: list[Occurrence] = field(default_factory=list)
    backfill: list[Occurrence] = field(default_factory=list)

    def candidate_ids(self) -> list[str]:
        """Game ids whose values must be looked up, window first."""
        ids: list[str] = []
        for occ in self.window + self.prefetch + self.backfill:
            if occ.game.id not in ids:
                ids.append(occ.game.id)
        return ids


@dataclass
class Pin:
    """A recently passed occurrence selected to head the card list."""

    occurrence: Occurrence
    value: str
    minutes_until_next: int
    recent_expires_at: datetime
    recent_visible: bool


def value_for(values: DayValues, game_id: str, day: int) -> str | None:
    """Declared value for a game on a day of the current month, if any."""
    return values.get(game_id, {}).get(day) or None


def classify(
    occurrences: list[Occurrence],
    now: datetime,
    settings: BoardSettings,
    limit: int,
) -> Classification:
    """
    Split occurrences into passed and future queues.

    - passed: already run today (inclusive of now), newest first
    - future: still ahead today, soonest first
    - window: passed occurrences inside the trailing recent window
    - prefetch: head of `future` used to bound the value lookup
    - backfill: passed occurrences that may pad a short list; only
      populated when `future` alone cannot fill `limit` cards

    Ties are broken by name so the output is deterministic.
    Pure function - no I/O.
    """
    passed = sorted(
        (o for o in occurrences if o.has_passed(now)),
        key=lambda o: (-o.scheduled.timestamp(), o.name),
    )
    future = sorted(
        (o for o in occurrences if not o.has_passed(now)),
        key=lambda o: (o.next_at.timestamp(), o.name),
    )

    window_start = now - settings.recent_window
    window = [o for o in passed if window_start <= o.scheduled <= now]

    prefetch_size = max(limit, settings.prefetch_minimum)
    return Classification(
        now=now,
        passed=passed,
        future=future,
        window=window,
        prefetch=future[:prefetch_size],
        backfill=passed[:limit] if len(future) < limit else [],
    )


def pin_recent(
    classification: Classification,
    values: DayValues,
    settings: BoardSettings,
) -> list[Pin]:
    """
    Pick up to `max_pins` window occurrences that have a declared value.

    Visibility is advisory: a pin whose own next run is close is flagged
    with recent_visible=False but still returned.
    """
    now = classification.now
    pins: list[Pin] = []
    for occ in classification.window:
        if len(pins) >= settings.max_pins:
            break
        value = value_for(values, occ.game.id, now.day)
        if not value:
            continue
        minutes = minutes_until(occ.next_at, now)
        pins.append(
            Pin(
                occurrence=occ,
                value=value,
                minutes_until_next=minutes,
                recent_expires_at=occ.scheduled + settings.recent_window,
                recent_visible=is_recent_visible(value, minutes, settings),
            )
        )
    return pins


def is_recent_visible(value: str | None, minutes_until_next: int, settings: BoardSettings) -> bool:
    """Whether a recent card should still be rendered as fresh."""
    if not value:
        return False
    return (
        minutes_until_next > settings.suppression_threshold_minutes
        or minutes_until_next >= settings.recent_window_minutes
    )
