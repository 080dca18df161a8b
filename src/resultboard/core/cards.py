"""Pure card list assembly - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .classify import BoardSettings, Classification, DayValues, Pin, is_recent_visible, value_for
from .games import UNTIMED_DISPLAY, Game
from .occurrence import Occurrence, minutes_until

PLACEHOLDER_NAME = "--"


class CardType(str, Enum):
    RECENT = "recent"
    UPCOMING = "upcoming"


@dataclass
class Card:
    """One entry of the display list."""

    type: CardType
    name: str
    result_time: str | None = None
    latest_result: str | None = None
    next_occurrence: datetime | None = None
    minutes_until_next: int | None = None
    recent_expires_at: datetime | None = None
    recent_visible: bool = False

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER_NAME

    def to_dict(self) -> dict:
        """Wire representation."""
        return {
            "type": self.type.value,
            "name": self.name,
            "resultTime": self.result_time,
            "latestResult": self.latest_result,
            "nextOccurrenceInstant": _iso(self.next_occurrence),
            "minutesUntilNext": self.minutes_until_next,
            "recentExpiresInstant": _iso(self.recent_expires_at),
            "recentVisible": self.recent_visible,
        }


@dataclass
class CardList:
    """Response envelope for the upcoming-cards operation."""

    cards: list[Card]
    server_time: datetime
    # No caching layer exists; always False
    cached: bool = False

    def to_dict(self) -> dict:
        return {
            "cards": [c.to_dict() for c in self.cards],
            "serverTimeInstant": self.server_time.isoformat(),
            "cached": self.cached,
        }


def _iso(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt else None


def pinned_card(pin: Pin) -> Card:
    occ = pin.occurrence
    return Card(
        type=CardType.RECENT,
        name=occ.name,
        result_time=occ.time_of_day.format(),
        latest_result=pin.value,
        next_occurrence=occ.next_at,
        minutes_until_next=pin.minutes_until_next,
        recent_expires_at=pin.recent_expires_at,
        recent_visible=pin.recent_visible,
    )


def recent_card(occ: Occurrence, value: str | None, now: datetime, settings: BoardSettings) -> Card:
    minutes = minutes_until(occ.next_at, now)
    return Card(
        type=CardType.RECENT,
        name=occ.name,
        result_time=occ.time_of_day.format(),
        latest_result=value,
        next_occurrence=occ.next_at,
        minutes_until_next=minutes,
        recent_expires_at=occ.scheduled + settings.recent_window,
        recent_visible=is_recent_visible(value, minutes, settings),
    )


def upcoming_card(occ: Occurrence, now: datetime) -> Card:
    # Values are never surfaced ahead of their scheduled instant
    return Card(
        type=CardType.UPCOMING,
        name=occ.name,
        result_time=occ.time_of_day.format(),
        latest_result=None,
        next_occurrence=occ.next_at,
        minutes_until_next=minutes_until(occ.next_at, now),
    )


def untimed_card(game: Game) -> Card:
    return Card(type=CardType.UPCOMING, name=game.name, result_time=UNTIMED_DISPLAY)


def placeholder_card() -> Card:
    return Card(type=CardType.UPCOMING, name=PLACEHOLDER_NAME)


def compose_cards(
    classification: Classification,
    pins: list[Pin],
    untimed: list[Game],
    values: DayValues,
    settings: BoardSettings,
    limit: int,
) -> CardList:
    """
    Build exactly `limit` cards from the classified occurrences.

    Fill order, skipping names already used:
    1. pinned recents
    2. prefetched future occurrences (upcoming)
    3. remaining passed occurrences (recent)
    4. the rest of the future queue (upcoming)
    5. games with a malformed result time
    6. "--" placeholders

    Pure function - no I/O.
    """
    now = classification.now
    cards: list[Card] = []
    used: set[str] = set()

    def add(card: Card) -> None:
        if len(cards) < limit and card.name not in used:
            cards.append(card)
            used.add(card.name)

    for pin in pins:
        add(pinned_card(pin))

    for occ in classification.prefetch:
        add(upcoming_card(occ, now))

    for occ in classification.passed:
        add(recent_card(occ, value_for(values, occ.game.id, now.day), now, settings))

    for occ in classification.future[len(classification.prefetch):]:
        add(upcoming_card(occ, now))

    for game in untimed:
        add(untimed_card(game))

    while len(cards) < limit:
        cards.append(placeholder_card())

    return CardList(cards=cards, server_time=now)
