"""Pure declaration history views - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo

from .games import UNTIMED_DISPLAY, Game, normalize_value

RECENT_LIMIT = 20


def parse_instant(raw) -> datetime | None:
    """Parse a stored ISO timestamp; naive values are UTC. None if unusable."""
    if not raw:
        return None
    text = str(raw).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        instant = datetime.fromisoformat(text)
    except ValueError:
        return None
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


@dataclass
class Declaration:
    """A declared value in one chart slot."""

    game_id: str
    result_date: date
    value: str
    declared_at: datetime | None = None

    @classmethod
    def from_slot(cls, game_id: str, year: int, month: int, index: int, slot) -> "Declaration | None":
        """Create Declaration from a chart slot; None for blank slots or impossible dates."""
        value = normalize_value(slot)
        if value is None:
            return None
        try:
            result_date = date(year, month, index + 1)
        except ValueError:
            return None
        declared_at = parse_instant(slot.get("declaredAt")) if isinstance(slot, dict) else None
        return cls(game_id=game_id, result_date=result_date, value=value, declared_at=declared_at)


@dataclass
class HistoryEntry:
    """One declared result, resolved against its game."""

    name: str
    result_date: date
    result_time: str
    value: str
    scheduled: datetime
    declared_at: datetime | None = None

    @property
    def ordered_at(self) -> datetime:
        """Declaration instant, or the scheduled instant when it was not recorded."""
        return self.declared_at or self.scheduled

    def to_dict(self) -> dict:
        return {
            "game": self.name,
            "resultDate": self.result_date.isoformat(),
            "resultTime": self.result_time,
            "value": self.value,
            "declaredAt": self.declared_at.isoformat() if self.declared_at else None,
        }


def months_back(now: datetime, count: int) -> list[tuple[int, int]]:
    """(year, month) pairs for the current month and the `count - 1` before it, newest first."""
    year, month = now.year, now.month
    months = []
    for _ in range(max(1, count)):
        months.append((year, month))
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    return months


def history_entry(game: Game, declaration: Declaration, tz: tzinfo) -> HistoryEntry:
    tod = game.time_of_day
    at = time(tod.hour, tod.minute) if tod else time(0, 0)
    declared_at = declaration.declared_at
    return HistoryEntry(
        name=game.name,
        result_date=declaration.result_date,
        result_time=tod.format() if tod else UNTIMED_DISPLAY,
        value=declaration.value,
        scheduled=datetime.combine(declaration.result_date, at, tzinfo=tz),
        declared_at=declared_at.astimezone(tz) if declared_at else None,
    )


def _newest_first(entry: HistoryEntry) -> tuple:
    return (-entry.ordered_at.timestamp(), -entry.scheduled.timestamp(), entry.name)


def recent_results(
    games: list[Game],
    declarations: list[Declaration],
    now: datetime,
    limit: int = RECENT_LIMIT,
) -> list[HistoryEntry]:
    """
    Latest declarations across all games, newest declaration first.

    Declarations for games missing from the catalog are dropped, and a
    value only appears once its scheduled instant has been reached.
    Pure function - no I/O.
    """
    games_by_id = {g.id: g for g in games}
    entries = []
    for declaration in declarations:
        game = games_by_id.get(declaration.game_id)
        if game is None:
            continue
        entry = history_entry(game, declaration, now.tzinfo)
        if entry.scheduled <= now:
            entries.append(entry)
    entries.sort(key=_newest_first)
    return entries[:limit]


def game_history(game: Game, declarations: list[Declaration], now: datetime) -> list[HistoryEntry]:
    """Every visible declaration for one game, newest declaration first."""
    entries = [
        history_entry(game, d, now.tzinfo)
        for d in declarations
        if d.game_id == game.id
    ]
    entries = [e for e in entries if e.scheduled <= now]
    entries.sort(key=_newest_first)
    return entries
