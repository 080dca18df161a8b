"""Pure game catalog logic - no I/O dependencies."""

import re
import unicodedata
from dataclasses import dataclass

UNTIMED_DISPLAY = "--:--"

_SEPARATORS = re.compile(r"[^0-9:]")
_COLON_RUNS = re.compile(r":+")


@dataclass(frozen=True)
class TimeOfDay:
    """A validated daily result time."""

    hour: int
    minute: int

    def format(self) -> str:
        """Canonical HH:MM form."""
        return f"{self.hour:02d}:{self.minute:02d}"

    def format_12h(self) -> str:
        """12-hour display form, e.g. '06:30 PM'."""
        suffix = "AM" if self.hour < 12 else "PM"
        hour = self.hour % 12 or 12
        return f"{hour:02d}:{self.minute:02d} {suffix}"


@dataclass
class Game:
    """A catalog entry that declares one result per day."""

    id: str
    name: str
    result_time: str

    @property
    def time_of_day(self) -> TimeOfDay | None:
        """Parsed result time; None when the configured time is malformed."""
        return parse_time_of_day(self.result_time)

    @classmethod
    def from_api(cls, data: dict) -> "Game":
        """Create Game from a store record."""
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            name=str(data.get("name") or ""),
            result_time=str(data.get("resultTime") or ""),
        )


def _ascii_digits(raw: str) -> str:
    """Translate decimal digits from any numeral system to ASCII."""
    out = []
    for ch in raw:
        value = unicodedata.decimal(ch, None)
        out.append(str(value) if value is not None else ch)
    return "".join(out)


def parse_time_of_day(raw: str | None) -> TimeOfDay | None:
    """
    Normalize a free-form result time into a TimeOfDay.

    Accepts things like "18:30", "6.30", "१८:३०" or "9". Any run of
    non-digit characters acts as a separator. Returns None when nothing
    usable remains or the hour/minute is out of range.

    Pure function - no I/O.
    """
    if not raw:
        return None

    text = _SEPARATORS.sub(":", _ascii_digits(str(raw)))
    text = _COLON_RUNS.sub(":", text).strip(":")
    if not text:
        return None

    groups = text.split(":")
    if len(groups) == 1:
        hour, minute = int(groups[0]), 0
    else:
        hour = int(groups[0].zfill(2)[:2])
        minute = int(groups[1])

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return TimeOfDay(hour, minute)


def normalize_value(raw) -> str | None:
    """
    Collapse a stored result into a plain string or None.

    Chart slots are either bare scalars or records like
    {"value": "42", "declaredAt": ...}. Blank values mean "not declared".
    """
    if isinstance(raw, dict):
        raw = raw.get("value")
    if raw is None:
        return None
    # Spreadsheet imports store whole numbers as floats
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    value = str(raw).strip()
    return value or None


def find_game(games: list[Game], name: str) -> Game | None:
    """Case-insensitive exact name lookup."""
    wanted = name.strip().casefold()
    return next((g for g in games if g.name.casefold() == wanted), None)
