"""File-based game catalog and result store adapter."""

import json
import logging
from pathlib import Path

from resultboard.core.games import Game, normalize_value
from resultboard.core.history import Declaration
from resultboard.ports.result_store import StoreUnavailableError

logger = logging.getLogger(__name__)


def chart_days(slots: list) -> dict[int, str]:
    """Map a 31-slot chart array to {day_of_month: value}, declared days only."""
    days = {}
    for index, slot in enumerate(slots[:31]):
        value = normalize_value(slot)
        if value is not None:
            days[index + 1] = value
    return days


def chart_declarations(game_id: str, year: int, month: int, slots: list) -> list[Declaration]:
    """Declared slots of one chart with their timestamps, in day order."""
    declarations = []
    for index, slot in enumerate(slots[:31]):
        declaration = Declaration.from_slot(game_id, year, month, index, slot)
        if declaration is not None:
            declarations.append(declaration)
    return declarations


class FileResultStore:
    """
    JSON file storage.

    Implements GameCatalog and ResultStore protocols. Layout:

        games.json            [{"id": ..., "name": ..., "resultTime": "HH:MM"}]
        charts/YYYY-MM.json   {game_id: [slot_day_1, ..., slot_day_31]}

    A slot is a bare value or {"value": ..., "declaredAt": ...}.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    @property
    def games_path(self) -> Path:
        return self.data_dir / "games.json"

    def _chart_path(self, year: int, month: int) -> Path:
        return self.data_dir / "charts" / f"{year:04d}-{month:02d}.json"

    def _read_json(self, path: Path):
        """Read a JSON file. Returns None if it does not exist."""
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StoreUnavailableError(f"Cannot read {path.name}: {e}") from e

    def list_games(self) -> list[Game]:
        """Fetch every game in file order."""
        data = self._read_json(self.games_path) or []
        if not isinstance(data, list):
            raise StoreUnavailableError(f"{self.games_path.name} must contain a list")
        return [Game.from_api(item) for item in data if isinstance(item, dict)]

    def get_declared_values(
        self, game_ids: list[str], year: int, month: int
    ) -> dict[str, dict[int, str]]:
        """Fetch declared values for the given games and month."""
        if not game_ids:
            return {}
        return {game_id: chart_days(slots) for game_id, slots in self._read_chart(game_ids, year, month).items()}

    def get_declarations(self, game_ids: list[str], year: int, month: int) -> list[Declaration]:
        """Fetch declared slots with timestamps for the given games and month."""
        if not game_ids:
            return []
        declarations = []
        for game_id, slots in self._read_chart(game_ids, year, month).items():
            declarations.extend(chart_declarations(game_id, year, month, slots))
        return declarations

    def _read_chart(self, game_ids: list[str], year: int, month: int) -> dict[str, list]:
        """Raw slot arrays for the requested games, in request order."""
        chart = self._read_json(self._chart_path(year, month)) or {}
        if not isinstance(chart, dict):
            raise StoreUnavailableError(f"Chart {year}-{month:02d} must be an object")
        return {
            game_id: chart[game_id]
            for game_id in game_ids
            if isinstance(chart.get(game_id), list)
        }
