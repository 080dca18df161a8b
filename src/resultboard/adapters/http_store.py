"""HTTP result store adapter - REST client for catalog and chart fetching."""

import logging

import requests

from resultboard.core.games import Game
from resultboard.core.history import Declaration
from resultboard.ports.result_store import StoreUnavailableError

from .file_store import chart_days, chart_declarations

logger = logging.getLogger(__name__)


class HttpResultStore:
    """
    REST result store adapter.

    Implements GameCatalog and ResultStore protocols. Every request carries
    a bounded timeout; failures surface as StoreUnavailableError with no
    retry. No business logic - just I/O.
    """

    def __init__(self, base_url: str, token: str = "", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _api_request(self, endpoint: str, params: dict | None = None) -> dict | list:
        """Make a GET request and decode the JSON body."""
        url = f"{self.base_url}{endpoint}"
        try:
            resp = self._session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.Timeout as e:
            logger.error(f"Result store timed out after {self.timeout}s: {url}")
            raise StoreUnavailableError(f"Result store timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.error(f"Result store request failed: {url}: {e}")
            raise StoreUnavailableError(f"Result store request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Result store returned invalid JSON: {url}")
            raise StoreUnavailableError("Result store returned invalid JSON") from e

    def list_games(self) -> list[Game]:
        """Fetch every game from the catalog endpoint."""
        data = self._api_request("/games")
        if not isinstance(data, list):
            raise StoreUnavailableError("Unexpected /games response")
        return [Game.from_api(item) for item in data if isinstance(item, dict)]

    def get_declared_values(
        self, game_ids: list[str], year: int, month: int
    ) -> dict[str, dict[int, str]]:
        """Fetch one month of chart slots for the given games in a single request."""
        if not game_ids:
            return {}
        return {game_id: chart_days(slots) for game_id, slots in self._fetch_charts(game_ids, year, month).items()}

    def get_declarations(self, game_ids: list[str], year: int, month: int) -> list[Declaration]:
        """Fetch one month of declared slots with their timestamps."""
        if not game_ids:
            return []
        declarations = []
        for game_id, slots in self._fetch_charts(game_ids, year, month).items():
            declarations.extend(chart_declarations(game_id, year, month, slots))
        return declarations

    def _fetch_charts(self, game_ids: list[str], year: int, month: int) -> dict[str, list]:
        data = self._api_request(
            "/charts",
            params={"year": year, "month": month, "games": ",".join(game_ids)},
        )
        if not isinstance(data, dict):
            raise StoreUnavailableError("Unexpected /charts response")

        wanted = set(game_ids)
        return {
            game_id: slots
            for game_id, slots in data.items()
            if game_id in wanted and isinstance(slots, list)
        }
