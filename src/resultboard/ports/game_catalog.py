"""Game catalog interface."""

from typing import Protocol

from resultboard.core.games import Game


class GameCatalog(Protocol):
    """Interface for listing games from any backend."""

    def list_games(self) -> list[Game]:
        """Fetch every game in catalog order."""
        ...
