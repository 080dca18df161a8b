"""Ports - interfaces/protocols for external dependencies."""

from .game_catalog import GameCatalog
from .result_store import ResultStore, StoreUnavailableError

__all__ = [
    "GameCatalog",
    "ResultStore",
    "StoreUnavailableError",
]
