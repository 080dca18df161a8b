"""Declared result store interface."""

from typing import Protocol

from resultboard.core.history import Declaration


class StoreUnavailableError(Exception):
    """Raised when the catalog or result store cannot be read."""

    pass


class ResultStore(Protocol):
    """Interface for reading declared results from any backend."""

    def get_declared_values(
        self, game_ids: list[str], year: int, month: int
    ) -> dict[str, dict[int, str]]:
        """
        Fetch declared values for a month.

        Returns {game_id: {day_of_month: value}} containing only declared,
        non-blank values. Raises StoreUnavailableError on fetch failure.
        """
        ...

    def get_declarations(
        self, game_ids: list[str], year: int, month: int
    ) -> list[Declaration]:
        """
        Fetch declared slots with their declaration timestamps for a month.

        Blank slots are omitted; declared_at is None where the store did
        not record it. Raises StoreUnavailableError on fetch failure.
        """
        ...
