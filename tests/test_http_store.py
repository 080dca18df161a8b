"""Tests for HTTP store adapter."""

from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from resultboard.adapters.http_store import HttpResultStore
from resultboard.core.games import Game
from resultboard.core.history import Declaration
from resultboard.ports import StoreUnavailableError


@pytest.fixture
def store():
    adapter = HttpResultStore("https://results.example/api/", timeout=5)
    adapter._session = MagicMock()
    return adapter


def respond(store, payload):
    resp = MagicMock()
    resp.json.return_value = payload
    store._session.get.return_value = resp
    return resp


class TestHttpResultStore:
    def test_bearer_token_header(self):
        adapter = HttpResultStore("https://results.example", token="secret")
        assert adapter._session.headers["Authorization"] == "Bearer secret"

    def test_no_token_no_header(self):
        adapter = HttpResultStore("https://results.example")
        assert "Authorization" not in adapter._session.headers

    def test_list_games(self, store):
        respond(store, [{"_id": "g1", "name": "Alpha", "resultTime": "10:00"}, "junk"])

        games = store.list_games()

        assert games == [Game(id="g1", name="Alpha", result_time="10:00")]
        store._session.get.assert_called_once_with(
            "https://results.example/api/games", params=None, timeout=5
        )

    def test_get_declared_values_single_request(self, store):
        respond(
            store,
            {
                "g1": ["42", {"value": "17", "declaredAt": None}],
                "g2": [""],
                "other": ["1"],
            },
        )

        values = store.get_declared_values(["g1", "g2"], 2024, 1)

        assert values == {"g1": {1: "42", 2: "17"}, "g2": {}}
        store._session.get.assert_called_once_with(
            "https://results.example/api/charts",
            params={"year": 2024, "month": 1, "games": "g1,g2"},
            timeout=5,
        )

    def test_no_ids_no_request(self, store):
        assert store.get_declared_values([], 2024, 1) == {}
        store._session.get.assert_not_called()

    def test_timeout_raises_unavailable(self, store):
        store._session.get.side_effect = requests.Timeout()
        with pytest.raises(StoreUnavailableError, match="timed out"):
            store.list_games()

    def test_connection_error_raises_unavailable(self, store):
        store._session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(StoreUnavailableError, match="request failed"):
            store.get_declared_values(["g1"], 2024, 1)

    def test_http_error_raises_unavailable(self, store):
        resp = respond(store, {})
        resp.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        with pytest.raises(StoreUnavailableError):
            store.list_games()

    def test_invalid_json_raises_unavailable(self, store):
        resp = respond(store, None)
        resp.json.side_effect = ValueError("No JSON")
        with pytest.raises(StoreUnavailableError, match="invalid JSON"):
            store.list_games()

    def test_unexpected_shape_raises_unavailable(self, store):
        respond(store, {"games": []})
        with pytest.raises(StoreUnavailableError):
            store.list_games()

    def test_get_declarations(self, store):
        respond(store, {"g1": ["", {"value": "17", "declaredAt": "2024-01-02T05:00:00Z"}], "other": ["1"]})

        declarations = store.get_declarations(["g1"], 2024, 1)

        assert declarations == [
            Declaration("g1", date(2024, 1, 2), "17", datetime(2024, 1, 2, 5, 0, tzinfo=timezone.utc)),
        ]
        store._session.get.assert_called_once_with(
            "https://results.example/api/charts",
            params={"year": 2024, "month": 1, "games": "g1"},
            timeout=5,
        )

    def test_get_declarations_no_ids_no_request(self, store):
        assert store.get_declarations([], 2024, 1) == []
        store._session.get.assert_not_called()
