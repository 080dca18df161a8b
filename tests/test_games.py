"""Tests for core game catalog logic."""

import pytest

from resultboard.core.games import (
    Game,
    TimeOfDay,
    find_game,
    normalize_value,
    parse_time_of_day,
)


class TestParseTimeOfDay:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("18:30", TimeOfDay(18, 30)),
            ("6.30", TimeOfDay(6, 30)),
            ("9", TimeOfDay(9, 0)),
            ("  07-05 ", TimeOfDay(7, 5)),
            ("10:30:15", TimeOfDay(10, 30)),
            ("00:00", TimeOfDay(0, 0)),
            ("23:59", TimeOfDay(23, 59)),
        ],
    )
    def test_accepts_common_forms(self, raw, expected):
        assert parse_time_of_day(raw) == expected

    def test_translates_devanagari_digits(self):
        assert parse_time_of_day("१८:३०") == TimeOfDay(18, 30)

    def test_translates_fullwidth_digits_and_colon(self):
        assert parse_time_of_day("１８：３０") == TimeOfDay(18, 30)

    def test_letters_act_as_separators(self):
        """AM/PM suffixes are not interpreted, only stripped."""
        assert parse_time_of_day("5 PM") == TimeOfDay(5, 0)
        assert parse_time_of_day("at 9h15") == TimeOfDay(9, 15)

    def test_long_hour_group_truncated_to_two_digits(self):
        assert parse_time_of_day("123:45") == TimeOfDay(12, 45)

    @pytest.mark.parametrize("raw", ["24:00", "12:60", "99", "1030"])
    def test_rejects_out_of_range(self, raw):
        assert parse_time_of_day(raw) is None

    @pytest.mark.parametrize("raw", ["", None, "abc", "::", "--:--"])
    def test_rejects_input_without_digits(self, raw):
        assert parse_time_of_day(raw) is None


class TestTimeOfDay:
    def test_format_pads(self):
        assert TimeOfDay(7, 5).format() == "07:05"

    @pytest.mark.parametrize(
        "tod, expected",
        [
            (TimeOfDay(0, 5), "12:05 AM"),
            (TimeOfDay(11, 59), "11:59 AM"),
            (TimeOfDay(12, 0), "12:00 PM"),
            (TimeOfDay(18, 30), "06:30 PM"),
        ],
    )
    def test_format_12h(self, tod, expected):
        assert tod.format_12h() == expected


class TestGame:
    def test_time_of_day_parsed_on_access(self):
        game = Game(id="g1", name="Alpha", result_time="9.45")
        assert game.time_of_day == TimeOfDay(9, 45)

    def test_time_of_day_none_when_malformed(self):
        game = Game(id="g1", name="Alpha", result_time="soon")
        assert game.time_of_day is None

    def test_from_api(self):
        game = Game.from_api({"id": "g1", "name": "Alpha", "resultTime": "10:00"})
        assert game == Game(id="g1", name="Alpha", result_time="10:00")

    def test_from_api_mongo_style_id(self):
        game = Game.from_api({"_id": "abc123", "name": "Beta", "resultTime": "11:00"})
        assert game.id == "abc123"

    def test_from_api_missing_time(self):
        game = Game.from_api({"id": "g1", "name": "Gamma"})
        assert game.result_time == ""
        assert game.time_of_day is None

    def test_from_api_null_name(self):
        game = Game.from_api({"id": "g1", "name": None, "resultTime": "10:00"})
        assert game.name == ""


class TestNormalizeValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (" 42 ", "42"),
            ({"value": "17", "declaredAt": None}, "17"),
            ({"value": " 05 ", "declaredAt": "2024-01-01T04:30:00Z"}, "05"),
            (42, "42"),
            (7.0, "7"),
            ("", None),
            ("   ", None),
            ({"value": ""}, None),
            ({}, None),
            (None, None),
        ],
    )
    def test_collapses_to_string_or_none(self, raw, expected):
        assert normalize_value(raw) == expected


class TestFindGame:
    @pytest.fixture
    def games(self):
        return [
            Game(id="1", name="Morning Star", result_time="09:00"),
            Game(id="2", name="Night Owl", result_time="22:00"),
        ]

    def test_case_insensitive(self, games):
        assert find_game(games, "night owl").id == "2"
        assert find_game(games, "  MORNING STAR ").id == "1"

    def test_exact_match_only(self, games):
        assert find_game(games, "Night") is None

    def test_missing(self, games):
        assert find_game(games, "Unknown") is None
