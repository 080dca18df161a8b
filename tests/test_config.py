"""Tests for configuration loading."""

from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from resultboard.config import DATA_DIR, Config, load_config
from resultboard.core.classify import BoardSettings


def load_from(tmp_path, text):
    config_file = tmp_path / "resultboard.conf"
    config_file.write_text(text)
    with patch("resultboard.config.CONFIG_FILE", config_file):
        return load_config()


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        with patch("resultboard.config.CONFIG_FILE", tmp_path / "nope.conf"):
            config = load_config()
        assert config == Config()

    def test_parses_values(self, tmp_path):
        config = load_from(
            tmp_path,
            "\n".join(
                [
                    "# board settings",
                    "TIMEZONE=Europe/London",
                    "RECENT_WINDOW_MINUTES=90",
                    "SUPPRESSION_THRESHOLD_MINUTES = 15",
                    "DEFAULT_LIMIT=5",
                    'STORE_URL="https://results.example/api/"  # production',
                    "STORE_TOKEN='abc'",
                    "STORE_TIMEOUT=2.5",
                    "DATA_DIR=~/boards # local copy",
                ]
            ),
        )

        assert config.timezone == "Europe/London"
        assert config.recent_window_minutes == 90
        assert config.suppression_threshold_minutes == 15
        assert config.default_limit == 5
        assert config.store_url == "https://results.example/api"
        assert config.store_token == "abc"
        assert config.store_timeout == 2.5
        assert config.data_dir == "~/boards"

    def test_invalid_numbers_keep_defaults(self, tmp_path):
        config = load_from(tmp_path, "RECENT_WINDOW_MINUTES=two hours\nSTORE_TIMEOUT=soon\n")
        assert config.recent_window_minutes == 120
        assert config.store_timeout == 10.0

    def test_ignores_junk_lines(self, tmp_path):
        config = load_from(tmp_path, "not a setting\nUNKNOWN_KEY=1\n\nDEFAULT_LIMIT=4\n")
        assert config.default_limit == 4


class TestConfig:
    def test_board_settings(self):
        config = Config(recent_window_minutes=60, suppression_threshold_minutes=10, default_limit=4)
        assert config.board_settings() == BoardSettings(
            recent_window_minutes=60,
            suppression_threshold_minutes=10,
            default_limit=4,
        )

    def test_default_timezone(self):
        assert Config().tzinfo() == ZoneInfo("Asia/Kolkata")

    def test_unknown_timezone_falls_back(self):
        assert Config(timezone="Not/AZone").tzinfo() == ZoneInfo("Asia/Kolkata")

    @pytest.mark.parametrize(
        "data_dir, expected_home",
        [("", False), ("~/boards", True)],
    )
    def test_data_path(self, data_dir, expected_home):
        path = Config(data_dir=data_dir).data_path()
        if expected_home:
            assert "~" not in str(path)
            assert path.name == "boards"
        else:
            assert path == DATA_DIR
