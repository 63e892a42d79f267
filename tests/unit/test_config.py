"""Tests for configuration loading."""

from dailydo.config import DEFAULT_CONFIG, get_section, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.yaml")
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_partial_override_is_merged(self, tmp_path):
        path = tmp_path / "dailydo.yaml"
        path.write_text(
            "dailydo:\n"
            "  timezone: Europe/London\n"
            "  tasks:\n"
            "    snooze_minutes: 15\n"
            "  parser:\n"
            "    day_parts:\n"
            "      evening: 19\n"
        )
        config = load_config(path)

        assert config["timezone"] == "Europe/London"
        assert config["tasks"]["snooze_minutes"] == 15
        assert config["tasks"]["incoming_limit"] == 3
        assert config["parser"]["day_parts"]["evening"] == 19
        assert config["parser"]["day_parts"]["morning"] == 9

    def test_defaults_are_not_mutated(self, tmp_path):
        path = tmp_path / "dailydo.yaml"
        path.write_text("dailydo:\n  tasks:\n    snooze_minutes: 1\n")
        load_config(path)
        assert DEFAULT_CONFIG["tasks"]["snooze_minutes"] == 30

    def test_empty_file(self, tmp_path):
        path = tmp_path / "dailydo.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_malformed_section_ignored(self, tmp_path):
        path = tmp_path / "dailydo.yaml"
        path.write_text("dailydo: just a string\n")
        assert load_config(path) == DEFAULT_CONFIG

    def test_shipped_config_loads(self):
        config = load_config()
        assert config["reminders"]["inactive_after_days"] == 3
        assert config["parser"]["default_hour"] == 12


class TestGetSection:
    def test_section(self, tmp_path):
        assert get_section("reminders", tmp_path / "nope.yaml") == DEFAULT_CONFIG["reminders"]

    def test_unknown_section(self, tmp_path):
        assert get_section("nothing", tmp_path / "nope.yaml") == {}
