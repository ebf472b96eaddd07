"""Tests for JSON settings persistence."""

import json

from tusk.core.config import DEFAULTS, Config


class TestConfig:
    def test_defaults(self, config):
        assert config.get("max_search_results") == 5
        assert config.get("time_order") == "MdyHms"
        assert config.get("missing", "fallback") == "fallback"

    def test_set_persists(self, tmp_path):
        path = tmp_path / "settings.json"
        Config(path).set("max_search_results", 8)
        assert json.loads(path.read_text())["max_search_results"] == 8
        assert Config(path).get("max_search_results") == 8

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"enable_icons": false}')
        cfg = Config(path)
        assert cfg.get("enable_icons") is False
        assert cfg.get("window_width") == DEFAULTS["window_width"]

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert Config(path).get("max_volume") == 1.5

    def test_reset(self, config):
        config.set("power_commands", [])
        config.reset()
        assert config.get("power_commands") == DEFAULTS["power_commands"]
        assert config.get("power_commands") is not DEFAULTS["power_commands"]

    def test_default_location(self, home):
        assert Config().settings_file == home / ".config" / "tusk-launcher" / "settings.json"
