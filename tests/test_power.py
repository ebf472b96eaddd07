"""Tests for power actions."""

from unittest.mock import patch

from tusk.core import power


class TestSpawnCommand:
    def test_splits_without_shell(self):
        with patch("tusk.core.power.subprocess.Popen") as popen:
            assert power.spawn_command("systemctl poweroff")
        assert popen.call_args.args[0] == ["systemctl", "poweroff"]

    def test_session_id_substituted(self, monkeypatch):
        monkeypatch.setenv("XDG_SESSION_ID", "c2")
        with patch("tusk.core.power.subprocess.Popen") as popen:
            power.spawn_command("loginctl terminate-session $XDG_SESSION_ID")
        assert popen.call_args.args[0] == ["loginctl", "terminate-session", "c2"]

    def test_session_id_missing(self, monkeypatch):
        monkeypatch.delenv("XDG_SESSION_ID", raising=False)
        with patch("tusk.core.power.subprocess.Popen") as popen:
            assert not power.spawn_command("loginctl terminate-session $XDG_SESSION_ID")
        popen.assert_not_called()

    def test_missing_program(self):
        with patch("tusk.core.power.subprocess.Popen", side_effect=FileNotFoundError):
            assert not power.spawn_command("no-such-tool")


class TestActions:
    def test_first_working_command_wins(self, config):
        config.set("power_commands", ["broken", "systemctl poweroff", "poweroff"])
        calls = []

        def fake_popen(argv, **kwargs):
            calls.append(argv)
            if argv == ["broken"]:
                raise FileNotFoundError(argv[0])

        with patch("tusk.core.power.subprocess.Popen", side_effect=fake_popen):
            assert power.power_off(config)
        assert calls == [["broken"], ["systemctl", "poweroff"]]

    def test_all_commands_fail(self, config):
        config.set("restart_commands", ["a", "b"])
        with patch("tusk.core.power.subprocess.Popen", side_effect=OSError):
            assert not power.restart(config)

    def test_empty_list(self, config):
        config.set("logout_commands", [])
        assert not power.logout(config)
