"""Tests for launch option parsing, encoding and command composition."""

import pytest

from tusk.core.launch_options import (
    LaunchOptions,
    compose_command,
    decode,
    encode,
    format_input,
    has_reserved_chars,
    parse_input,
)


class TestParseInput:
    def test_env_workdir_and_command(self):
        opts = parse_input("-e DXVK_HUD=1 -e MANGOHUD=1 -w /games gamemoderun %command% -fullscreen")
        assert opts.environment_vars == {"DXVK_HUD": "1", "MANGOHUD": "1"}
        assert opts.working_directory == "/games"
        assert opts.custom_command == "gamemoderun %command% -fullscreen"

    def test_command_swallows_later_flags(self):
        opts = parse_input("prime-run -e A=1")
        assert opts.custom_command == "prime-run -e A=1"
        assert opts.environment_vars == {}

    def test_env_without_equals_is_ignored(self):
        opts = parse_input("-e NOVALUE foo")
        assert opts.environment_vars == {}
        assert opts.custom_command == "foo"

    def test_empty_input(self):
        assert parse_input("   ").is_empty()

    def test_format_round_trips_through_parse(self):
        text = "-e A=1 -w /tmp wrap %command%"
        assert format_input(parse_input(text)) == text
        assert format_input(None) == ""


class TestStoreEncoding:
    def test_encode(self):
        opts = LaunchOptions("gamemoderun", "/tmp", {"A": "1", "B": "x=y"})
        assert encode(opts) == "gamemoderun|/tmp|A=1,B=x=y"

    def test_decode_splits_pairs_on_first_equals(self):
        opts = decode("|/tmp|A=1,B=x=y")
        assert opts.custom_command is None
        assert opts.working_directory == "/tmp"
        assert opts.environment_vars == {"A": "1", "B": "x=y"}

    def test_decode_empty_fields(self):
        assert decode("||") == LaunchOptions()

    def test_decode_rejects_wrong_field_count(self):
        assert decode("only|two") is None

    @pytest.mark.parametrize("opts", [
        LaunchOptions(custom_command="a | b"),
        LaunchOptions(working_directory="/x,y"),
        LaunchOptions(environment_vars={"A": "1,2"}),
        LaunchOptions(environment_vars={"A=B": "1"}),
    ])
    def test_reserved_chars_detected(self, opts):
        assert has_reserved_chars(opts)

    def test_plain_values_accepted(self):
        assert not has_reserved_chars(LaunchOptions("wrap", "/tmp", {"A": "x=y"}))


class TestComposeCommand:
    def test_no_options(self):
        assert compose_command("game", None) == "game"
        assert compose_command("game", LaunchOptions()) == "game"

    def test_exact_token(self):
        assert compose_command("game", LaunchOptions(custom_command=" %command% ")) == "game"

    def test_substitution(self):
        opts = LaunchOptions(custom_command="gamemoderun %command% --fast")
        assert compose_command("mygame", opts) == "gamemoderun mygame --fast"

    def test_prepend(self):
        assert compose_command("game", LaunchOptions(custom_command="prime-run")) == "prime-run game"
