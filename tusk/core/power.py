"""Power actions: try each configured command until one starts."""

from __future__ import annotations

import os
import subprocess
from typing import Sequence

from tusk.core.config import Config
from tusk.core.logger import get_logger

_log = get_logger("power")

SESSION_ID_VAR = "$XDG_SESSION_ID"


def spawn_command(command_str: str) -> bool:
    """Start ``program arg1 arg2`` without a shell. Returns True on success.

    ``$XDG_SESSION_ID`` is substituted from the environment; the command
    fails when it is referenced but unset.
    """
    if SESSION_ID_VAR in command_str:
        session_id = os.environ.get("XDG_SESSION_ID")
        if not session_id:
            return False
        command_str = command_str.replace(SESSION_ID_VAR, session_id)

    argv = command_str.split()
    if not argv:
        return False
    try:
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        _log.debug("Power command %r failed: %s", command_str, e)
        return False
    return True


def try_commands(commands: Sequence[str]) -> bool:
    """Try each command in order, stopping at the first one that starts."""
    return any(spawn_command(cmd) for cmd in commands)


def _execute(label: str, commands: Sequence[str]) -> bool:
    if try_commands(commands):
        _log.info("Requested %s", label)
        return True
    _log.warning("Failed to %s: no working commands found in config", label)
    return False


def power_off(config: Config) -> bool:
    return _execute("power off", config.get("power_commands"))


def restart(config: Config) -> bool:
    return _execute("restart", config.get("restart_commands"))


def logout(config: Config) -> bool:
    return _execute("logout", config.get("logout_commands"))
