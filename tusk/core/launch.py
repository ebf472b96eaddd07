"""Spawn applications detached from the launcher through ``sh -c``."""

from __future__ import annotations

import os
import subprocess

from tusk.core.app_cache import AppCache
from tusk.core.launch_options import LaunchOptions, compose_command
from tusk.core.logger import get_logger
from tusk.core.paths import user_home

_log = get_logger("launch")


def resolve_working_directory(options: LaunchOptions | None) -> str:
    """Options' working directory, else the home directory, else ``""``."""
    if options and options.working_directory:
        return options.working_directory
    try:
        return str(user_home())
    except OSError:
        return ""


def build_environment(options: LaunchOptions | None) -> dict[str, str]:
    env = os.environ.copy()
    if options:
        env.update(options.environment_vars)
    return env


def launch_app(
    app_name: str,
    exec_cmd: str,
    options: LaunchOptions | None = None,
    cache: AppCache | None = None,
    enable_recent_apps: bool = True,
) -> bool:
    """Launch ``exec_cmd`` with any user overrides applied.

    Recency is promoted before spawning. The child gets null stdio, its own
    session and no inherited descriptors; the launcher never waits on it.
    Returns False if the process could not be started.
    """
    if enable_recent_apps and cache is not None:
        cache.promote_recency(app_name)

    command = compose_command(exec_cmd, options)
    cwd = resolve_working_directory(options)
    _log.info("Launching %s: %s (cwd=%s)", app_name, command, cwd or "<inherit>")
    try:
        subprocess.Popen(
            ["sh", "-c", command],
            cwd=cwd or None,
            env=build_environment(options),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            start_new_session=True,
        )
    except OSError as e:
        _log.warning("Failed to launch %s: %s", app_name, e)
        return False
    return True
