"""Per-app launch overrides: command wrapper, working directory, environment.

Three representations exist:

* the text a user types into the options editor
  (``-e KEY=VALUE -w DIR wrapper %command% args``),
* the store encoding ``custom|workdir|k1=v1,k2=v2`` kept in app_cache.txt,
* the ``LaunchOptions`` dataclass used everywhere else.

The store encoding does not escape ``|``, ``,`` or ``=``; values carrying
them cannot be stored and are refused by :func:`has_reserved_chars` callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

COMMAND_TOKEN = "%command%"
RESERVED_CHARS = ("|", ",")


@dataclass
class LaunchOptions:
    custom_command: str | None = None
    working_directory: str | None = None
    environment_vars: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.custom_command or self.working_directory or self.environment_vars)


def parse_input(text: str) -> LaunchOptions:
    """Parse user-entered options.

    ``-e K=V`` adds an environment variable (ignored when the value has no
    ``=`` or is missing), ``-w DIR`` sets the working directory, and the
    first other token starts the custom command, which runs to the end.
    """
    options = LaunchOptions()
    tokens = text.split()
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "-e":
            if i + 1 < len(tokens) and "=" in tokens[i + 1]:
                key, _, value = tokens[i + 1].partition("=")
                options.environment_vars[key] = value
            i += 2
        elif token == "-w":
            if i + 1 < len(tokens):
                options.working_directory = tokens[i + 1]
            i += 2
        else:
            options.custom_command = " ".join(tokens[i:])
            break
    return options


def format_input(options: LaunchOptions | None) -> str:
    """Render options back into the editor text form."""
    if options is None:
        return ""
    parts = [f"-e {k}={v} " for k, v in options.environment_vars.items()]
    if options.working_directory:
        parts.append(f"-w {options.working_directory} ")
    if options.custom_command:
        parts.append(options.custom_command)
    return "".join(parts).strip()


def encode(options: LaunchOptions) -> str:
    """Serialize for the store's middle field: ``custom|workdir|k=v,k=v``."""
    env = ",".join(f"{k}={v}" for k, v in options.environment_vars.items())
    return f"{options.custom_command or ''}|{options.working_directory or ''}|{env}"


def decode(text: str) -> LaunchOptions | None:
    """Inverse of :func:`encode`. Returns None when there are not three parts."""
    parts = text.split("|", 2)
    if len(parts) != 3:
        return None
    custom, workdir, env_str = parts
    env: dict[str, str] = {}
    if env_str:
        for pair in env_str.split(","):
            key, sep, value = pair.partition("=")
            if sep:
                env[key] = value
    return LaunchOptions(
        custom_command=custom or None,
        working_directory=workdir or None,
        environment_vars=env,
    )


def has_reserved_chars(options: LaunchOptions) -> bool:
    """True if any value would corrupt the store encoding."""
    values = [options.custom_command or "", options.working_directory or ""]
    values.extend(options.environment_vars.values())
    if any(ch in v for v in values for ch in RESERVED_CHARS):
        return True
    return any(
        ch in k for k in options.environment_vars for ch in RESERVED_CHARS + ("=",)
    )


def compose_command(exec_cmd: str, options: LaunchOptions | None) -> str:
    """Apply the ``%command%`` rules of a custom command to ``exec_cmd``."""
    custom = options.custom_command if options else None
    if not custom:
        return exec_cmd
    if custom.strip() == COMMAND_TOKEN:
        return exec_cmd
    if COMMAND_TOKEN in custom:
        return custom.replace(COMMAND_TOKEN, exec_cmd)
    return f"{custom} {exec_cmd}"
