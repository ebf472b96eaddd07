""".desktop file parser: extracts name, exec line, icon and window class."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tusk.core.logger import get_logger

_log = get_logger("desktop_parser")

# Field codes that only make sense when a file manager passes arguments.
EXEC_FIELD_CODES = ["%f", "%F", "%u", "%U", "%c", "%k", "@@"]

_WANTED_KEYS = ("Name", "Exec", "Icon", "StartupWMClass")


@dataclass
class DesktopEntry:
    """Parsed fields from a .desktop file."""
    name: str
    exec_cmd: str
    icon: str = ""
    wm_class: str = ""
    file_path: str = ""


def parse_desktop_file(path: str | Path) -> DesktopEntry | None:
    """Parse a single .desktop file and return a DesktopEntry, or None on failure.

    Sections are ignored: the first occurrence of each key anywhere in the
    file wins, so ``[Desktop Action ...]`` blocks after the main entry never
    override it.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log.debug("Skipping %s: %s", path, e)
        return None

    fields: dict[str, str] = {}
    for line in content.splitlines():
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key in _WANTED_KEYS and key not in fields:
            fields[key] = value.strip()

    name = fields.get("Name")
    exec_cmd = fields.get("Exec")
    if name is None or exec_cmd is None:
        return None

    icon = fields.get("Icon", "")
    wm_class = fields.get("StartupWMClass", "")
    return DesktopEntry(
        name=name,
        exec_cmd=normalize_exec(exec_cmd, icon, wm_class),
        icon=icon,
        wm_class=wm_class,
        file_path=str(path),
    )


def normalize_exec(exec_cmd: str, icon: str = "", wm_class: str = "") -> str:
    """Strip field codes from an Exec line and add icon/class arguments."""
    for code in EXEC_FIELD_CODES:
        exec_cmd = exec_cmd.replace(code, "")
    exec_cmd = exec_cmd.replace("%i", f"--icon {icon}" if icon else "")
    exec_cmd = exec_cmd.strip()
    if wm_class and "flatpak run" not in exec_cmd:
        exec_cmd = f"{exec_cmd} --class {wm_class}"
    return exec_cmd.rstrip()


def scan_directory(directory: Path) -> list[DesktopEntry]:
    """Parse every ``*.desktop`` file directly inside ``directory``."""
    entries: list[DesktopEntry] = []
    try:
        files = sorted(directory.iterdir())
    except FileNotFoundError:
        return entries
    except OSError as e:
        _log.warning("Cannot read %s: %s", directory, e)
        return entries

    for f in files:
        if f.suffix != ".desktop":
            continue
        entry = parse_desktop_file(f)
        if entry is not None:
            entries.append(entry)
    return entries
