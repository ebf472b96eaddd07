"""Tests for catalog assembly."""

from conftest import write

from tusk.core.catalog import CatalogEntry, build_catalog, merge_entries
from tusk.core.desktop_parser import DesktopEntry
from tusk.core.steam_scanner import SteamGame


def game(appid: str, name: str) -> SteamGame:
    return SteamGame(appid, name, name, f"steam steam://rungameid/{appid}", f"platform_icon:{appid}")


class TestMergeEntries:
    def test_first_name_wins(self):
        desktop = [
            DesktopEntry("Files", "nautilus", "org.gnome.Nautilus"),
            DesktopEntry("Files", "thunar", "thunar"),
        ]
        merged = merge_entries(desktop, [game("1", "Files"), game("2", "Portal")])
        assert merged == [
            CatalogEntry("Files", "nautilus", "org.gnome.Nautilus"),
            CatalogEntry("Portal", "steam steam://rungameid/2", "platform_icon:2"),
        ]


class TestBuildCatalog:
    def test_directory_order_is_kept(self, tmp_path):
        user = tmp_path / "user" / "applications"
        system = tmp_path / "system" / "applications"
        write(user / "term.desktop", "Name=Terminal\nExec=foot\n")
        write(system / "term.desktop", "Name=Terminal\nExec=xterm\n")
        write(system / "files.desktop", "Name=Files\nExec=thunar %F\nIcon=thunar\n")

        catalog = build_catalog([user, system, tmp_path / "missing"], steam_scan=lambda: [game("7", "Game")])

        assert [e.name for e in catalog] == ["Terminal", "Files", "Game"]
        assert catalog[0].exec_cmd == "foot"
        assert catalog[1].icon_hint == "thunar"

    def test_steam_failure_yields_desktop_entries_only(self, tmp_path):
        apps = tmp_path / "applications"
        write(apps / "a.desktop", "Name=A\nExec=a\n")

        def broken_scan():
            raise PermissionError("denied")

        assert [e.name for e in build_catalog([apps], steam_scan=broken_scan)] == ["A"]
