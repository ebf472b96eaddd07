"""Tests for the icon resolution chain."""

from conftest import write

from tusk.core.icon_resolver import resolve_icon_path


class TestResolveIconPath:
    def test_theme_lookup_records_directory(self, tmp_path, cache):
        icons = tmp_path / "usr" / "share" / "icons"
        png = write(icons / "hicolor" / "48x48" / "apps" / "firefox.png", "png")

        found = resolve_icon_path("Firefox", "firefox", cache, roots=[icons])

        assert found == str(png)
        assert cache.get("Firefox").icon_directory == str(png.parent)

    def test_larger_size_preferred(self, tmp_path, cache):
        icons = tmp_path / "icons"
        write(icons / "hicolor" / "48x48" / "apps" / "app.png")
        big = write(icons / "hicolor" / "256x256" / "apps" / "app.svg")
        assert resolve_icon_path("App", "app", cache, roots=[icons]) == str(big)

    def test_disabled_or_empty_hint(self, tmp_path, cache):
        icons = tmp_path / "icons"
        write(icons / "hicolor" / "48x48" / "apps" / "app.png")
        assert resolve_icon_path("App", "app", cache, enabled=False, roots=[icons]) is None
        assert resolve_icon_path("App", "", cache, roots=[icons]) is None
        assert cache.get("App") is None

    def test_absolute_file_hint(self, tmp_path, cache):
        icon = write(tmp_path / "opt" / "app" / "logo.png")
        assert resolve_icon_path("App", str(icon), cache, roots=[]) == str(icon)
        assert cache.get("App").icon_directory == str(icon)

    def test_directory_hint_picks_first_image(self, tmp_path, cache):
        game_dir = tmp_path / "common" / "Portal 2"
        write(game_dir / "readme.txt")
        write(game_dir / "b.png")
        first = write(game_dir / "a.JPG")
        assert resolve_icon_path("Portal 2", str(game_dir), cache, roots=[]) == str(first)

    def test_platform_icon_from_librarycache(self, tmp_path, cache):
        librarycache = tmp_path / "Steam" / "appcache" / "librarycache"
        write(librarycache / "620_icon.png")
        header = write(librarycache / "620_header.jpg")
        assert resolve_icon_path("Portal 2", "platform_icon:620", cache, roots=[librarycache]) == str(header)
        assert cache.get("Portal 2").icon_directory == str(header)

    def test_platform_icon_falls_back_to_theme_by_appid(self, tmp_path, cache):
        icons = tmp_path / "icons"
        plain = write(icons / "hicolor" / "32x32" / "apps" / "620.png")
        assert resolve_icon_path("Portal 2", "platform_icon:620", cache, roots=[icons]) == str(plain)

    def test_recorded_directory_is_probed_first(self, tmp_path, cache):
        recorded = tmp_path / "custom"
        hit = write(recorded / "firefox.svg")
        icons = tmp_path / "icons"
        write(icons / "hicolor" / "48x48" / "apps" / "firefox.png")
        cache.set_icon_directory("Firefox", str(recorded))

        assert resolve_icon_path("Firefox", "firefox", cache, roots=[icons]) == str(hit)

    def test_stale_record_falls_through(self, tmp_path, cache):
        icons = tmp_path / "icons"
        png = write(icons / "hicolor" / "48x48" / "apps" / "firefox.png")
        cache.set_icon_directory("Firefox", str(tmp_path / "gone"))

        assert resolve_icon_path("Firefox", "firefox", cache, roots=[icons]) == str(png)
        assert cache.get("Firefox").icon_directory == str(png.parent)

    def test_nothing_found(self, tmp_path, cache):
        assert resolve_icon_path("Ghost", "ghost", cache, roots=[tmp_path / "none"]) is None
