from __future__ import annotations

from make_theme.context import CurrentUser, ThemeContext
from make_theme.settings import CustomizerRegistry, NoticeRegistry, ThemeModSettings


def test_add_settings_fills_defaults_without_replacing() -> None:
    thememod = ThemeModSettings(ThemeContext())

    assert thememod.add_settings({"a": {}, "b": {"default": 3}}, {"default": 1, "sanitize": "absint"}) is True
    assert thememod.add_settings({"a": {"default": 9}}) is False

    assert thememod.get_default("a") == 1
    assert thememod.get_default("b") == 3
    assert thememod.get_default("missing") is None
    assert thememod.setting_exists("b")


def test_get_value_sanitizes_stored_values() -> None:
    thememod = ThemeModSettings(ThemeContext(), {"size": "-17", "title": " <b>Hi</b>  there "})
    thememod.add_settings({"size": {"sanitize": "absint"}, "title": {"sanitize": "sanitize_text_field"}, "plain": {"default": "x"}})

    assert thememod.get_value("size") == 17
    assert thememod.get_value("title") == "Hi there"
    assert thememod.get_value("plain") == "x"


def test_stored_values_are_read_once_from_a_callable() -> None:
    calls = []

    def source():
        calls.append(1)
        return {"a": "1"}

    thememod = ThemeModSettings(ThemeContext(), source)
    thememod.stored_values()
    thememod.stored_values()

    assert calls == [1]


def test_load_fires_once() -> None:
    context = ThemeContext()
    thememod = ThemeModSettings(context)
    context.hooks.add_action("make_settings_thememod_loaded", lambda mods: mods.add_settings({"x": {"default": 2}}))

    thememod.load()
    thememod.load()

    assert context.hooks.did_action("make_settings_thememod_loaded") == 1
    assert thememod.get_value("x") == 2


def test_customizer_defaults_and_last_priority() -> None:
    customizer = CustomizerRegistry()
    customizer.add_section("make_layout-post", panel="make_content-layout")
    customizer.add_control("one", section="make_layout-post")
    customizer.add_control("two", section="make_layout-post", priority=30, type="checkbox")

    controls = customizer.get_section_controls("make_layout-post")

    assert customizer.get_section("make_layout-post")["priority"] == 160
    assert customizer.controls["one"] == {"section": "make_layout-post", "priority": 10, "type": "text"}
    assert customizer.get_last_priority(controls) == 30
    assert customizer.get_last_priority([]) == 0


def test_notices_filter_by_screen_and_capability() -> None:
    notices = NoticeRegistry(ThemeContext())
    notices.register_admin_notice("a", "A", {"screen": ["dashboard"], "cap": "switch_themes", "type": "bogus"})
    notices.register_admin_notice("b", "B", {"screen": ["plugins.php"], "cap": "update_plugins"})

    admin = CurrentUser(id="1", role="admin", capabilities=frozenset({"switch_themes"}))

    assert [n.id for n in notices.get_notices(screen="dashboard")] == ["a"]
    assert [n.id for n in notices.get_notices(user=admin)] == ["a"]
    assert notices.get_notices()[0].type == "info"
