from __future__ import annotations

from make_theme.context import PluginCapabilities
from make_theme.plus import PLUS_LINK, version_lte

from fakes import FakePost

INSTALLER = ["install_plugins"]


def test_version_lte() -> None:
    assert version_lte("1.4.7", "1.4.7") is True
    assert version_lte("1.4.10", "1.4.7") is False
    assert version_lte("1.2", "1.4.7") is True
    assert version_lte(None, "1.4.7") is False
    assert version_lte("not a version", "1.4.7") is False


def test_plus_detection(theme_factory) -> None:
    assert theme_factory().plus.is_plus() is False

    plus = theme_factory(capabilities=PluginCapabilities(plus_version="1.8.0")).plus
    assert plus.is_plus() is True
    assert plus.get_plus_version() == "1.8.0"
    assert plus.get_plus_link() == PLUS_LINK


def test_is_plus_filter(theme_factory) -> None:
    theme = theme_factory()
    theme.hooks.add_filter("make_is_plus", lambda value: True)

    assert theme.plus.is_plus() is True


def test_admin_body_class(theme_factory) -> None:
    without = theme_factory().load()
    with_plus = theme_factory(capabilities=PluginCapabilities(plus_version="1.8.0")).load()

    assert without.hooks.apply_filters("admin_body_class", "wp-admin") == "wp-admin make-plus-disabled"
    assert with_plus.hooks.apply_filters("admin_body_class", "wp-admin") == "wp-admin make-plus-enabled"


def test_upsell_hooks_need_install_capability(theme_factory) -> None:
    visitor = theme_factory().load()
    installer = theme_factory(caps=INSTALLER).load()
    owner = theme_factory(caps=INSTALLER, capabilities=PluginCapabilities(plus_version="1.8.0")).load()

    assert visitor.hooks.has_action("make_after_builder_menu") is False
    assert installer.hooks.has_action("customize_register", installer.plus.customizer_add_section_info) == 99
    assert owner.hooks.has_action("edit_form_after_title") is False


def test_old_plus_gets_update_notice(theme_factory) -> None:
    theme = theme_factory(caps=["update_plugins"], capabilities=PluginCapabilities(plus_version="1.4.7")).load()

    notices = theme.load_notices().get_notices(screen="dashboard", user=theme.context.user)

    assert [n.id for n in notices] == ["make-plus-lte-147"]
    assert notices[0].type == "warning"


def test_current_plus_gets_no_notice(theme_factory) -> None:
    theme = theme_factory(caps=["update_plugins"], capabilities=PluginCapabilities(plus_version="1.5.0")).load()

    assert theme.load_notices().get_notices() == []


def test_customizer_upsell_sections_are_positioned(theme_factory) -> None:
    customizer = theme_factory(caps=INSTALLER).load().register_customizer()

    assert customizer.get_section("make_stylekit")["priority"] == 95
    assert customizer.get_section("make_font-typekit")["priority"] == 22
    assert customizer.get_section("make_white-label")["priority"] == 32
    assert customizer.controls["make_stylekit-info"]["type"] == "html"
    assert "Vintage" in customizer.controls["make_stylekit-info"]["html"]
    assert PLUS_LINK in customizer.sections["make_white-label"]["description"]


def test_builder_screen_upsells(theme_factory) -> None:
    theme = theme_factory(caps=INSTALLER).load()

    theme.hooks.do_action("make_after_builder_menu")
    theme.hooks.do_action("make_section_text_before_columns_select")
    html = theme.context.flush_output()

    assert 'id="ttfmake-menu-list-item-link-plus"' in html
    assert 'class="ttfmake-plus-info"' in html
    assert theme.context.flush_output() == ""


def test_duplicate_info_only_for_pages(theme_factory) -> None:
    theme = theme_factory(caps=INSTALLER).load()

    theme.hooks.do_action("post_submitbox_misc_actions", "post")
    assert theme.context.flush_output() == ""

    theme.hooks.do_action("post_submitbox_misc_actions", "page")
    assert "ttfmake-duplicator" in theme.context.flush_output()


def test_perpage_meta_boxes(theme_factory) -> None:
    theme = theme_factory(caps=INSTALLER).load()

    theme.hooks.do_action("add_meta_boxes", ["product"])

    boxes = theme.context.meta_boxes
    assert [box["screen"] for box in boxes] == ["product", "post", "page"]
    assert {box["context"] for box in boxes} == {"side"}
    assert "unique layout for this product" in boxes[0]["callback"]("Product")


def test_quickstart_hidden_once_sections_exist(theme_factory) -> None:
    theme = theme_factory(caps=INSTALLER).load()

    theme.hooks.do_action("edit_form_after_title", FakePost(meta={"_ttfmake-section-ids": ["1"]}))
    html = theme.context.flush_output()

    assert "ttfmp-import-message-hide" in html
    assert "ttfmake-sections/js/quick-start.js" in theme.context.scripts.enqueued()


def test_quickstart_skips_non_pages(theme_factory) -> None:
    theme = theme_factory(caps=INSTALLER).load()

    theme.hooks.do_action("edit_form_after_title", FakePost(post_type="post"))

    assert theme.context.flush_output() == ""
