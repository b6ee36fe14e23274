# make_theme/plus/methods.py
import logging
from typing import Iterable, Optional

from packaging.version import InvalidVersion, Version

from make_theme.context import ThemeContext
from make_theme.templating import render_fragment

logger = logging.getLogger(__name__)

PLUS_LINK = "https://thethemefoundry.com/make-buy/"
UPDATE_TUTORIAL_LINK = "https://thethemefoundry.com/tutorials/updating-your-existing-theme/"

# Make Plus releases at or below this version can fail to auto-update
PLUS_UPDATE_NOTICE_MAX_VERSION = "1.4.7"

STYLE_KITS = ("Default", "Hello", "Light", "Dark", "Modern", "Creative", "Vintage")


def version_lte(version: Optional[str], other: str) -> bool:
    if version is None:
        return False
    try:
        return Version(version) <= Version(other)
    except InvalidVersion:
        logger.warning("Unparseable Make Plus version %r", version)
        return False


class PlusMethods:
    """
    Make Plus detection, plus the upsell info shown to users who could
    install it.
    """

    name = "plus"

    def __init__(self, context: ThemeContext):
        self.context = context
        self.hooks = context.hooks
        self.plus = context.capabilities.plus

    def hook(self):
        if self.is_hooked():
            return

        self.hooks.add_action("make_notice_loaded", self.admin_notices)
        self.hooks.add_filter("admin_body_class", self.admin_body_classes)

        if not self.is_plus() and self.can_add_plus():
            # Customizer
            self.hooks.add_action("customize_controls_print_footer_scripts", self.customizer_add_header_info)
            self.hooks.add_action("customize_register", self.customizer_add_section_info, 99)

            # Edit screens
            self.hooks.add_action("post_submitbox_misc_actions", self.duplicate_add_info)
            self.hooks.add_action("add_meta_boxes", self.perpage_add_info)
            self.hooks.add_action("edit_form_after_title", self.quickstart_add_info)

            # Builder
            self.hooks.add_action("make_after_builder_menu", self.sections_add_info)
            self.hooks.add_action("make_section_text_before_columns_select", self.widgetarea_add_info)

        self.context.mark_hooked(self.name)

    def is_hooked(self) -> bool:
        return self.context.is_hooked(self.name)

    def is_plus(self) -> bool:
        return bool(self.hooks.apply_filters("make_is_plus", self.plus))

    def can_add_plus(self) -> bool:
        return self.context.user.can("install_plugins")

    def get_plus_link(self) -> str:
        return PLUS_LINK

    def get_plus_version(self) -> Optional[str]:
        if self.is_plus():
            return self.context.capabilities.plus_version
        return None

    def _upgrade_link(self, text="Upgrade to Make Plus") -> str:
        return render_fragment("plus/upgrade_link.html", plus_link=self.get_plus_link(), text=text)

    # -------------------------------
    # Notices and body classes
    # -------------------------------
    def admin_notices(self, notice):
        if self.is_plus() and version_lte(self.get_plus_version(), PLUS_UPDATE_NOTICE_MAX_VERSION):
            notice.register_admin_notice(
                "make-plus-lte-147",
                (
                    "A new version of Make Plus is available. If you encounter problems updating through "
                    '<a href="/wp-admin/update-core.php">the WordPress interface</a>, please '
                    f'<a href="{UPDATE_TUTORIAL_LINK}" target="_blank">follow these steps</a> to update manually.'
                ),
                {
                    "cap": "update_plugins",
                    "dismiss": True,
                    "screen": ["dashboard", "update-core.php", "plugins.php"],
                    "type": "warning",
                },
            )

    def admin_body_classes(self, classes: str) -> str:
        # Unlike body_class, the admin body class is a space-separated string
        if self.is_plus():
            return classes + " make-plus-enabled"
        return classes + " make-plus-disabled"

    # -------------------------------
    # Customizer
    # -------------------------------
    def customizer_add_header_info(self):
        self.context.echo(render_fragment("plus/customizer_header.html", plus_link=self.get_plus_link()))

    def customizer_add_section_info(self, customizer):
        general = customizer.get_panel("make_general") or {}
        google = customizer.get_section("make_font-google") or {}
        social = customizer.get_section("make_social") or {}

        # Style Kits
        customizer.add_section(
            "make_stylekit",
            title="Style Kits",
            description=(
                f"{self._upgrade_link()} to quickly apply designer-picked style choices "
                "(fonts, layout, colors) to your website."
            ),
            priority=general.get("priority", 0) - 5,
        )
        customizer.add_control(
            "make_stylekit-info",
            type="html",
            section="make_stylekit",
            label="Kits",
            html=render_fragment("plus/stylekit_select.html", kits=STYLE_KITS),
        )

        # Typekit
        customizer.add_section(
            "make_font-typekit",
            panel="make_typography",
            title="Typekit",
            description="Looking to add premium fonts from Typekit to your website?",
            priority=google.get("priority", 0) + 2,
        )
        customizer.add_control(
            "make_font-typekit-update-text",
            type="html",
            section="make_font-typekit",
            description=self._upgrade_link("Upgrade to Make Plus"),
        )

        # White Label
        customizer.add_section(
            "make_white-label",
            panel="make_general",
            title="White Label",
            description="Want to remove the theme byline from your website’s footer?",
            priority=social.get("priority", 0) + 2,
        )
        customizer.add_control(
            "make_footer-white-label-text",
            type="html",
            section="make_white-label",
            description=self._upgrade_link("Upgrade to Make Plus"),
        )

    # -------------------------------
    # Edit screens
    # -------------------------------
    def duplicate_add_info(self, post_type: str = "page"):
        if post_type != "page":
            return
        self.context.echo(render_fragment("plus/duplicate.html", plus_link=self.get_plus_link()))

    def perpage_add_info(self, public_post_types: Iterable[str] = ()):
        post_types = list(public_post_types) + ["post", "page"]

        for post_type in post_types:
            self.context.add_meta_box(
                "ttfmake-plus-metabox",
                "Layout Settings",
                self.perpage_render_metabox,
                post_type,
                "side",
                "default",
            )

    def perpage_render_metabox(self, post_type_label: Optional[str] = None) -> str:
        return render_fragment(
            "plus/perpage_metabox.html",
            label=post_type_label or "Post",
            plus_link=self.get_plus_link(),
        )

    def quickstart_add_info(self, post=None):
        if post is None or post.post_type != "page":
            return

        self.context.scripts.register(
            "ttfmake-sections/js/quick-start.js",
            "/js/builder/sections/quick-start.js",
            ["ttfmake-builder"],
        )
        self.context.scripts.enqueue("ttfmake-sections/js/quick-start.js")

        section_ids = post.get_meta("_ttfmake-section-ids")
        additional_classes = " ttfmp-import-message-hide" if section_ids else ""

        self.context.echo(render_fragment(
            "plus/quickstart.html",
            additional_classes=additional_classes,
            plus_link=self.get_plus_link(),
        ))

    def sections_add_info(self):
        self.context.echo(render_fragment("plus/sections_menu.html", plus_link=self.get_plus_link()))

    def widgetarea_add_info(self):
        self.context.echo(render_fragment("plus/widgetarea.html", plus_link=self.get_plus_link()))
