# make_theme/integration/yoastseo.py
from typing import Optional

from make_theme.context import ThemeContext
from make_theme.templating import render_fragment

# Views that can have breadcrumbs
BREADCRUMB_VIEWS = ("blog", "archive", "search", "post", "page")

WOOCOMMERCE_HOOK = "woocommerce_before_main_content"


def breadcrumb_setting_id(view: str) -> str:
    return f"layout-{view}-yoast-breadcrumb"


def woocommerce_breadcrumb(*args):
    """Placeholder for the WooCommerce breadcrumb callback."""


class YoastSEOIntegration:
    """
    Yoast SEO breadcrumbs: per-view theme settings, Customizer controls,
    and rendering through the plugin's breadcrumb function.

    ``customizer_controls`` is only available in a Customizer context.
    """

    name = "integration.yoastseo"

    def __init__(self, context: ThemeContext, thememod, customizer_controls=None):
        self.context = context
        self.hooks = context.hooks
        self.thememod = thememod
        self.customizer_controls = customizer_controls
        self.breadcrumb = context.capabilities.yoast_breadcrumb

    def hook(self):
        if self.is_hooked():
            return

        self.hooks.add_action("after_setup_theme", self.theme_support)
        self.hooks.add_action("after_setup_theme", self.replace_breadcrumb)
        self.hooks.add_action("make_settings_thememod_loaded", self.load_thememod_definitions)

        if self.customizer_controls is not None:
            self.hooks.add_action("customize_register", self.add_controls, 11)

        self.context.mark_hooked(self.name)

    def is_hooked(self) -> bool:
        return self.context.is_hooked(self.name)

    def theme_support(self):
        self.context.add_theme_support("yoast-seo-breadcrumbs")

    def load_thememod_definitions(self, thememod) -> bool:
        return thememod.add_settings(
            {breadcrumb_setting_id(view): {} for view in BREADCRUMB_VIEWS},
            {"default": True, "sanitize": "wp_validate_boolean"},
        )

    def add_controls(self, customizer):
        for view in BREADCRUMB_VIEWS:
            section_id = f"make_layout-{view}"
            setting_id = breadcrumb_setting_id(view)
            section_controls = customizer.get_section_controls(section_id)
            last_priority = customizer.get_last_priority(section_controls)

            customizer.add_control(
                f"breadcrumb-group-{view}",
                type="html",
                section=section_id,
                priority=last_priority + 1,
                html=render_fragment("integration/breadcrumb_heading.html"),
            )

            customizer.add_setting(
                setting_id,
                default=self.thememod.get_default(setting_id),
                sanitize_callback="wp_validate_boolean",
            )

            customizer.add_control(
                f"make_{setting_id}",
                settings=setting_id,
                section=section_id,
                priority=last_priority + 2,
                label="Show breadcrumbs",
                type="checkbox",
            )

    def maybe_render_breadcrumb(
        self,
        view: Optional[str] = None,
        is_front_page: bool = False,
        is_404: bool = False,
        before: str = '<p class="yoast-seo-breadcrumb">',
        after: str = "</p>",
    ) -> str:
        if self.breadcrumb is None:
            return ""

        view = view or self.context.view
        show_breadcrumbs = self.thememod.get_value(breadcrumb_setting_id(view))

        if (show_breadcrumbs and not is_front_page) or is_404:
            return self.breadcrumb(before, after)

        return ""

    def make_breadcrumb(self, *args):
        """Theme breadcrumb callback used in place of WooCommerce's."""
        self.context.echo(self.maybe_render_breadcrumb())

    def replace_breadcrumb(self):
        # Unified breadcrumbs: WooCommerce's slot renders the Yoast version
        priority = self.hooks.has_action(WOOCOMMERCE_HOOK, woocommerce_breadcrumb)
        if priority is not False:
            self.hooks.remove_action(WOOCOMMERCE_HOOK, woocommerce_breadcrumb, priority)
            self.hooks.add_action(WOOCOMMERCE_HOOK, self.make_breadcrumb, priority, 0)
