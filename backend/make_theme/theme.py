# make_theme/theme.py
import logging

from make_theme.builder import BuilderSetup
from make_theme.compatibility import CompatibilityMethods
from make_theme.context import ThemeContext
from make_theme.font import GoogleFontSource
from make_theme.integration import YoastSEOIntegration, woocommerce_breadcrumb, WOOCOMMERCE_HOOK
from make_theme.plus import PlusMethods
from make_theme.settings import CustomizerRegistry, NoticeRegistry, ThemeModSettings

logger = logging.getLogger(__name__)

FRONTEND_SCRIPTS = {
    "cycle2": ("/js/libs/cycle2/jquery.cycle2.min.js", ["jquery"]),
    "cycle2-center": ("/js/libs/cycle2/jquery.cycle2.center.js", ["cycle2"]),
    "cycle2-swipe": ("/js/libs/cycle2/jquery.cycle2.swipe.js", ["cycle2"]),
    "make-frontend": ("/js/frontend.js", ["jquery", "fitvids"]),
}

# Customizer containers the integrations position themselves against
CUSTOMIZER_PANELS = {
    "make_general": 100,
    "make_typography": 200,
    "make_content-layout": 400,
}
CUSTOMIZER_SECTIONS = {
    "make_font-google": ("make_typography", 20),
    "make_social": ("make_general", 30),
    "make_layout-blog": ("make_content-layout", 10),
    "make_layout-archive": ("make_content-layout", 20),
    "make_layout-search": ("make_content-layout", 30),
    "make_layout-post": ("make_content-layout", 40),
    "make_layout-page": ("make_content-layout", 50),
}


class Theme:
    """
    The theme API for one request: builds every component with the
    collaborators it needs and runs the bootstrap hooks.
    """

    def __init__(self, context: ThemeContext, stored_theme_mods=None):
        self.context = context
        self.hooks = context.hooks

        self.compatibility = CompatibilityMethods(context)
        self.google_fonts = GoogleFontSource(context, self.compatibility)
        self.thememod = ThemeModSettings(context, stored_theme_mods)
        self.customizer = CustomizerRegistry()
        self.notices = NoticeRegistry(context)
        self.builder = BuilderSetup(context)
        self.plus = PlusMethods(context)

        self.yoast = None
        if context.capabilities.yoast:
            self.yoast = YoastSEOIntegration(context, self.thememod, self.customizer)

        self._loaded = False

    def hook(self):
        self.compatibility.hook()
        self.builder.hook()
        self.plus.hook()
        if self.yoast is not None:
            self.yoast.hook()

        for handle, (src, deps) in FRONTEND_SCRIPTS.items():
            if not self.context.scripts.is_registered(handle):
                self.context.scripts.register(handle, src, deps)

        if self.context.capabilities.woocommerce and not self.hooks.has_action(WOOCOMMERCE_HOOK):
            self.hooks.add_action(WOOCOMMERCE_HOOK, woocommerce_breadcrumb, 20)

    def load(self) -> "Theme":
        """
        Hook every component, then fire the load-time actions. Safe to call
        more than once.
        """
        self.hook()
        if self._loaded:
            return self

        self._loaded = True
        self.hooks.do_action("make_api_loaded", self)
        self.hooks.do_action("after_setup_theme")
        self.thememod.load()
        logger.debug("Theme loaded in %s compatibility mode", self.compatibility.get_mode())
        return self

    # -------------------------------
    # Request lifecycle entry points
    # -------------------------------
    def enqueue_scripts(self):
        self.hooks.do_action("wp_enqueue_scripts")
        self.context.scripts.enqueue("make-frontend")
        return self.context.scripts.get_dependencies("make-frontend")

    def build_styles(self) -> str:
        return self.context.style.build()

    def register_customizer(self) -> CustomizerRegistry:
        for panel_id, priority in CUSTOMIZER_PANELS.items():
            if self.customizer.get_panel(panel_id) is None:
                self.customizer.add_panel(panel_id, priority=priority)

        for section_id, (panel, priority) in CUSTOMIZER_SECTIONS.items():
            if self.customizer.get_section(section_id) is None:
                self.customizer.add_section(section_id, panel=panel, priority=priority)

        self.hooks.do_action("customize_register", self.customizer)
        return self.customizer

    def load_notices(self) -> NoticeRegistry:
        self.notices.load()
        return self.notices
