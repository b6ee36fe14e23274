# make_theme/builder/setup.py
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from make_theme.context import ThemeContext
from make_theme.utils.sanitize import absint, sanitize_title_with_dashes

from .sections import get_section_data, is_builder_page, list_section_types

logger = logging.getLogger(__name__)

SectionCSSHandler = Callable[[Mapping[str, Any], str, Any], None]

FRONTEND_SCRIPT = "make-frontend"
BANNER_MEDIA = "screen and (min-width: 600px) and (max-width: 960px)"
BANNER_DEFAULT_HEIGHT = 600
BANNER_BASE_WIDTH = 960


def format_number(value: float) -> str:
    # 14 significant digits, no trailing zeros: 62.5, 50, 31.25
    return format(value, ".14g")


class SectionCSSRegistry:
    """
    Section type -> handler that adds that section's inline CSS.
    """

    def __init__(self, handlers: Optional[Dict[str, SectionCSSHandler]] = None):
        self._handlers: Dict[str, SectionCSSHandler] = dict(handlers or {})

    def register(self, section_type: str, handler: SectionCSSHandler):
        self._handlers[section_type] = handler

    def get(self, section_type: str) -> Optional[SectionCSSHandler]:
        return self._handlers.get(section_type)


class BuilderSetup:
    """
    Front-end wiring for Builder pages: section-specific scripts and
    section-specific inline CSS.
    """

    name = "builder"

    def __init__(self, context: ThemeContext, section_css: Optional[Dict[str, SectionCSSHandler]] = None):
        self.context = context
        self.hooks = context.hooks
        self.scripts = context.scripts

        self.section_css = SectionCSSRegistry({"banner": self.builder_banner_styles})
        for section_type, handler in (section_css or {}).items():
            self.section_css.register(section_type, handler)

    def hook(self):
        if self.is_hooked():
            return

        self.hooks.add_action("wp_enqueue_scripts", self.frontend_builder_scripts)
        self.hooks.add_action("make_style_loaded", self.builder_styles)

        self.context.mark_hooked(self.name)

    def is_hooked(self) -> bool:
        return self.context.is_hooked(self.name)

    def get_sections(self, post=None) -> Dict[str, Any]:
        """
        Section data for the post (default: the request's post), or an empty
        dict when it isn't a Builder page.
        """
        post = post if post is not None else self.context.post
        if post is None:
            return {}

        if not is_builder_page(post, self.hooks):
            return {}
        return get_section_data(post.id, post.meta_map(), self.hooks)

    def frontend_builder_scripts(self):
        # Only when dispatched from the enqueue hook
        if self.hooks.current_action() != "wp_enqueue_scripts":
            return

        sections = self.get_sections()
        if not sections:
            return

        for section_id, section_type in list_section_types(sections).items():
            if section_type == "banner":
                # Cycle2 drives the banner slider
                self.scripts.add_dependency(FRONTEND_SCRIPT, "cycle2", "script")
                if self.context.config.get("MAKE_SCRIPT_DEBUG"):
                    self.scripts.add_dependency(FRONTEND_SCRIPT, "cycle2-center", "script")
                    self.scripts.add_dependency(FRONTEND_SCRIPT, "cycle2-swipe", "script")

    def builder_styles(self, style):
        if self.hooks.current_action() != "make_style_loaded":
            return

        sections = self.get_sections()

        for section_id, data in sections.items():
            if not isinstance(data, dict) or "section-type" not in data:
                continue

            handler = self.section_css.get(data["section-type"])
            if handler is None:
                logger.debug("No CSS handler for section type %s", data["section-type"])
                continue

            handler(data, section_id, style)

    def builder_banner_styles(self, data: Mapping[str, Any], section_id: str, style):
        prefix = "builder-section-"
        slug = sanitize_title_with_dashes(data.get("id", section_id))
        html_id = self.hooks.apply_filters("make_section_html_id", prefix + slug, data)
        selector = f"#{html_id} .builder-banner-slide"

        responsive = data.get("responsive", "balanced")
        slider_height = absint(data.get("height"))
        if slider_height == 0:
            slider_height = BANNER_DEFAULT_HEIGHT
        slider_ratio = format_number(slider_height / BANNER_BASE_WIDTH * 100)

        if responsive == "aspect":
            style.css().add(
                selectors=[selector],
                declarations={"padding-bottom": f"{slider_ratio}%"},
            )
        else:
            style.css().add(
                selectors=[selector],
                declarations={"padding-bottom": f"{slider_height}px"},
            )
            style.css().add(
                selectors=[selector],
                declarations={"padding-bottom": f"{slider_ratio}%"},
                media=BANNER_MEDIA,
            )
