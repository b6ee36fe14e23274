from make_theme.hooks import HookRegistry
from .css import CSSCollector


class StyleManager:
    """
    Owns the request's inline CSS and announces itself on `make_style_loaded`
    so components can contribute rules.
    """

    def __init__(self, hooks: HookRegistry):
        self.hooks = hooks
        self._css = CSSCollector()
        self._loaded = False

    def css(self) -> CSSCollector:
        return self._css

    def load(self):
        if self._loaded:
            return
        self._loaded = True
        self.hooks.do_action("make_style_loaded", self)

    def is_loaded(self):
        return self._loaded

    def build(self) -> str:
        self.load()
        return self._css.build()
