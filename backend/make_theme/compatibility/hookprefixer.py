# make_theme/compatibility/hookprefixer.py
from functools import partial

LEGACY_PREFIX = "ttfmake_"
CURRENT_PREFIX = "make_"

# Hooks renamed from the ttfmake_ prefix in 1.5.0
PREFIXED_HOOKS = (
    "make_get_section_data",
    "make_is_builder_page",
    "make_section_html_id",
    "make_get_google_font_uri",
    "make_font_google_stack",
    "make_is_plus",
)


def legacy_name(hook):
    return LEGACY_PREFIX + hook[len(CURRENT_PREFIX):]


class HookPrefixer:
    """
    Keeps callbacks attached to the old ttfmake_ hook names working by
    running them from the current make_ hook.
    """

    name = "compatibility.hookprefixer"

    def __init__(self, context, compatibility, hooks=PREFIXED_HOOKS):
        self.context = context
        self.compatibility = compatibility
        self.prefixed_hooks = tuple(hooks)
        self.bridged = []

    def hook(self):
        if self.context.is_hooked(self.name):
            return

        for hook in self.prefixed_hooks:
            old = legacy_name(hook)
            if not self.context.hooks.has_filter(old):
                continue

            self.context.hooks.add_filter(hook, partial(self.forward, old))
            self.compatibility.deprecated_hook(old, "1.5.0", f"Use the {hook} hook instead.")
            self.bridged.append(old)

        self.context.mark_hooked(self.name)

    def forward(self, old, value, *args):
        return self.context.hooks.apply_filters(old, value, *args)
