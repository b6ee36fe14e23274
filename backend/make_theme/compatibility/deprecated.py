# make_theme/compatibility/deprecated.py
"""
Shims for functions removed from the public theme API.

Each shim publishes legacy callables on ``context.legacy``. Calling one
reports the deprecation and forwards to the current API.
"""
from functools import wraps


def _deprecated(compat, name, version, replacement, target):
    @wraps(target)
    def wrapper(*args, **kwargs):
        compat.deprecated_function(name, version, replacement)
        return target(*args, **kwargs)
    return wrapper


def load_1_5(context, compat, api):
    if api is None:
        return
    context.legacy.update({
        "ttfmake_is_plus": _deprecated(compat, "ttfmake_is_plus", "1.5.0", "make_is_plus", api.plus.is_plus),
        "ttfmake_get_plus_link": _deprecated(
            compat, "ttfmake_get_plus_link", "1.5.0", "Make()->plus()->get_plus_link", api.plus.get_plus_link
        ),
    })


def load_1_6(context, compat, api):
    if api is None:
        return
    context.legacy.update({
        "ttfmake_get_font_stack": _deprecated(
            compat, "ttfmake_get_font_stack", "1.6.0", "Make()->font()->get_font_stack", api.google_fonts.get_font_stack
        ),
        "ttfmake_get_google_fonts": _deprecated(
            compat, "ttfmake_get_google_fonts", "1.6.0", "Make()->font()->get_font_data", api.google_fonts.get_font_data
        ),
    })


def load_1_7(context, compat, api):
    if api is None:
        return
    fonts = api.google_fonts
    context.legacy.update({
        "ttfmake_get_google_font_uri": _deprecated(
            compat, "ttfmake_get_google_font_uri", "1.7.0", "Make()->font()->get_source('google')->build_url", fonts.build_url
        ),
        "ttfmake_get_google_font_subsets": _deprecated(
            compat, "ttfmake_get_google_font_subsets", "1.7.0", "Make()->font()->get_source('google')->get_subsets", fonts.get_subsets
        ),
        "ttfmake_sanitize_font_subset": _deprecated(
            compat, "ttfmake_sanitize_font_subset", "1.7.0", "Make()->font()->get_source('google')->sanitize_subset", fonts.sanitize_subset
        ),
        "ttfmake_choose_google_font_variants": _deprecated(
            compat, "ttfmake_choose_google_font_variants", "1.7.0", "make_font_google_variants", fonts.choose_font_variants
        ),
        "ttfmake_get_default": _deprecated(
            compat, "ttfmake_get_default", "1.7.0", "Make()->thememod()->get_default", api.thememod.get_default
        ),
    })


DEPRECATED_SHIMS = {
    "1.5": load_1_5,
    "1.6": load_1_6,
    "1.7": load_1_7,
}
