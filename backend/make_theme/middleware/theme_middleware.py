from flask import current_app, g
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from make_theme.context import ANONYMOUS, CurrentUser, PluginCapabilities, ThemeContext
from make_theme.extensions import db
from make_theme.models.theme_mod import ThemeMod
from make_theme.theme import Theme

CONFIG_PREFIX = "MAKE_"


def plugin_capabilities(app) -> PluginCapabilities:
    return PluginCapabilities(
        plus_version=app.config.get("MAKE_PLUS_VERSION"),
        yoast_breadcrumb=app.extensions.get("make_yoast_breadcrumb"),
        woocommerce=bool(app.config.get("MAKE_WOOCOMMERCE")),
    )


def register_yoast_breadcrumb(app, renderer):
    """
    Make the Yoast SEO breadcrumb renderer, (before, after) -> str,
    available to the theme.
    """
    app.extensions["make_yoast_breadcrumb"] = renderer


def stored_theme_mods():
    return {mod.name: mod.value for mod in db.session.query(ThemeMod).all()}


def current_user() -> CurrentUser:
    verify_jwt_in_request(optional=True)
    identity = get_jwt_identity()
    if identity is None:
        return ANONYMOUS
    return CurrentUser.from_claims(identity, get_jwt())


def build_theme(post=None, view="page", user=None) -> Theme:
    app = current_app._get_current_object()
    context = ThemeContext(
        config={k: v for k, v in app.config.items() if k.startswith(CONFIG_PREFIX)},
        capabilities=plugin_capabilities(app),
        user=user or ANONYMOUS,
        post=post,
        view=view,
    )
    return Theme(context, stored_theme_mods)


def get_theme(post=None, view="page") -> Theme:
    """
    The request's theme, built and loaded on first use. A later call with a
    post binds that post to the existing context.
    """
    theme = g.get("make_theme")
    if theme is None:
        theme = build_theme(post=post, view=view, user=current_user())
        g.make_theme = theme

    if post is not None:
        theme.context.post = post

    return theme.load()


def theme_middleware(app):
    @app.teardown_request
    def drop_theme(exc=None):
        # Hook registrations never outlive the request
        g.pop("make_theme", None)
