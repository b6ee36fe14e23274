# make_theme/api/v1/admin.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from make_theme.extensions import db
from make_theme.middleware.theme_middleware import get_theme
from make_theme.models.post import Post
from make_theme.utils.decorators import capability_required, roles_required
from . import v1_bp


@v1_bp.route("/admin/plus", methods=["GET"])
@jwt_required()
@roles_required("admin")
def plus_status():
    """
    Make Plus status plus the upsell markup for one admin screen.
    """
    theme = get_theme()
    plus = theme.plus
    hooks = theme.hooks
    screen = request.args.get("screen", "dashboard")

    if screen == "customizer":
        theme.register_customizer()
        hooks.do_action("customize_controls_print_footer_scripts")
    elif screen == "builder":
        hooks.do_action("make_after_builder_menu")
        hooks.do_action("make_section_text_before_columns_select")
    elif screen == "edit":
        post_id = request.args.get("post_id")
        post = db.session.get(Post, post_id) if post_id else None
        post_type = post.post_type if post is not None else request.args.get("post_type", "page")
        hooks.do_action("post_submitbox_misc_actions", post_type)
        hooks.do_action("add_meta_boxes", [])
        hooks.do_action("edit_form_after_title", post)

    meta_boxes = [
        {
            "id": box["id"],
            "title": box["title"],
            "screen": box["screen"],
            "context": box["context"],
            "html": box["callback"](box["screen"].capitalize()),
        }
        for box in theme.context.meta_boxes
    ]

    return jsonify({
        "is_plus": plus.is_plus(),
        "version": plus.get_plus_version(),
        "link": plus.get_plus_link(),
        "body_class": hooks.apply_filters("admin_body_class", "").strip(),
        "html": theme.context.flush_output(),
        "meta_boxes": meta_boxes,
    })


@v1_bp.route("/admin/notices", methods=["GET"])
@jwt_required()
@roles_required("admin")
@capability_required("switch_themes")
def admin_notices():
    theme = get_theme()
    notices = theme.load_notices()
    screen = request.args.get("screen")

    return jsonify([
        n.to_dict() for n in notices.get_notices(screen=screen, user=theme.context.user)
    ])


@v1_bp.route("/admin/errors", methods=["GET"])
@jwt_required()
@roles_required("admin")
def theme_errors():
    theme = get_theme()
    errors = theme.context.errors

    return jsonify({
        "codes": errors.get_codes(),
        "errors": [e.to_dict() for e in errors.get_errors(request.args.get("code"))],
    })


@v1_bp.route("/admin/customizer", methods=["GET"])
@jwt_required()
@roles_required("admin")
def customizer_registrations():
    theme = get_theme()
    customizer = theme.register_customizer()

    return jsonify({
        **customizer.to_dict(),
        "theme_mods": {
            setting_id: {
                "default": definition.get("default"),
                "sanitize": definition.get("sanitize"),
                "value": theme.thememod.get_value(setting_id),
            }
            for setting_id, definition in theme.thememod.get_settings().items()
        },
    })


@v1_bp.route("/breadcrumb", methods=["GET"])
def breadcrumb():
    theme = get_theme(view=request.args.get("view", "page"))
    if theme.yoast is None:
        return jsonify({"html": ""})

    html = theme.yoast.maybe_render_breadcrumb(
        view=request.args.get("view", "page"),
        is_front_page=request.args.get("front_page") == "1",
        is_404=request.args.get("not_found") == "1",
    )
    return jsonify({"html": html})
