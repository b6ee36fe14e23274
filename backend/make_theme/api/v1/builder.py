# make_theme/api/v1/builder.py
from flask import current_app, request, jsonify, Response
from flask_jwt_extended import jwt_required
from make_theme.builder.sections import SECTION_IDS_KEY, post_type_supports_builder
from make_theme.exceptions import ValidationError
from make_theme.extensions import db
from make_theme.middleware.theme_middleware import get_theme
from make_theme.models.base import utc_now
from make_theme.models.post import Post
from make_theme.models.post_meta import PostMeta
from make_theme.normalizers.post import normalize_post
from make_theme.utils.decorators import roles_required
from make_theme.utils.optimistic_lock import enforce_optimistic_lock, last_modified
from make_theme.utils.transaction import transactional
from . import v1_bp


def _get_post_or_404(post_id):
    return db.get_or_404(Post, post_id)


# ------------------------
# Posts
# ------------------------
@v1_bp.route("/posts", methods=["POST"])
@jwt_required()
@roles_required("admin", "editor")
def create_post():
    data = request.get_json(silent=True) or {}

    post = Post()
    post.title = data.get("title", "")
    post.post_type = data.get("post_type", "page")
    post.page_template = data.get("page_template")

    with transactional("post creation") as session:
        session.add(post)

    current_app.logger.info("Created %s %s", post.post_type, post.id)

    return jsonify({"id": post.id, "message": "Post created successfully"}), 201


@v1_bp.route("/posts/<post_id>", methods=["GET"])
def get_post(post_id):
    post = _get_post_or_404(post_id)
    theme = get_theme(post=post)

    data = normalize_post(post, sections=theme.builder.get_sections(post))
    # Whether the edit screen offers the Builder for this post type
    data["supports_builder"] = post_type_supports_builder(
        post.post_type, current_app.config.get("MAKE_BUILDER_POST_TYPES", ["page"])
    )

    response = jsonify(data)
    stamp = last_modified(post)
    if stamp:
        response.headers["Last-Modified"] = stamp
    return response


# ------------------------
# Sections
# ------------------------
@v1_bp.route("/posts/<post_id>/sections", methods=["GET"])
def list_sections(post_id):
    post = _get_post_or_404(post_id)
    theme = get_theme(post=post)

    return jsonify(normalize_post(post, sections=theme.builder.get_sections(post))["sections"])


@v1_bp.route("/posts/<post_id>/styles", methods=["GET"])
def section_styles(post_id):
    post = _get_post_or_404(post_id)
    theme = get_theme(post=post)

    return Response(theme.build_styles(), mimetype="text/css")


@v1_bp.route("/posts/<post_id>/scripts", methods=["GET"])
def section_scripts(post_id):
    post = _get_post_or_404(post_id)
    theme = get_theme(post=post)
    dependencies = theme.enqueue_scripts()

    return jsonify({
        "handle": "make-frontend",
        "dependencies": dependencies,
        "enqueued": theme.context.scripts.enqueued(),
    })


# ------------------------
# Post meta
# ------------------------
@v1_bp.route("/posts/<post_id>/meta", methods=["PUT"])
@jwt_required()
@roles_required("admin", "editor")
def update_meta(post_id):
    """
    Write raw post meta. A null value deletes the key.

    Body: {"meta": {"_ttfmake:<section>:<field>": value, ...}}
    """
    post = _get_post_or_404(post_id)

    enforce_optimistic_lock(post)

    data = request.get_json(silent=True) or {}
    meta = data.get("meta")
    if not isinstance(meta, dict):
        raise ValidationError("Body must contain a 'meta' object")

    for key in meta:
        if not key:
            raise ValidationError("Meta keys must be non-empty strings")

    ids = meta.get(SECTION_IDS_KEY)
    if ids is not None and not isinstance(ids, list):
        raise ValidationError(f"{SECTION_IDS_KEY} must be a list of section ids")

    with transactional(f"meta update for post {post.id}") as session:
        existing = session.query(PostMeta).filter(
            PostMeta.post_id == post.id,
            PostMeta.meta_key.in_(list(meta)),
        ).all()
        for row in existing:
            session.delete(row)

        for key, value in meta.items():
            if value is None:
                continue
            row = PostMeta()
            row.post_id = post.id
            row.meta_key = key
            row.meta_value = value
            session.add(row)

        post.updated_at = utc_now()

    db.session.refresh(post)

    return jsonify({
        "message": "Post meta updated successfully",
        "keys": sorted(meta),
        "updated_at": post.updated_at.isoformat(),
    }), 200, {"Last-Modified": last_modified(post)}
