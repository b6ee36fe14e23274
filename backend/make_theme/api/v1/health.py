from flask import current_app, jsonify
from make_theme.compatibility import resolve_mode
from . import v1_bp


@v1_bp.route("/health", methods=["GET"])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "make-theme",
        "compatibility_mode": resolve_mode(current_app.config.get("MAKE_COMPATIBILITY_MODE")),
        "plus": current_app.config.get("MAKE_PLUS_VERSION") is not None,
    })
