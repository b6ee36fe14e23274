from flask import jsonify
from make_theme.compatibility import MODES
from make_theme.middleware.theme_middleware import get_theme
from . import v1_bp


@v1_bp.route("/compatibility", methods=["GET"])
def compatibility_mode():
    theme = get_theme()
    compat = theme.compatibility

    return jsonify({
        "mode": compat.get_mode(),
        "settings": compat.get_mode_settings().to_dict(),
        "deprecated_loaded": list(compat.loaded_versions),
        "modules": sorted(compat.modules),
        "available_modes": list(MODES),
    })
