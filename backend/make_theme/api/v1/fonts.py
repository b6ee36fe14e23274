from flask import request, jsonify
from make_theme.middleware.theme_middleware import get_theme
from . import v1_bp


def _requested_fonts():
    fonts = request.args.getlist("family")
    if len(fonts) == 1 and "|" in fonts[0]:
        fonts = fonts[0].split("|")
    return [f for f in fonts if f]


def _requested_subsets():
    subsets = []
    for value in request.args.getlist("subset"):
        subsets.extend(s for s in value.split(",") if s)
    return subsets


@v1_bp.route("/fonts/google", methods=["GET"])
def list_google_fonts():
    source = get_theme().google_fonts

    return jsonify({
        "id": source.id,
        "label": source.get_label(),
        "priority": source.get_priority(),
        "choices": source.get_font_choices(),
        "subsets": source.get_subsets(),
    })


@v1_bp.route("/fonts/google/url", methods=["GET"])
def google_font_url():
    source = get_theme().google_fonts
    url = source.build_url(_requested_fonts(), _requested_subsets())

    return jsonify({"url": url})


@v1_bp.route("/fonts/google/loader", methods=["GET"])
def google_font_loader():
    source = get_theme().google_fonts
    return jsonify(source.build_loader_array(_requested_fonts(), _requested_subsets()))


@v1_bp.route("/fonts/google/stack", methods=["GET"])
def google_font_stack():
    source = get_theme().google_fonts
    font = request.args.get("font", "")
    default_stack = request.args.get("default", "sans-serif")

    return jsonify({
        "font": font,
        "stack": source.get_font_stack(font, default_stack),
    })
