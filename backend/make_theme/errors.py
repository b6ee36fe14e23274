from flask import jsonify
from werkzeug.exceptions import HTTPException
from make_theme.exceptions import ValidationError


def _error_response(name, message, status):
    response = jsonify({
        "error": name,
        "message": message
    })
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return _error_response("ValidationError", str(error), 400)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # abort() from the API (404 posts, 409 stale meta) answers in JSON too
        return _error_response(error.name, error.description, error.code)
