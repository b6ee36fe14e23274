from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def capability_required(capability):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if capability not in (claims.get("caps") or []):
                return jsonify({
                    "error": f"Capability '{capability}' is required"
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
