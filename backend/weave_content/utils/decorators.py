from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from weave_content.extensions import db
from weave_content.models.user import User


def load_current_user(fn):
    """Attach the authenticated, active user to `g.current_user`."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        user = db.session.get(User, get_jwt_identity())

        if user is None or not user.is_active:
            return jsonify({"error": "Unauthorized"}), 401

        g.current_user = user
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        @load_current_user
        def wrapper(*args, **kwargs):
            if get_jwt().get("role") not in allowed_roles:
                return jsonify({"error": "Forbidden"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def current_actor_id():
    user = getattr(g, "current_user", None)
    return user.id if user is not None else None
