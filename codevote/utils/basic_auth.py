from functools import wraps
from flask import current_app, request

from ..core.ballot import ballot
from ..errors import error_response
from .audit import audit_event

REALM = "Admin Area"


def admin_required(fn):
    """
    Require HTTP Basic credentials matching ADMIN_USER / ADMIN_PASS.
    With either setting empty, every request is refused.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        auth = request.authorization
        username = auth.username if auth and auth.type == "basic" else None
        password = auth.password if auth and auth.type == "basic" else None

        if not ballot.gate.authorize(username, password):
            audit_event("ADMIN_AUTH_FAILED", {"path": request.path, "has_credentials": auth is not None})
            return error_response(
                "UNAUTHORIZED",
                "Unauthorized",
                status=401,
                headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
            )
        current_app.logger.debug("Admin access granted path=%s", request.path)
        return fn(*args, **kwargs)
    return wrapper
