from flask import jsonify, g
from werkzeug.exceptions import HTTPException


def error_response(code: str, message: str, details=None, status=400, headers=None):
    response = jsonify({
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or None,
        },
        "request_id": getattr(g, "request_id", None),
    })
    response.status_code = status
    if headers:
        response.headers.update(headers)
    return response


def register_error_handlers(app):
    # Generic HTTP errors (405, 400 from abort(), ...)
    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        desc = e.description

        # If we pass structured error info via abort(description=dict)
        if isinstance(desc, dict):
            code = desc.get("code") or e.name.replace(" ", "_").upper()
            message = desc.get("message") or e.name
            details = desc.get("errors") or desc.get("details")
            return error_response(code, message, details, status=e.code or 400)

        return error_response(
            e.name.replace(" ", "_").upper(),
            desc or e.name,
            status=e.code or 400,
        )

    @app.errorhandler(404)
    def handle_404(_):
        return error_response("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(500)
    def handle_500(_):
        # Don't leak internals
        return error_response("INTERNAL_SERVER_ERROR", "An unexpected error occurred", status=500)
