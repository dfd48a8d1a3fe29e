import logging
import uuid
from flask import g, has_request_context, request
from flask.logging import default_handler

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s [%(request_id)s]: %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamps `request_id` on every record so handlers can format it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = getattr(g, "request_id", "-") if has_request_context() else "-"
        return True


def configure_logging(app):
    if not any(isinstance(f, RequestIdFilter) for f in default_handler.filters):
        default_handler.addFilter(RequestIdFilter())
    default_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))


def init_request_id(app):
    @app.before_request
    def _assign_request_id():
        # trust a caller-supplied id (proxy / load balancer), else mint one
        rid = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g.request_id = rid[:64]

    @app.after_request
    def _add_request_id_header(response):
        if hasattr(g, "request_id"):
            response.headers["X-Request-Id"] = g.request_id
        return response
