from typing import Optional, Dict, Any
from flask import current_app, request


def _client_address() -> Optional[str]:
    return request.headers.get("X-Forwarded-For", request.remote_addr)


def audit_event(action: str, details: Optional[Dict[str, Any]] = None) -> None:
    """
    Write one audit line to the application log.

    Access codes identify voters; pass only non-secret details here.
    """
    ua = request.headers.get("User-Agent")
    current_app.logger.info(
        "audit action=%s ip=%s ua=%s details=%s",
        action,
        _client_address(),
        ua[:255] if ua else None,
        details or {},
    )
