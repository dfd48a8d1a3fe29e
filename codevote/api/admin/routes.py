from flask import Blueprint, current_app
from flasgger import swag_from

from ...core.ballot import ballot
from ...core.store import StoreError
from ...errors import error_response
from ...schemas.results import SummarySchema
from ...utils.audit import audit_event
from ...utils.basic_auth import admin_required

admin_bp = Blueprint("admin", __name__)
summary_schema = SummarySchema()


@admin_bp.get("/summary")
@admin_required
@swag_from({
    "tags": ["Admin"],
    "summary": "Live tallies and voter roster (admin only)",
    "description": (
        "Counts and lists come from a single roster read:\n"
        "- voted voters ordered by vote time, then voters who have not voted yet.\n"
        "- tallies map each recorded choice to its count."
    ),
    "security": [{"BasicAuth": []}],
    "responses": {
        200: {"description": "Summary"},
        401: {"description": "Unauthorized"},
        500: {"description": "Server error"},
    },
})
def summary():
    try:
        result = ballot.aggregator.summarize()
    except StoreError:
        current_app.logger.exception("DB error building vote summary")
        return error_response("STORE_ERROR", "Failed to fetch results", status=500)

    audit_event(
        "ADMIN_SUMMARY_VIEWED",
        {"total": result.total, "voted": result.voted_count},
    )
    return summary_schema.dump(result), 200
