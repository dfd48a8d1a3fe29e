from flask import Blueprint, request, current_app
from flasgger import swag_from

from ...core.ballot import ballot
from ...core.redemption import LookupStatus, Outcome
from ...core.store import StoreError
from ...core.window import Phase
from ...errors import error_response
from ...schemas.vote import VoteSubmitSchema, VoteStatusSchema, VoteReceiptSchema
from ...utils.audit import audit_event
from ...utils.validation import load_or_abort
from .messages import SUBMIT_ERRORS, status_message, submit_message

voting_bp = Blueprint("voting", __name__)
vote_submit_schema = VoteSubmitSchema()
vote_status_schema = VoteStatusSchema()
vote_receipt_schema = VoteReceiptSchema()


def _window_payload(phase: Phase) -> dict:
    window = ballot.settings.window
    return {"phase": phase.value, "start": window.start, "end": window.end}


@voting_bp.get("/status")
@voting_bp.get("/status/<path:code>")
@swag_from({
    "tags": ["Voting"],
    "summary": "Look up an access code and the voting window",
    "parameters": [
        {"in": "query", "name": "code", "required": False, "type": "string"},
    ],
    "responses": {200: {"description": "OK"}, 500: {"description": "Server error"}},
})
def vote_status(code=None):
    # query string wins over the path, like the voting page links (/?code=Ht67h)
    code = (request.args.get("code") or code or "").strip()

    try:
        result = ballot.engine.lookup(code, ballot.now())
    except StoreError:
        current_app.logger.exception("DB error while looking up code")
        return error_response("STORE_ERROR", "Failed to look up code", status=500)

    body = {
        "code": code,
        "status": result.status.value,
        "name": result.name,
        "can_vote": result.status is LookupStatus.UNUSED and result.phase is Phase.OPEN,
        "message": status_message(result, has_code=bool(code)),
        "window": _window_payload(result.phase),
        "choices": list(ballot.settings.choices),
    }
    return vote_status_schema.dump(body), 200


@voting_bp.post("/vote")
@swag_from({
    "tags": ["Voting"],
    "summary": "Redeem an access code with a choice",
    "parameters": [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "properties": {
                "code": {"type": "string", "example": "Ht67h"},
                "choice": {"type": "string", "example": "setuju"},
            },
            "required": ["code", "choice"],
        },
    }],
    "responses": {
        201: {"description": "Vote recorded"},
        400: {"description": "Invalid input / unknown code"},
        403: {"description": "Voting window closed"},
        409: {"description": "Code already used"},
        500: {"description": "Server error"},
    },
})
def submit_vote():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()
    payload = load_or_abort(vote_submit_schema, payload)

    result = ballot.engine.submit(payload["code"], payload["choice"], ballot.now())

    if result.outcome is Outcome.SUCCESS:
        audit_event("VOTE_SUBMITTED", {"choice": result.choice})
        receipt = {
            "success": True,
            "message": submit_message(result),
            "code": result.code,
            "choice": result.choice,
        }
        return vote_receipt_schema.dump(receipt), 201

    error_code, status = SUBMIT_ERRORS[result.outcome]
    if result.outcome is Outcome.STORE_ERROR:
        # the engine already logged the traceback
        current_app.logger.error("Vote submission failed with a store error")
    else:
        audit_event("VOTE_REJECTED", {"reason": error_code, "phase": result.phase.value})

    details = {"field": result.field} if result.field else None
    return error_response(error_code, submit_message(result), details, status=status)
