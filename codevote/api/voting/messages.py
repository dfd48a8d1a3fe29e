"""User-facing texts (Indonesian) for the voting page and vote API."""
from ...core.redemption import LookupResult, LookupStatus, Outcome, SubmitResult
from ...core.window import Phase

BEFORE_START = "Pemilihan belum dimulai, tunggu sampai waktu pembukaan."
AFTER_END = "Pemilihan ditutup."
CODE_NOT_FOUND = "Kode tidak ditemukan!"
THANK_YOU = "Terima kasih telah memilih."
GREETING = "Selamat, {name}! Silakan pilih."


def status_message(result: LookupResult, has_code: bool = True) -> str | None:
    """
    Window phase sets the baseline message; facts about the code override it,
    except the greeting, which only shows while voting is open.
    """
    message = None
    if result.phase is Phase.BEFORE_START:
        message = BEFORE_START
    elif result.phase is Phase.AFTER_END:
        message = AFTER_END

    if not has_code:
        return message

    if result.status is LookupStatus.NOT_FOUND:
        return CODE_NOT_FOUND
    if result.status is LookupStatus.USED:
        return THANK_YOU
    if result.phase is Phase.OPEN:
        return GREETING.format(name=result.name)
    return message


SUBMIT_ERRORS = {
    # outcome -> (error code, http status)
    Outcome.WINDOW_CLOSED: ("WINDOW_CLOSED", 403),
    Outcome.INVALID_INPUT: ("INVALID_INPUT", 400),
    Outcome.CODE_NOT_FOUND: ("CODE_NOT_FOUND", 400),
    Outcome.ALREADY_USED: ("ALREADY_USED", 409),
    Outcome.STORE_ERROR: ("STORE_ERROR", 500),
}


def submit_message(result: SubmitResult) -> str:
    if result.outcome is Outcome.SUCCESS:
        return THANK_YOU
    if result.outcome is Outcome.WINDOW_CLOSED:
        if result.phase is Phase.BEFORE_START:
            return "pemilihan belum dimulai"
        return "pemilihan sudah ditutup"
    if result.outcome is Outcome.INVALID_INPUT:
        if result.field == "code":
            return "kode diperlukan"
        if result.choice:
            return "pilihan tidak valid"
        return "pilihan diperlukan"
    if result.outcome is Outcome.CODE_NOT_FOUND:
        return "kode tidak ditemukan"
    if result.outcome is Outcome.ALREADY_USED:
        return "kode sudah digunakan"
    return "db error"
