"""
Code redemption.

`submit` is safe to call from many threads at once: the exactly-once
guarantee comes from `VoterStore.redeem`, a single conditional write, so the
engine keeps no locks and never retries. Every outcome is returned as a
`SubmitResult`; store failures become `Outcome.STORE_ERROR`.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable

from .store import StoreError, VoterStore
from .window import Phase, VoteWindow

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    SUCCESS = "SUCCESS"
    WINDOW_CLOSED = "WINDOW_CLOSED"
    INVALID_INPUT = "INVALID_INPUT"
    CODE_NOT_FOUND = "CODE_NOT_FOUND"
    ALREADY_USED = "ALREADY_USED"
    STORE_ERROR = "STORE_ERROR"


class LookupStatus(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    UNUSED = "UNUSED"
    USED = "USED"


@dataclass(frozen=True)
class SubmitResult:
    outcome: Outcome
    phase: Phase
    code: str = ""
    choice: str = ""
    # for INVALID_INPUT: which field was rejected ("code" or "choice")
    field: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    phase: Phase
    name: str | None = None


class RedemptionEngine:
    def __init__(self, store: VoterStore, window: VoteWindow, choices: Iterable[str] = ()):
        self.store = store
        self.window = window
        # empty means any non-blank choice is accepted
        self.choices = frozenset(choices)

    def submit(self, code: str | None, choice: str | None, now: datetime) -> SubmitResult:
        phase = self.window.phase(now)
        if phase is not Phase.OPEN:
            return SubmitResult(Outcome.WINDOW_CLOSED, phase)

        code = (code or "").strip()
        choice = (choice or "").strip()
        if not code:
            return SubmitResult(Outcome.INVALID_INPUT, phase, choice=choice, field="code")
        if not choice or (self.choices and choice not in self.choices):
            return SubmitResult(Outcome.INVALID_INPUT, phase, code=code, choice=choice, field="choice")

        try:
            rows = self.store.redeem(code, choice, now)
        except StoreError:
            # The write may or may not have committed; callers re-check with lookup().
            logger.exception("Redeem failed")
            return SubmitResult(Outcome.STORE_ERROR, phase, code=code, choice=choice)

        if rows == 1:
            return SubmitResult(Outcome.SUCCESS, phase, code=code, choice=choice)

        try:
            found = self.store.exists(code)
        except StoreError:
            logger.exception("Existence check after failed redeem")
            return SubmitResult(Outcome.STORE_ERROR, phase, code=code, choice=choice)

        outcome = Outcome.ALREADY_USED if found else Outcome.CODE_NOT_FOUND
        return SubmitResult(outcome, phase, code=code, choice=choice)

    def lookup(self, code: str | None, now: datetime) -> LookupResult:
        """Raises StoreError if the roster cannot be read."""
        phase = self.window.phase(now)
        code = (code or "").strip()
        if not code:
            return LookupResult(LookupStatus.NOT_FOUND, phase)

        status = self.store.lookup(code)
        if status is None:
            return LookupResult(LookupStatus.NOT_FOUND, phase)
        if status.used:
            return LookupResult(LookupStatus.USED, phase, name=status.name)
        return LookupResult(LookupStatus.UNUSED, phase, name=status.name)
