"""Vote window phases.

The window is the half-open interval ``[start, end)``. Instants are compared
as given; callers pass timezone-aware datetimes.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Phase(str, Enum):
    BEFORE_START = "BEFORE_START"
    OPEN = "OPEN"
    AFTER_END = "AFTER_END"


def classify(now: datetime, start: datetime, end: datetime) -> Phase:
    if now < start:
        return Phase.BEFORE_START
    if now < end:
        return Phase.OPEN
    return Phase.AFTER_END


@dataclass(frozen=True)
class VoteWindow:
    start: datetime
    end: datetime

    def phase(self, now: datetime) -> Phase:
        return classify(now, self.start, self.end)

    def is_open(self, now: datetime) -> bool:
        return self.phase(now) is Phase.OPEN
