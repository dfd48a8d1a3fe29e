"""
Persistence for the voter roster.

All writes go through `VoterStore.redeem`, a single conditional UPDATE. The
database decides which of several concurrent callers wins; nothing here
reads before writing.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple

from sqlalchemy import exists as sql_exists, select, update
from sqlalchemy.exc import SQLAlchemyError

from ..models.voter import Voter

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Opaque persistence failure; the SQLAlchemy error is chained as __cause__."""


class VoterStatus(NamedTuple):
    name: str
    used: bool


@dataclass(frozen=True)
class VoterRecord:
    code: str
    name: str
    used: bool
    used_at: datetime | None
    choice: str | None


def _to_record(row) -> VoterRecord:
    """Build a record from a scanned row, rejecting rows that break the used/used_at/choice invariant."""
    code, name, used, used_at, choice = row
    if not isinstance(code, str) or not isinstance(name, str):
        raise ValueError("code and name must be text")
    used = bool(used)
    if used != (used_at is not None) or used != (choice is not None):
        raise ValueError("used, used_at and choice disagree")
    return VoterRecord(code=code, name=name, used=used, used_at=used_at, choice=choice)


class VoterStore:
    def __init__(self, session):
        # a Flask-SQLAlchemy scoped session; resolves per app context
        self.session = session

    def lookup(self, code: str) -> VoterStatus | None:
        stmt = select(Voter.name, Voter.used).where(Voter.code == code)
        try:
            row = self.session.execute(stmt).first()
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("lookup failed") from e

        if row is None:
            return None
        return VoterStatus(name=row.name, used=bool(row.used))

    def redeem(self, code: str, choice: str, now: datetime) -> int:
        """
        Mark the code as used with the given choice, only if it is still unused.
        Returns the number of rows changed: 1 for the unique winner, else 0.
        """
        stmt = (
            update(Voter)
            .where(Voter.code == code, Voter.used.is_(False))
            .values(used=True, used_at=now, choice=choice)
            .execution_options(synchronize_session=False)
        )
        try:
            rows = self.session.execute(stmt).rowcount
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("redeem failed") from e
        return rows

    def exists(self, code: str) -> bool:
        stmt = select(sql_exists().where(Voter.code == code))
        try:
            found = self.session.execute(stmt).scalar()
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("exists check failed") from e
        return bool(found)

    def list_all(self) -> list[VoterRecord]:
        """
        Whole roster in one SELECT: voted first by used_at, then not-yet-voted,
        each tie broken by insertion order. Malformed rows are skipped.
        """
        stmt = (
            select(Voter.code, Voter.name, Voter.used, Voter.used_at, Voter.choice)
            .order_by(Voter.used_at.is_(None), Voter.used_at.asc(), Voter.id.asc())
        )
        try:
            rows = self.session.execute(stmt).all()
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("listing voters failed") from e

        records = []
        for row in rows:
            try:
                records.append(_to_record(row))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping malformed voter row: %s", e)
        return records
