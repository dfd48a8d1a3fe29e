from sqlalchemy import false
from ..extensions import db


class Voter(db.Model):
    __tablename__ = "voters"

    # insertion order; tie-breaker for roster listings
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # Opaque access code, assigned out-of-band (case-sensitive)
    code = db.Column(db.Text, nullable=False, unique=True)
    name = db.Column(db.Text, nullable=False)

    # used / used_at / choice flip together, exactly once
    used = db.Column(db.Boolean, nullable=False, default=False, server_default=false())
    used_at = db.Column(db.DateTime(timezone=True), nullable=True)
    choice = db.Column("vote_choice", db.Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Voter id={self.id} used={self.used}>"
