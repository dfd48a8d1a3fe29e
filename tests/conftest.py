import base64
from datetime import datetime, timedelta, timezone

import pytest

from codevote import create_app
from codevote.extensions import db
from codevote.models import Voter

WIB = timezone(timedelta(hours=7))
VOTE_START = datetime(2025, 9, 1, 8, 0, tzinfo=WIB)
VOTE_END = datetime(2025, 9, 1, 18, 0, tzinfo=WIB)

ROSTER = [
    ("Ht67h", "Titus Prasetyo"),
    ("Ab12X", "Budi Santoso"),
    ("Z9yQ1", "Siti Nurhayati"),
]


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, hour: int, minute: int = 0) -> None:
        self.now = VOTE_START.replace(hour=hour, minute=minute)


class BaseTestConfig:
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"timeout": 30}}
    VOTE_START = "2025-09-01T08:00:00+07:00"
    VOTE_END = "2025-09-01T18:00:00+07:00"
    VOTE_CHOICES = ("setuju", "tidak setuju")
    ADMIN_USER = "admin"
    ADMIN_PASS = "rahasia"
    LOG_LEVEL = "DEBUG"


def build_app(tmp_path, clock, roster=ROSTER, **overrides):
    overrides.setdefault("SQLALCHEMY_DATABASE_URI", f"sqlite:///{tmp_path / 'votes.db'}")
    config = type("TestConfig", (BaseTestConfig,), overrides)
    app = create_app(config, clock=clock)
    with app.app_context():
        db.create_all()
        db.session.add_all([Voter(code=code, name=name) for code, name in roster])
        db.session.commit()
    return app


@pytest.fixture
def clock():
    return FrozenClock(VOTE_START.replace(hour=9))


@pytest.fixture
def app(tmp_path, clock):
    app = build_app(tmp_path, clock)
    yield app
    with app.app_context():
        db.engine.dispose()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def ballot_state(app):
    return app.extensions["ballot"]


@pytest.fixture
def client(app):
    return app.test_client()


def basic_auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def fetch_voter(code: str) -> Voter:
    return db.session.execute(db.select(Voter).filter_by(code=code)).scalar_one()
