import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # project root (where wsgi.py is)
load_dotenv(BASE_DIR / ".env")


def _split_choices(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(c.strip() for c in raw.split(",") if c.strip())


def database_url(raw: str | None) -> str | None:
    """SQLAlchemy only knows the `postgresql` scheme; accept the common `postgres://` alias."""
    if raw and raw.startswith("postgres://"):
        return "postgresql://" + raw[len("postgres://"):]
    return raw


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = database_url(os.getenv("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_size": int(os.getenv("PG_MAX_CONNS", "20")),
        "pool_pre_ping": True,
    }

    # Voting window, RFC 3339 e.g. 2025-09-01T08:00:00+07:00
    VOTE_START = os.getenv("VOTE_START")
    VOTE_END = os.getenv("VOTE_END")
    VOTE_CHOICES = _split_choices(os.getenv("VOTE_CHOICES", "setuju,tidak setuju"))

    # Admin (HTTP Basic); empty values lock the admin area
    ADMIN_USER = os.getenv("ADMIN_USER", "")
    ADMIN_PASS = os.getenv("ADMIN_PASS", "")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "8080"))

    SWAGGER = {"title": "Code Vote API", "version": "1.0.0", "uiversion": 3}
