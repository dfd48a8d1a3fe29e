from .voter import Voter  # noqa: F401

# Import ALL models so SQLAlchemy registers them

__all__ = [
    "Voter",
]
