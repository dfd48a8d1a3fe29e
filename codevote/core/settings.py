from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .window import VoteWindow


class ConfigError(RuntimeError):
    """Raised at startup when the ballot configuration is unusable."""


def parse_instant(name: str, value: str | None) -> datetime:
    """
    Parse an RFC 3339 instant such as '2025-09-01T08:00:00+07:00' or
    '2025-09-01T01:00:00Z'. A UTC offset is mandatory.
    """
    s = (value or "").strip()
    if not s:
        raise ConfigError(f"{name} is required (RFC3339)")

    # Normalize Zulu
    if s.endswith("Z") or s.endswith("z"):
        s = s[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise ConfigError(f"invalid {name}: {value!r}") from e

    if dt.tzinfo is None:
        raise ConfigError(f"invalid {name}: {value!r} has no UTC offset")
    return dt


@dataclass(frozen=True)
class BallotSettings:
    window: VoteWindow
    admin_user: str = ""
    admin_pass: str = ""
    choices: tuple[str, ...] = ()

    def __repr__(self) -> str:
        # keep credentials out of logs and tracebacks
        return (
            f"BallotSettings(window={self.window!r}, admin_user={self.admin_user!r}, "
            f"admin_pass='***', choices={self.choices!r})"
        )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "BallotSettings":
        start = parse_instant("VOTE_START", config.get("VOTE_START"))
        end = parse_instant("VOTE_END", config.get("VOTE_END"))
        if end < start:
            raise ConfigError("VOTE_END must not be earlier than VOTE_START")

        return cls(
            window=VoteWindow(start=start, end=end),
            admin_user=config.get("ADMIN_USER") or "",
            admin_pass=config.get("ADMIN_PASS") or "",
            choices=tuple(config.get("VOTE_CHOICES") or ()),
        )
