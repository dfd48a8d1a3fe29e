from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from flask import Flask, current_app

from .access import AccessGate
from .redemption import RedemptionEngine
from .results import ResultAggregator
from .settings import BallotSettings
from .store import VoterStore

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BallotState:
    settings: BallotSettings
    engine: RedemptionEngine
    aggregator: ResultAggregator
    gate: AccessGate
    clock: Clock


class Ballot:
    """
    Flask extension holding the voting services for an app.

    Settings are parsed once in init_app; a bad window configuration fails
    app creation instead of the first request.
    """

    extension_name = "ballot"

    def __init__(self, app: Flask | None = None, **kwargs):
        if app is not None:
            self.init_app(app, **kwargs)

    def init_app(self, app: Flask, session=None, clock: Clock | None = None) -> None:
        if session is None:
            from ..extensions import db
            session = db.session

        settings = BallotSettings.from_mapping(app.config)
        store = VoterStore(session)
        app.extensions[self.extension_name] = BallotState(
            settings=settings,
            engine=RedemptionEngine(store, settings.window, settings.choices),
            aggregator=ResultAggregator(store),
            gate=AccessGate(settings.admin_user, settings.admin_pass),
            clock=clock or utc_now,
        )

        app.logger.info(
            "Ballot window %s .. %s (%d choices)",
            settings.window.start.isoformat(),
            settings.window.end.isoformat(),
            len(settings.choices),
        )
        if not app.extensions[self.extension_name].gate.configured:
            app.logger.warning("ADMIN_USER/ADMIN_PASS not set; admin area is locked")

    @property
    def state(self) -> BallotState:
        return current_app.extensions[self.extension_name]

    @property
    def settings(self) -> BallotSettings:
        return self.state.settings

    @property
    def engine(self) -> RedemptionEngine:
        return self.state.engine

    @property
    def aggregator(self) -> ResultAggregator:
        return self.state.aggregator

    @property
    def gate(self) -> AccessGate:
        return self.state.gate

    def now(self) -> datetime:
        return self.state.clock()


ballot = Ballot()
