from .access import AccessGate  # noqa: F401
from .redemption import LookupResult, LookupStatus, Outcome, RedemptionEngine, SubmitResult  # noqa: F401
from .results import ResultAggregator, Summary  # noqa: F401
from .settings import BallotSettings, ConfigError  # noqa: F401
from .store import StoreError, VoterRecord, VoterStatus, VoterStore  # noqa: F401
from .window import Phase, VoteWindow, classify  # noqa: F401
