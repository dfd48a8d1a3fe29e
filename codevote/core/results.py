from dataclasses import dataclass, field

from .store import VoterRecord, VoterStore


@dataclass(frozen=True)
class Summary:
    total: int
    voted_count: int
    not_voted_count: int
    tallies: dict[str, int] = field(default_factory=dict)
    voters: list[VoterRecord] = field(default_factory=list)
    voted: list[VoterRecord] = field(default_factory=list)
    not_voted: list[VoterRecord] = field(default_factory=list)


class ResultAggregator:
    def __init__(self, store: VoterStore):
        self.store = store

    def summarize(self) -> Summary:
        """
        Counts and roster partitions from one roster read, so the numbers
        always agree with the lists even while votes are coming in.
        """
        voters = self.store.list_all()

        tallies: dict[str, int] = {}
        voted, not_voted = [], []
        for v in voters:
            if v.used:
                voted.append(v)
                tallies[v.choice] = tallies.get(v.choice, 0) + 1
            else:
                not_voted.append(v)

        return Summary(
            total=len(voters),
            voted_count=len(voted),
            not_voted_count=len(voters) - len(voted),
            tallies=tallies,
            voters=voters,
            voted=voted,
            not_voted=not_voted,
        )
