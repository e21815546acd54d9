"""Core data models for voters, candidates, ballots and election results."""

from dataclasses import dataclass, field, replace
from typing import Any, Hashable

from election.errors import ElectionError, ErrorKind


@dataclass(frozen=True)
class Voter:
    """Someone casting a ballot.

    Equality and hashing use ``id`` only; ``name`` is a display label.
    """
    id: Hashable
    name: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Candidate:
    """Someone standing for election.

    Two candidates may share a name but never an ``id`` within one election.
    """
    id: Hashable
    name: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class SimpleVote:
    """A single-choice vote, as cast in a plurality election."""
    voter: Voter
    candidate: Candidate


@dataclass(frozen=True)
class RankedChoiceVote:
    """A ranked vote. Rank 1 is the voter's first preference."""
    voter: Voter
    candidate: Candidate
    rank: int


class SimpleBallot:
    """A ballot carrying exactly one vote."""

    def __init__(self, vote: SimpleVote):
        self._votes = [vote]

    @property
    def votes(self) -> list[SimpleVote]:
        return list(self._votes)

    @property
    def voter(self) -> Voter:
        return self._votes[0].voter

    def __repr__(self) -> str:
        return f"SimpleBallot({self._votes[0]!r})"


class RankedChoiceBallot:
    """One voter's ranked preferences.

    Ranks are expected to form the dense range ``1..N``; the election checks
    this at construction time. ``remove`` keeps the ranks dense, so a ballot
    stays well-formed however many candidates are eliminated from it.
    """

    def __init__(self, votes):
        self._votes: list[RankedChoiceVote] = list(votes)

    @property
    def votes(self) -> list[RankedChoiceVote]:
        return list(self._votes)

    @property
    def voter(self) -> Voter | None:
        """Voter of the first vote, or None for a ballot with no votes."""
        return self._votes[0].voter if self._votes else None

    @property
    def first_preference(self) -> RankedChoiceVote | None:
        """The rank-1 vote, or None once the ballot is exhausted."""
        for vote in self._votes:
            if vote.rank == 1:
                return vote
        return None

    @property
    def exhausted(self) -> bool:
        return not self._votes

    def __len__(self) -> int:
        return len(self._votes)

    def __repr__(self) -> str:
        return f"RankedChoiceBallot({self._votes!r})"

    def has(self, candidate: Candidate) -> bool:
        """Check whether some vote on this ballot names the candidate. O(n)."""
        return any(vote.candidate == candidate for vote in self._votes)

    def remove(self, candidate: Candidate) -> None:
        """Remove the candidate's vote and close the gap in the ranks. O(n).

        Every remaining vote ranked below the removed one moves up by one, so
        removing rank 2 from ranks {1, 2, 3, 4} leaves {1, 2, 3}.

        Raises:
            ElectionError: If the candidate is not on this ballot.
        """
        removed_rank = None
        for vote in self._votes:
            if vote.candidate == candidate:
                removed_rank = vote.rank
                break
        if removed_rank is None:
            raise ElectionError(
                ErrorKind.CANDIDATE_NOT_ON_BALLOT,
                f"Candidate {candidate.id!r} is not on this ballot",
            )

        remaining = []
        for vote in self._votes:
            if vote.candidate == candidate:
                continue
            if vote.rank > removed_rank:
                vote = replace(vote, rank=vote.rank - 1)
            remaining.append(vote)
        self._votes = remaining


@dataclass(frozen=True)
class RoundSummary:
    """Snapshot of one counting round.

    Attributes:
        number: 1-indexed round number
        tally: First-preference votes per candidate, in canonical order
        winner: Candidate with the most first preferences this round
        loser: Candidate with the fewest first preferences this round
        won_by_absolute_majority: Whether the winner holds more than half
            of the first preferences cast this round
        eliminated: The candidate dropped after this round, or None if the
            count stopped here
    """
    number: int
    tally: dict[Candidate, int]
    winner: Candidate
    loser: Candidate
    won_by_absolute_majority: bool
    eliminated: Candidate | None = None

    @property
    def total_votes(self) -> int:
        return sum(self.tally.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "round": self.number,
            "votes": [
                {"candidate": c.to_dict(), "votes": votes}
                for c, votes in self.tally.items()
            ],
            "total_votes": self.total_votes,
            "winner": self.winner.to_dict(),
            "loser": self.loser.to_dict(),
            "won_by_absolute_majority": self.won_by_absolute_majority,
            "eliminated": self.eliminated.to_dict() if self.eliminated else None,
        }


@dataclass
class ElectionResult:
    """Outcome of a counted election.

    Attributes:
        system_name: Human-readable name of the election type
        winner: The elected candidate
        candidates: Candidates still standing when the count stopped
        rounds: One summary per counting round, in order
    """
    system_name: str
    winner: Candidate
    candidates: list[Candidate]
    rounds: list[RoundSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "system_name": self.system_name,
            "winner": self.winner.to_dict(),
            "candidates": [c.to_dict() for c in self.candidates],
            "rounds": [r.to_dict() for r in self.rounds],
        }
