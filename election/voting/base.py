"""Abstract base class for election types."""

from abc import ABC, abstractmethod

from election.errors import ElectionError, ErrorKind
from election.models import Candidate, ElectionResult
from election.voting.validation import Check, run_checks


class Election(ABC):
    """Abstract base class for election types.

    An election is validated once, when it is constructed, against the
    ordered ``checks`` of its class; any violation raises ElectionError and
    no object is created. Types are registered via the
    @register_election_type decorator in election/voting/__init__.py.

    Counting mutates the ballots, so each election is counted at most once.
    """

    # Identifier used to request this election type in a payload
    key: str = ""
    # Whether ballots carry ranked preferences rather than a single vote
    ranked: bool = False
    checks: list[Check] = []

    def __init__(self, ballots, candidates):
        ballots = list(ballots) if ballots is not None else None
        candidates = list(candidates) if candidates is not None else None
        run_checks(self.checks, ballots, candidates)
        self._ballots = ballots
        self._candidates = candidates
        self._winner: Candidate | None = None
        self._result: ElectionResult | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this election type."""
        pass

    @property
    def ballots(self) -> list:
        return list(self._ballots)

    @property
    def candidates(self) -> list[Candidate]:
        """Candidates still standing; reduced by a ranked-choice count."""
        return list(self._candidates)

    @property
    def winner(self) -> Candidate | None:
        """The elected candidate, or None before counting."""
        return self._winner

    @property
    def counted(self) -> bool:
        return self._result is not None

    @abstractmethod
    def count_votes(self) -> None:
        """Count the ballots and record the winner.

        Raises:
            ElectionError: If the election has already been counted.
        """
        pass

    def result(self) -> ElectionResult:
        """Return the outcome of the count.

        Raises:
            ElectionError: If the election has not been counted yet.
        """
        if self._result is None:
            raise ElectionError(ErrorKind.NOT_COUNTED,
                                f"{self.name} has not been counted yet")
        return self._result

    def _check_not_counted(self) -> None:
        if self._result is not None:
            raise ElectionError(
                ErrorKind.ALREADY_COUNTED,
                f"{self.name} has already been counted; build a new election to recount",
            )
