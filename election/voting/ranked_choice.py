"""Ranked-choice (instant-runoff) election."""

import logging

from election.errors import ElectionError, ErrorKind
from election.models import Candidate, ElectionResult, RankedChoiceBallot
from election.voting import register_election_type
from election.voting.base import Election
from election.voting.round import RankedChoiceRound
from election.voting.validation import RANKED_CHOICE_CHECKS

logger = logging.getLogger(__name__)


@register_election_type
class RankedChoiceElection(Election):
    """Instant-runoff election over ranked ballots.

    Each round:
    1. Count first-preference votes among the remaining candidates
    2. If someone holds an absolute majority (>50%), they win
    3. Otherwise, eliminate the candidate with the fewest first preferences,
       remove them from every ballot and move everyone ranked below them up
    4. Repeat until a majority winner emerges

    A single remaining candidate always holds a majority, so the count ends
    after at most ``len(candidates) - 1`` eliminations.

    Tiebreakers follow candidate order: the earliest of the tied candidates
    wins a round, the latest of the tied candidates is eliminated.
    """

    key = "ranked_choice"
    ranked = True
    checks = RANKED_CHOICE_CHECKS

    def __init__(self, ballots: list[RankedChoiceBallot], candidates: list[Candidate]):
        super().__init__(ballots, candidates)
        self._round: RankedChoiceRound | None = None

    @property
    def name(self) -> str:
        return "Ranked Choice"

    @property
    def round(self) -> RankedChoiceRound | None:
        """The last round of the count, or None before counting."""
        return self._round

    def count_votes(self) -> None:
        self._check_not_counted()

        current = RankedChoiceRound(self._ballots, self._candidates)
        rounds = []
        while not current.won_by_absolute_majority:
            rounds.append(current.summary(eliminated=current.loser))
            current.next()
        rounds.append(current.summary())

        logger.info("%s won after %d round(s)", current.winner.id, current.number)
        self._round = current
        self._winner = current.winner
        self._candidates = list(current.candidates)
        self._result = ElectionResult(
            system_name=self.name,
            winner=current.winner,
            candidates=list(current.candidates),
            rounds=rounds,
        )

    def get_first_preference_votes(self, candidate: Candidate) -> int:
        """Get the candidate's first-preference votes in the final round.

        Raises:
            ElectionError: If the election has not been counted, or the
                candidate was eliminated or never stood.
        """
        if self._round is None:
            raise ElectionError(ErrorKind.NOT_COUNTED,
                                f"{self.name} has not been counted yet")
        return self._round.get_first_preference_votes(candidate)
