"""Elimination round of a ranked-choice count."""

import logging

from election.errors import ElectionError, ErrorKind
from election.models import Candidate, RankedChoiceBallot, RoundSummary

logger = logging.getLogger(__name__)


class RankedChoiceRound:
    """Tally of first preferences among the candidates still standing.

    The round owns the ballots it is given: ``next()`` removes the loser from
    every ballot that ranks them. Candidates are kept in the order they were
    supplied, which settles ties: among candidates tied on the most first
    preferences the earliest wins, and among those tied on the fewest the
    latest loses.
    """

    def __init__(self, ballots: list[RankedChoiceBallot], candidates: list[Candidate]):
        if not candidates:
            raise ElectionError(ErrorKind.MISSING_CANDIDATES,
                                "A round needs at least one candidate")
        self._ballots = list(ballots)
        self._candidates = list(candidates)
        self._number = 1
        self._tally()

    @property
    def number(self) -> int:
        return self._number

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return tuple(self._candidates)

    @property
    def ballots(self) -> list[RankedChoiceBallot]:
        return list(self._ballots)

    @property
    def winner(self) -> Candidate:
        return self._winner

    @property
    def loser(self) -> Candidate:
        return self._loser

    @property
    def won_by_absolute_majority(self) -> bool:
        return self._won_by_absolute_majority

    @property
    def tally(self) -> dict[Candidate, int]:
        return dict(self._votes)

    @property
    def total_votes(self) -> int:
        return self._total_votes

    def get_first_preference_votes(self, candidate: Candidate) -> int:
        """Get the candidate's first-preference votes in this round.

        Raises:
            ElectionError: If the candidate is not part of this round.
        """
        try:
            return self._votes[candidate]
        except KeyError:
            raise ElectionError(
                ErrorKind.CANDIDATE_NOT_IN_ROUND,
                f"Candidate {candidate.id!r} is not part of round {self._number}",
            ) from None

    def summary(self, eliminated: Candidate | None = None) -> RoundSummary:
        return RoundSummary(
            number=self._number,
            tally=self.tally,
            winner=self._winner,
            loser=self._loser,
            won_by_absolute_majority=self._won_by_absolute_majority,
            eliminated=eliminated,
        )

    def next(self) -> None:
        """Eliminate this round's loser and recount.

        Does nothing once a candidate holds an absolute majority.
        """
        if self._won_by_absolute_majority:
            return

        loser = self._loser
        logger.info("round %d: eliminating %s", self._number, loser.id)
        self._candidates.remove(loser)
        for ballot in self._ballots:
            if ballot.has(loser):
                ballot.remove(loser)

        self._number += 1
        self._tally()

    def _tally(self) -> None:
        votes = {candidate: 0 for candidate in self._candidates}
        for ballot in self._ballots:
            vote = ballot.first_preference
            if vote is not None and vote.candidate in votes:
                votes[vote.candidate] += 1

        # max() keeps the first of equal items, so reversing the order for
        # min() makes the latest candidate lose ties.
        self._votes = votes
        self._total_votes = sum(votes.values())
        self._winner = max(self._candidates, key=votes.__getitem__)
        self._loser = min(reversed(self._candidates), key=votes.__getitem__)

        if len(self._candidates) == 1:
            self._won_by_absolute_majority = True
        else:
            self._won_by_absolute_majority = 2 * votes[self._winner] > self._total_votes

        logger.info("round %d: first preferences %s", self._number,
                    {c.id: v for c, v in votes.items()})
        if self._won_by_absolute_majority:
            logger.info("round %d: %s has an absolute majority (%d of %d)",
                        self._number, self._winner.id, votes[self._winner],
                        self._total_votes)
