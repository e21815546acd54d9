"""Plurality (first-past-the-post) election."""

from election.errors import ElectionError, ErrorKind
from election.models import Candidate, ElectionResult, RoundSummary, SimpleBallot
from election.voting import register_election_type
from election.voting.base import Election
from election.voting.validation import SIMPLE_CHECKS


@register_election_type
class PluralityElection(Election):
    """Single-choice election: the candidate with the most votes wins.

    Every ballot carries one vote, counted once. There are no elimination
    rounds, and a winner needs no majority. Ties go to the candidate listed
    first, matching the ranked-choice tiebreak.
    """

    key = "plurality"
    checks = SIMPLE_CHECKS

    def __init__(self, ballots: list[SimpleBallot], candidates: list[Candidate]):
        super().__init__(ballots, candidates)

    @property
    def name(self) -> str:
        return "Plurality"

    def count_votes(self) -> None:
        self._check_not_counted()

        votes = {candidate: 0 for candidate in self._candidates}
        for ballot in self._ballots:
            for vote in ballot.votes:
                votes[vote.candidate] += 1

        winner = max(self._candidates, key=votes.__getitem__)
        loser = min(reversed(self._candidates), key=votes.__getitem__)
        total = sum(votes.values())

        self._winner = winner
        self._result = ElectionResult(
            system_name=self.name,
            winner=winner,
            candidates=list(self._candidates),
            rounds=[RoundSummary(
                number=1,
                tally=votes,
                winner=winner,
                loser=loser,
                won_by_absolute_majority=2 * votes[winner] > total,
            )],
        )

    def get_votes(self, candidate: Candidate) -> int:
        """Get the candidate's vote count.

        Raises:
            ElectionError: If the election has not been counted, or the
                candidate did not stand.
        """
        tally = self.result().rounds[0].tally
        if candidate not in tally:
            raise ElectionError(
                ErrorKind.CANDIDATE_NOT_IN_ROUND,
                f"Candidate {candidate.id!r} did not stand in {self.name}",
            )
        return tally[candidate]
