"""Tests for the plurality election."""

import pytest

from election.errors import ElectionError, ErrorKind
from election.voting import get_election_type
from election.voting.plurality import PluralityElection
from tests.conftest import make_candidates, make_voters, simple_ballot


class TestPluralityElection:
    def setup_method(self):
        self.voters = make_voters(5)
        self.a, self.b, self.c = make_candidates("A", "B", "C")

    def test_name(self):
        election = PluralityElection([simple_ballot(self.voters[0], self.a)], [self.a])
        assert election.name == "Plurality"

    def test_registered(self):
        assert get_election_type("plurality") is PluralityElection

    def test_most_votes_wins(self):
        v1, v2, v3 = self.voters[:3]
        ballots = [
            simple_ballot(v1, self.a),
            simple_ballot(v2, self.a),
            simple_ballot(v3, self.b),
        ]
        election = PluralityElection(ballots, [self.a, self.b])
        election.count_votes()
        assert election.winner == self.a
        assert election.get_votes(self.a) == 2
        assert election.get_votes(self.b) == 1

    def test_no_majority_needed(self):
        """A wins with 2 of 5 votes, tied with C but listed first."""
        picks = [self.a, self.a, self.b, self.c, self.c]
        ballots = [simple_ballot(v, c) for v, c in zip(self.voters, picks)]
        election = PluralityElection(ballots, [self.a, self.b, self.c])
        election.count_votes()
        assert election.winner == self.a
        summary = election.result().rounds[0]
        assert not summary.won_by_absolute_majority
        assert summary.loser == self.b

    def test_tie_goes_to_first_listed(self):
        v1, v2 = self.voters[:2]
        ballots = [simple_ballot(v1, self.b), simple_ballot(v2, self.c)]
        election = PluralityElection(ballots, [self.c, self.b])
        election.count_votes()
        assert election.winner == self.c

    def test_candidates_not_reduced(self):
        ballots = [simple_ballot(self.voters[0], self.a)]
        election = PluralityElection(ballots, [self.a, self.b, self.c])
        election.count_votes()
        assert election.candidates == [self.a, self.b, self.c]
        assert election.get_votes(self.c) == 0
        assert len(election.result().rounds) == 1

    def test_unknown_candidate_lookup(self):
        ballots = [simple_ballot(self.voters[0], self.a)]
        election = PluralityElection(ballots, [self.a])
        election.count_votes()
        with pytest.raises(ElectionError) as exc_info:
            election.get_votes(self.b)
        assert exc_info.value.kind is ErrorKind.CANDIDATE_NOT_IN_ROUND

    def test_lookup_before_counting(self):
        ballots = [simple_ballot(self.voters[0], self.a)]
        election = PluralityElection(ballots, [self.a])
        with pytest.raises(ElectionError) as exc_info:
            election.get_votes(self.a)
        assert exc_info.value.kind is ErrorKind.NOT_COUNTED

    def test_count_twice(self):
        ballots = [simple_ballot(self.voters[0], self.a)]
        election = PluralityElection(ballots, [self.a])
        election.count_votes()
        with pytest.raises(ElectionError) as exc_info:
            election.count_votes()
        assert exc_info.value.kind is ErrorKind.ALREADY_COUNTED
