"""Shared fixtures for election type tests."""

import pytest

from tests.conftest import make_candidates, make_voters, ranked_ballot


@pytest.fixture
def first_round_majority():
    """Dataset 1: 3 voters, 2 candidates, first preferences only.

    A: 2 first-preference votes (66.6%)
    B: 1 first-preference vote  (33.3%)

    A wins in round 1.
    """
    v1, v2, v3 = make_voters(3)
    a, b = make_candidates("A", "B")
    ballots = [
        ranked_ballot(v1, a),
        ranked_ballot(v2, a),
        ranked_ballot(v3, b),
    ]
    return ballots, [a, b]


@pytest.fixture
def no_first_round_majority():
    """Dataset 2: 8 voters, 4 candidates, two preferences each.

         1st  2nd
    V1    A    B
    V2    A    B
    V3    A    B
    V4    B    C
    V5    B    C
    V6    C    B
    V7    C    B
    V8    D    A

    Round 1: A=3, B=2, C=2, D=1. No majority, eliminate D.
    Round 2: A=4, B=2, C=2. No majority (50% is not enough). B and C tie
             for fewest; C is listed later, so C is eliminated.
    Round 3: A=4, B=4. B is listed later, so B is eliminated.
    Round 4: A=4, the only candidate left. A wins.
    """
    voters = make_voters(8)
    a, b, c, d = make_candidates("A", "B", "C", "D")
    rankings = [
        (a, b), (a, b), (a, b),
        (b, c), (b, c),
        (c, b), (c, b),
        (d, a),
    ]
    ballots = [ranked_ballot(voter, *ranking) for voter, ranking in zip(voters, rankings)]
    return ballots, [a, b, c, d]
