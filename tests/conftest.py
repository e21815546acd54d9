"""Shared test helpers."""

from faker import Faker

from election.models import (
    Candidate,
    RankedChoiceBallot,
    RankedChoiceVote,
    SimpleBallot,
    SimpleVote,
    Voter,
)

_fake = Faker()
Faker.seed(1234)


def make_voters(count: int) -> list[Voter]:
    """Build voters with ids 1..count and fake names."""
    return [Voter(i, _fake.name()) for i in range(1, count + 1)]


def make_candidates(*names: str) -> list[Candidate]:
    """Build candidates with ids 1..n, named as given."""
    return [Candidate(i, name) for i, name in enumerate(names, start=1)]


def ranked_ballot(voter: Voter, *candidates: Candidate) -> RankedChoiceBallot:
    """Build a ballot ranking the candidates in the order given (1st first)."""
    return RankedChoiceBallot(
        RankedChoiceVote(voter, candidate, rank)
        for rank, candidate in enumerate(candidates, start=1)
    )


def simple_ballot(voter: Voter, candidate: Candidate) -> SimpleBallot:
    return SimpleBallot(SimpleVote(voter, candidate))


def ranks_by_candidate(ballot: RankedChoiceBallot) -> dict[str, int]:
    """Map candidate name -> rank for a ballot."""
    return {vote.candidate.name: vote.rank for vote in ballot.votes}


def make_payload(rankings: list[list[str]], candidates: list[str]) -> dict:
    """Build a loader payload from per-voter rankings of candidate names.

    Candidate ids are their position in ``candidates`` (from 1); voter ids
    are their position in ``rankings`` (from 1).
    """
    ids = {name: i for i, name in enumerate(candidates, start=1)}
    return {
        "candidates": [{"id": ids[name], "name": name} for name in candidates],
        "ballots": [
            {
                "voter": {"id": voter_id, "name": f"Voter {voter_id}"},
                "votes": [
                    {"candidate": ids[name], "rank": rank}
                    for rank, name in enumerate(ranking, start=1)
                ],
            }
            for voter_id, ranking in enumerate(rankings, start=1)
        ],
    }
