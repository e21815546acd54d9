"""Structural checks run when an election is constructed.

Each check is a pair of an error kind and a function that inspects the
ballots and candidates, returning a description of the first violation it
finds or None. ``run_checks`` runs an ordered list of them and raises on the
first failure, so cheaper and more fundamental checks (existence, one ballot
per voter, known candidates) win over ballot-shape checks when input breaks
several rules at once.
"""

from typing import Callable

from election.errors import ElectionError, ErrorKind
from election.util import has_duplicates

Check = tuple[ErrorKind, Callable[[list, list], str | None]]


def run_checks(checks: list[Check], ballots, candidates) -> None:
    """Run checks in order, raising ElectionError for the first that fails."""
    for kind, check in checks:
        problem = check(ballots, candidates)
        if problem is not None:
            raise ElectionError(kind, problem)


def _missing_ballots(ballots, candidates):
    if not ballots:
        return "Election must have ballots"
    return None


def _missing_candidates(ballots, candidates):
    if not candidates:
        return "Election must have candidates"
    return None


def _duplicate_candidate(ballots, candidates):
    if has_duplicates(candidates):
        return "Candidate list names the same candidate more than once"
    return None


def _empty_ballot(ballots, candidates):
    for i, ballot in enumerate(ballots):
        if not ballot.votes:
            return f"Ballot {i} has no votes"
    return None


def _duplicate_voter(ballots, candidates):
    if has_duplicates(ballots, key=lambda ballot: ballot.voter):
        return "A voter cast more than one ballot"
    return None


def _unknown_candidate(ballots, candidates):
    known = set(candidates)
    for ballot in ballots:
        for vote in ballot.votes:
            if vote.candidate not in known:
                return f"Vote for unknown candidate {vote.candidate.id!r}"
    return None


def _inconsistent_ballot_length(ballots, candidates):
    lengths = {len(ballot.votes) for ballot in ballots}
    if len(lengths) > 1:
        return f"Ballots have differing numbers of votes: {sorted(lengths)}"
    return None


def _duplicate_rank(ballots, candidates):
    for ballot in ballots:
        if has_duplicates(ballot.votes, key=lambda vote: vote.rank):
            return f"Ballot of voter {ballot.voter.id!r} repeats a rank"
    return None


def _rank_out_of_range(ballots, candidates):
    for ballot in ballots:
        votes = ballot.votes
        for vote in votes:
            if not 1 <= vote.rank <= len(votes):
                return (
                    f"Ballot of voter {ballot.voter.id!r} has rank {vote.rank}, "
                    f"expected 1 to {len(votes)}"
                )
    return None


def _inconsistent_voter(ballots, candidates):
    for ballot in ballots:
        if len({vote.voter for vote in ballot.votes}) > 1:
            return f"Ballot of voter {ballot.voter.id!r} mixes votes of several voters"
    return None


def _duplicate_candidate_on_ballot(ballots, candidates):
    for ballot in ballots:
        if has_duplicates(ballot.votes, key=lambda vote: vote.candidate):
            return f"Ballot of voter {ballot.voter.id!r} names a candidate twice"
    return None


SIMPLE_CHECKS: list[Check] = [
    (ErrorKind.MISSING_BALLOTS, _missing_ballots),
    (ErrorKind.MISSING_CANDIDATES, _missing_candidates),
    (ErrorKind.DUPLICATE_CANDIDATE, _duplicate_candidate),
    (ErrorKind.DUPLICATE_VOTER, _duplicate_voter),
    (ErrorKind.UNKNOWN_CANDIDATE, _unknown_candidate),
]

RANKED_CHOICE_CHECKS: list[Check] = [
    (ErrorKind.MISSING_BALLOTS, _missing_ballots),
    (ErrorKind.MISSING_CANDIDATES, _missing_candidates),
    (ErrorKind.DUPLICATE_CANDIDATE, _duplicate_candidate),
    (ErrorKind.EMPTY_BALLOT, _empty_ballot),
    (ErrorKind.DUPLICATE_VOTER, _duplicate_voter),
    (ErrorKind.UNKNOWN_CANDIDATE, _unknown_candidate),
    (ErrorKind.INCONSISTENT_BALLOT_LENGTH, _inconsistent_ballot_length),
    (ErrorKind.DUPLICATE_RANK, _duplicate_rank),
    (ErrorKind.RANK_OUT_OF_RANGE, _rank_out_of_range),
    (ErrorKind.INCONSISTENT_VOTER, _inconsistent_voter),
    (ErrorKind.DUPLICATE_CANDIDATE_ON_BALLOT, _duplicate_candidate_on_ballot),
]
