"""Build elections from JSON-like payloads.

A payload looks like::

    {
        "candidates": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}],
        "ballots": [
            {"voter": {"id": 1, "name": "Voter 1"},
             "votes": [{"candidate": 1, "rank": 1}, {"candidate": 2, "rank": 2}]}
        ]
    }

Plurality ballots carry exactly one vote; their ranks are ignored. Structural
rules (one ballot per voter, dense ranks, ...) are left to the election itself.
"""

import json
from typing import Any

from election.errors import ElectionError, ErrorKind
from election.models import (
    Candidate,
    RankedChoiceBallot,
    RankedChoiceVote,
    SimpleBallot,
    SimpleVote,
    Voter,
)
from election.voting import get_election_type
from election.voting import plurality  # noqa: F401
from election.voting import ranked_choice  # noqa: F401
from election.voting.base import Election


def parse_payload(content: bytes) -> dict[str, Any]:
    """Decode JSON bytes into a payload mapping.

    Raises:
        ElectionError: If the content is not a JSON object.
    """
    try:
        payload = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ElectionError(ErrorKind.MALFORMED_PAYLOAD, f"Invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ElectionError(ErrorKind.MALFORMED_PAYLOAD,
                            "Election payload must be a JSON object")
    return payload


def load_election(payload: dict[str, Any], method: str) -> Election:
    """Build and validate an election of the given type from a payload.

    Args:
        payload: Mapping with "candidates" and "ballots" lists
        method: Key of a registered election type, e.g. "ranked_choice"

    Raises:
        ElectionError: If the payload is malformed or the election fails
            validation.
    """
    election_class = get_election_type(method)
    if election_class is None:
        raise ElectionError(ErrorKind.MALFORMED_PAYLOAD,
                            f"Unknown election type: {method!r}")

    candidates = [_load_person(Candidate, c, "candidate") for c in _list(payload, "candidates")]
    by_id = {c.id: c for c in candidates}

    ballots = []
    for i, entry in enumerate(_list(payload, "ballots")):
        if not isinstance(entry, dict):
            _malformed(f"Ballot {i} must be an object")
        voter = _load_person(Voter, entry.get("voter"), "voter")
        votes = _list(entry, "votes", f"ballot {i}")

        if election_class.ranked:
            ballots.append(RankedChoiceBallot(
                RankedChoiceVote(voter, _resolve(by_id, vote), _rank(vote))
                for vote in votes
            ))
        else:
            if len(votes) != 1:
                _malformed(f"Plurality ballot {i} must carry exactly one vote")
            ballots.append(SimpleBallot(SimpleVote(voter, _resolve(by_id, votes[0]))))

    return election_class(ballots, candidates)


def _malformed(message: str):
    raise ElectionError(ErrorKind.MALFORMED_PAYLOAD, message)


def _list(data: dict, key: str, where: str = "payload") -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        _malformed(f"'{key}' in {where} must be a list")
    return value


def _load_person(cls, data, what: str):
    if not isinstance(data, dict) or "id" not in data:
        _malformed(f"Each {what} must be an object with an 'id'")
    person_id = _id(data["id"], what)
    return cls(id=person_id, name=str(data.get("name", person_id)))


def _id(value, what: str):
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        _malformed(f"Each {what} id must be a string or an integer, got {value!r}")
    return value


def _resolve(by_id: dict, vote) -> Candidate:
    if not isinstance(vote, dict) or "candidate" not in vote:
        _malformed("Each vote must be an object with a 'candidate'")
    candidate_id = _id(vote["candidate"], "candidate")
    # Undeclared candidates get a placeholder so validation can name them
    return by_id.get(candidate_id, Candidate(id=candidate_id, name=str(candidate_id)))


def _rank(vote: dict) -> int:
    rank = vote.get("rank")
    if not isinstance(rank, int) or isinstance(rank, bool):
        _malformed(f"Vote for {vote['candidate']!r} needs an integer 'rank'")
    return rank
