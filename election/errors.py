"""Error kinds raised while validating and counting elections."""

from enum import Enum


class ErrorKind(Enum):
    MISSING_BALLOTS = "missing_ballots"
    MISSING_CANDIDATES = "missing_candidates"
    DUPLICATE_CANDIDATE = "duplicate_candidate"
    EMPTY_BALLOT = "empty_ballot"
    DUPLICATE_VOTER = "duplicate_voter"
    UNKNOWN_CANDIDATE = "unknown_candidate"
    INCONSISTENT_BALLOT_LENGTH = "inconsistent_ballot_length"
    DUPLICATE_RANK = "duplicate_rank"
    RANK_OUT_OF_RANGE = "rank_out_of_range"
    INCONSISTENT_VOTER = "inconsistent_voter"
    DUPLICATE_CANDIDATE_ON_BALLOT = "duplicate_candidate_on_ballot"
    CANDIDATE_NOT_IN_ROUND = "candidate_not_in_round"
    CANDIDATE_NOT_ON_BALLOT = "candidate_not_on_ballot"
    NOT_COUNTED = "not_counted"
    ALREADY_COUNTED = "already_counted"
    MALFORMED_PAYLOAD = "malformed_payload"


class ElectionError(ValueError):
    """Raised when election input is malformed or an election is misused.

    Only the first problem found is reported; callers fix the input and
    build a new election.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
