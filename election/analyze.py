"""Orchestrator: load a payload and count it under one or more election types."""

from dataclasses import dataclass
from typing import Any

from election.errors import ElectionError
from election.loader import load_election
from election.models import ElectionResult
from election.voting import get_all_election_types, get_election_type


@dataclass
class AnalysisResult:
    """Outcomes of every requested election type for one payload."""
    results: list[ElectionResult | dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "results": [
                r.to_dict() if isinstance(r, ElectionResult) else r
                for r in self.results
            ],
        }


class AnalysisError(Exception):
    """Error during election analysis."""
    pass


def analyze_election(payload: dict[str, Any], methods: list[str] | None = None) -> AnalysisResult:
    """Count a payload under each requested election type.

    Args:
        payload: Mapping with "candidates" and "ballots" (see election.loader)
        methods: Election type keys to run; every registered type if None

    Returns:
        AnalysisResult with one entry per election type, in request order.
        A type whose validation fails contributes an error entry instead of
        failing the whole analysis.

    Raises:
        AnalysisError: If a requested election type is unknown
    """
    if methods is None:
        election_classes = get_all_election_types()
    else:
        election_classes = []
        for method in methods:
            election_class = get_election_type(method)
            if election_class is None:
                raise AnalysisError(f"Unknown election type: {method!r}")
            election_classes.append(election_class)

    results = []
    for election_class in election_classes:
        try:
            election = load_election(payload, election_class.key)
            election.count_votes()
            results.append(election.result())
        except ElectionError as e:
            # Include error in results rather than failing entirely
            results.append({
                "system_name": election_class.key,
                "error": str(e),
                "error_kind": e.kind.value,
            })

    return AnalysisResult(results=results)
