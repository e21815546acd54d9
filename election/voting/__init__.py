"""Election types: plurality and ranked-choice."""

from .base import Election

# Election type registry - import types here to register them
_election_types: list[type[Election]] = []


def register_election_type(election_class: type[Election]) -> type[Election]:
    """Decorator to register an election type."""
    _election_types.append(election_class)
    return election_class


def get_all_election_types() -> list[type[Election]]:
    """Return all registered election classes."""
    return _election_types.copy()


def get_election_type(key: str) -> type[Election] | None:
    """Return the registered election class for a key, or None if unknown."""
    for election_class in _election_types:
        if election_class.key == key:
            return election_class
    return None
