"""Small helpers shared by the election types."""

from typing import Callable, Hashable, Iterable


def has_duplicates(items: Iterable, key: Callable[..., Hashable] | None = None) -> bool:
    """Check whether any two items (or their keys) are equal. O(n)."""
    seen = set()
    for item in items:
        value = key(item) if key is not None else item
        if value in seen:
            return True
        seen.add(value)
    return False
