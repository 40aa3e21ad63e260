"""Small helpers shared by the API modules."""

from collections.abc import Iterable


def exists_in_strings(value: str, values: Iterable[str]) -> bool:
    """Tell whether ``value`` is one of ``values``."""
    return value in values