"""Ordered fallback evaluation.

Several values on a page come from a chain of sources, e.g. the brand name
is the header display name, else the website name, else a literal. These
helpers evaluate such a chain left to right so the precedence reads in one
place.
"""

from typing import Any


def first_present(*candidates: Any) -> Any:
    """Return the first candidate that is not None (None if all are)."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def first_truthy(*candidates: Any) -> Any:
    """Return the first truthy candidate, else the last candidate.

    Examples:
        >>> first_truthy("", None, "en")
        'en'
        >>> first_truthy("", None)
    """
    for candidate in candidates:
        if candidate:
            return candidate
    return candidates[-1] if candidates else None
