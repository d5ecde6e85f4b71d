"""Worked answer to the optional-value exercise."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at ``time_of_day`` (0-23), or None for an invalid hour."""
    if time_of_day > 23 or time_of_day < 0:
        return None
    if time_of_day < 22:
        return 5
    return 0