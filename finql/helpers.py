"""Small helpers that belong to no other module."""

from __future__ import annotations


def some_equal(opt: str | None, s: str) -> bool:
    """True if `opt` is set and equal to `s`."""
    return opt is not None and opt == s