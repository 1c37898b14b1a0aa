"""Exceptions raised by humanized."""
from __future__ import annotations


class MagnitudeTableError(ValueError):
    """A magnitude table breaks one of its invariants.

    Raised for an empty table, thresholds that are not strictly ascending,
    or a divisor that is not a positive duration.
    """
