"""Numeric token parsing for conversion requests."""
from __future__ import annotations

import math

__all__ = ["parse_number"]


def parse_number(raw: str) -> float:
    """Parse ``raw`` as a finite floating point magnitude.

    Digit separators (``1_000``) and the ``nan``/``inf`` spellings are rejected.
    """

    candidate = raw.strip()
    if not candidate:
        raise ValueError("Cannot parse numeric value from an empty token")
    if "_" in candidate:
        raise ValueError(f"Invalid numeric value: {raw!r}")
    try:
        value = float(candidate)
    except ValueError as exc:
        raise ValueError(f"Invalid numeric value: {raw!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"Non-finite numeric value: {raw!r}")
    return value
