"""
Scalar fuzzy logic (Zadeh operators).

A fuzzy value is a real number between 0.0 (no truth) and 1.0 (full truth).
Inputs outside that range are accepted; every result is clamped back into it.
"""

from __future__ import annotations

import math

Fuzzy = float

FUZZY_FALSE: Fuzzy = 0.0
FUZZY_TRUE: Fuzzy = 1.0


def normalize(value: Fuzzy) -> Fuzzy:
    """
    Clamp a fuzzy value into [0.0, 1.0].

    Args:
        value: Any real number

    Returns:
        FUZZY_FALSE below the range or for NaN, FUZZY_TRUE above it,
        otherwise value
    """
    if value >= FUZZY_TRUE:
        return FUZZY_TRUE
    if value <= FUZZY_FALSE or math.isnan(value):
        return FUZZY_FALSE
    return value


clamp = normalize


def not_(value: Fuzzy) -> Fuzzy:
    """Fuzzy NOT: complement to FUZZY_TRUE."""
    return normalize(FUZZY_TRUE - value)


def and_(*values: Fuzzy) -> Fuzzy:
    """Fuzzy AND: minimum of the values, FUZZY_TRUE when called without any."""
    return normalize(min((FUZZY_TRUE, *values)))


def or_(*values: Fuzzy) -> Fuzzy:
    """Fuzzy OR: maximum of the values, FUZZY_FALSE when called without any."""
    return normalize(max((FUZZY_FALSE, *values)))
