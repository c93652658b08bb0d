"""Validation of PESEL identification numbers."""

from __future__ import annotations

PESEL_LENGTH = 11

_WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)
_DIGITS = frozenset("0123456789")


def check_pesel(pesel: str) -> bool:
    """Return True when ``pesel`` has eleven digits and a matching check digit."""
    if len(pesel) != PESEL_LENGTH or not _DIGITS.issuperset(pesel):
        return False
    digits = [int(char) for char in pesel]
    total = sum(digit * weight % 10 for digit, weight in zip(digits, _WEIGHTS))
    control = (10 - total % 10) % 10
    return control == digits[-1]