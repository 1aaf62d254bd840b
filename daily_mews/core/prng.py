"""
Seeded pseudo-random numbers for day-stable selection.

The generator is Mulberry32: a 32-bit add/multiply/xor-shift mix. All
arithmetic is kept in unsigned 32 bits so the float stream matches other
Mulberry32 implementations bit for bit.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

_MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32x32-bit product."""
    return (a * b) & _MASK32


def mulberry32(seed: int) -> Callable[[], float]:
    """Return a generator function producing floats in [0, 1).

    Each call advances the state by one step, so two generators built from
    the same seed yield the same sequence for the same number of calls.

    Example:
        >>> rng = mulberry32(20240101)
        >>> rng()
        0.5047466824762523
    """
    state = seed & _MASK32

    def next_float() -> float:
        nonlocal state
        state = (state + _GOLDEN) & _MASK32
        t = _imul(state ^ (state >> 15), state | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    return next_float


def date_seed(moment: date | datetime) -> int:
    """Derive the YYYYMMDD integer seed for a calendar day.

    Pass a zone-aware datetime already converted to the publishing time zone;
    only its calendar date is used, never the time of day.
    """
    if isinstance(moment, datetime):
        moment = moment.date()
    return int(moment.strftime("%Y%m%d"))
