"""Per-performance pricing and volume credits.

Every function here is pure: the result depends only on the genre, the
audience and the injected ``RateTable``. Amounts are integer cents.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from .config import DEFAULT_RATES, RateTable
from .types import Genre, Performance, Play

logger = logging.getLogger(__name__)

__all__ = ["amount_for", "volume_credits_for", "performance_amount", "performance_credits"]


def _tragedy_amount(audience: int, rates: RateTable) -> int:
    result = rates.tragedy_base
    if audience > rates.tragedy_threshold:
        result += rates.tragedy_over_rate * (audience - rates.tragedy_threshold)
    return result


def _comedy_amount(audience: int, rates: RateTable) -> int:
    result = rates.comedy_base
    if audience > rates.comedy_threshold:
        result += rates.comedy_over_flat + rates.comedy_over_rate * (audience - rates.comedy_threshold)
    result += rates.comedy_per_attendee * audience
    return result


_AMOUNT_RULES: Dict[Genre, Callable[[int, RateTable], int]] = {
    Genre.TRAGEDY: _tragedy_amount,
    Genre.COMEDY: _comedy_amount,
}


def amount_for(genre: Genre | str, audience: int, rates: RateTable = DEFAULT_RATES) -> int:
    """Return the amount owed in cents for one performance of ``genre``."""
    genre = Genre.from_tag(genre)
    return _AMOUNT_RULES[genre](audience, rates)


def volume_credits_for(genre: Genre | str, audience: int, rates: RateTable = DEFAULT_RATES) -> int:
    """Return the volume credits earned for one performance of ``genre``."""
    genre = Genre.from_tag(genre)
    result = max(audience - rates.base_credit_threshold, 0)
    if genre is Genre.COMEDY:
        result += audience // rates.comedy_extra_credit_divisor
    return result


def performance_amount(performance: Performance, play: Play, rates: RateTable = DEFAULT_RATES) -> int:
    amount = amount_for(play.genre, performance.audience, rates)
    logger.debug("Priced %s (%s, %d seats) at %d cents", play.name, play.type, performance.audience, amount)
    return amount


def performance_credits(performance: Performance, play: Play, rates: RateTable = DEFAULT_RATES) -> int:
    credits = volume_credits_for(play.genre, performance.audience, rates)
    logger.debug("Credited %s (%s, %d seats) with %d credits", play.name, play.type, performance.audience, credits)
    return credits
