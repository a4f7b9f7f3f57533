"""Currency formatting for statements.

The output matches a US-locale currency formatter (``$1,234.56``) without
touching the process locale, so the numeric core stays locale-independent.
"""

from __future__ import annotations

CENTS_PER_DOLLAR = 100


def usd(amount_in_cents: int) -> str:
    """Format an amount in cents as US dollars, e.g. ``123456 -> "$1,234.56"``."""
    sign = "-" if amount_in_cents < 0 else ""
    dollars, cents = divmod(abs(amount_in_cents), CENTS_PER_DOLLAR)
    return f"{sign}${dollars:,}.{cents:02d}"
