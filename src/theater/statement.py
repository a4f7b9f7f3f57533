"""Statement rendering for a customer invoice.

Pipeline: invoice + play catalog -> ``build_statement_data`` (pricing per
performance) -> ``format_statement`` -> text. ``render`` runs both steps.
The whole statement is assembled before anything is returned, so a lookup
or pricing failure never yields partial output.
"""

from __future__ import annotations

import logging
import os

from .config import DEFAULT_RATES, RateTable
from .errors import PlayNotFoundError
from .formatting import usd
from .pricing import performance_amount, performance_credits
from .types import Invoice, Performance, Play, PlayCatalog, StatementData, StatementLine

logger = logging.getLogger(__name__)

__all__ = ["StatementPrinter", "build_statement_data", "format_statement", "render"]


def _lookup_play(plays: PlayCatalog, performance: Performance) -> Play:
    try:
        return plays[performance.play_id]
    except KeyError:
        raise PlayNotFoundError(performance.play_id) from None


def build_statement_data(invoice: Invoice, plays: PlayCatalog, rates: RateTable = DEFAULT_RATES) -> StatementData:
    """Price every performance of ``invoice`` in order."""
    lines = []
    for performance in invoice.performances:
        play = _lookup_play(plays, performance)
        lines.append(
            StatementLine(
                play_name=play.name,
                amount=performance_amount(performance, play, rates),
                audience=performance.audience,
                credits=performance_credits(performance, play, rates),
            )
        )
    return StatementData(customer=invoice.customer, lines=tuple(lines))


def format_statement(data: StatementData, line_separator: str = os.linesep) -> str:
    rows = [f"Statement for {data.customer}"]
    for line in data.lines:
        rows.append(f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)")
    rows.append(f"Amount owed is {usd(data.total_amount)}")
    rows.append(f"You earned {data.total_credits} credits")
    return "".join(row + line_separator for row in rows)


def render(invoice: Invoice, plays: PlayCatalog, rates: RateTable = DEFAULT_RATES) -> str:
    """Return the formatted statement text for ``invoice``.

    Raises ``PlayNotFoundError`` for a performance whose play is missing from
    ``plays`` and ``UnknownGenreError`` for a play with an unrecognised genre.
    """
    logger.debug("Rendering statement for %s (%d performances)", invoice.customer, len(invoice.performances))
    return format_statement(build_statement_data(invoice, plays, rates))


class StatementPrinter:
    """Renders statements for one invoice against a fixed play catalog."""

    def __init__(self, invoice: Invoice, plays: PlayCatalog, rates: RateTable = DEFAULT_RATES):
        self.invoice = invoice
        self.plays = plays
        self.rates = rates

    def data(self) -> StatementData:
        return build_statement_data(self.invoice, self.plays, self.rates)

    def statement(self) -> str:
        return render(self.invoice, self.plays, self.rates)
