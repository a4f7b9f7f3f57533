"""Strict shape validation for invoice and play catalog JSON payloads.

Only document structure is checked here. Genre tags are passed through
untouched and resolved when a statement is priced.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .errors import InvoiceFormatError
from .types import Invoice, Performance, Play

_PLAY_ID_KEYS: tuple[str, ...] = ("playID", "playId", "play_id")


def _require_str(container: Dict[str, Any], key: str, where: str) -> str:
    if key not in container:
        raise InvoiceFormatError(f"{where} missing required field '{key}'")
    value = container[key]
    if not isinstance(value, str):
        actual = type(value).__name__
        raise InvoiceFormatError(f"Invalid {where} field '{key}': expected str, got {actual}")
    return value


def parse_plays(payload: Any) -> Dict[str, Play]:
    """Validate a ``{play_id: {"name": ..., "type": ...}}`` mapping."""

    if not isinstance(payload, dict):
        raise InvoiceFormatError("Play catalog must be a JSON object")

    plays: Dict[str, Play] = {}
    for play_id, entry in payload.items():
        where = f"play '{play_id}'"
        if not isinstance(entry, dict):
            actual = type(entry).__name__
            raise InvoiceFormatError(f"Invalid {where}: expected object, got {actual}")
        plays[play_id] = Play(name=_require_str(entry, "name", where), type=_require_str(entry, "type", where))
    return plays


def _parse_performance(entry: Any, where: str) -> Performance:
    if not isinstance(entry, dict):
        actual = type(entry).__name__
        raise InvoiceFormatError(f"Invalid {where}: expected object, got {actual}")

    key = next((candidate for candidate in _PLAY_ID_KEYS if candidate in entry), None)
    if key is None:
        raise InvoiceFormatError(f"{where} missing required field 'playID'")
    play_id = _require_str(entry, key, where)

    if "audience" not in entry:
        raise InvoiceFormatError(f"{where} missing required field 'audience'")
    audience = entry["audience"]
    if isinstance(audience, bool) or not isinstance(audience, int):
        actual = type(audience).__name__
        raise InvoiceFormatError(f"Invalid {where} field 'audience': expected int, got {actual}")

    return Performance(play_id=play_id, audience=audience)


def parse_invoice(payload: Any) -> Invoice:
    """Validate one ``{"customer": ..., "performances": [...]}`` object."""

    if not isinstance(payload, dict):
        raise InvoiceFormatError("Invoice must be a JSON object")

    customer = _require_str(payload, "customer", "invoice")
    where = f"invoice for '{customer}'"

    performances = payload.get("performances")
    if not isinstance(performances, list):
        actual = type(performances).__name__
        raise InvoiceFormatError(f"Invalid {where} field 'performances': expected list, got {actual}")

    return Invoice(
        customer=customer,
        performances=tuple(
            _parse_performance(entry, f"{where} performance #{index}") for index, entry in enumerate(performances)
        ),
    )


def parse_invoices(payload: Any) -> List[Invoice]:
    """Accept either a list of invoices or a single invoice object."""

    if isinstance(payload, dict):
        return [parse_invoice(payload)]
    if not isinstance(payload, list):
        actual = type(payload).__name__
        raise InvoiceFormatError(f"Invoices must be a JSON list or object, got {actual}")
    return [parse_invoice(entry) for entry in payload]
