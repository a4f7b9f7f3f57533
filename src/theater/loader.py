"""Read invoice and play catalog JSON documents from disk."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List

from .errors import InvoiceFormatError
from .schema import parse_invoices, parse_plays
from .types import Invoice, Play

logger = logging.getLogger(__name__)


def _read_json(path: str | os.PathLike[str]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise InvoiceFormatError(f"Cannot read {os.fspath(path)}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvoiceFormatError(f"Invalid JSON in {os.fspath(path)}: {exc}") from exc


def load_plays(path: str | os.PathLike[str]) -> Dict[str, Play]:
    plays = parse_plays(_read_json(path))
    logger.debug("Loaded %d plays from %s", len(plays), path)
    return plays


def load_invoices(path: str | os.PathLike[str]) -> List[Invoice]:
    invoices = parse_invoices(_read_json(path))
    logger.debug("Loaded %d invoices from %s", len(invoices), path)
    return invoices
