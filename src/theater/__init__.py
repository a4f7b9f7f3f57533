"""Theater invoice pricing and statement rendering."""

__version__ = "1.0.0"

from .errors import InvoiceFormatError, PlayNotFoundError, TheaterError, UnknownGenreError  # noqa: E402
from .statement import StatementPrinter, build_statement_data, render  # noqa: E402
from .types import Genre, Invoice, Performance, Play  # noqa: E402

__all__ = [
    "__version__",
    "Genre",
    "Invoice",
    "InvoiceFormatError",
    "Performance",
    "Play",
    "PlayNotFoundError",
    "StatementPrinter",
    "TheaterError",
    "UnknownGenreError",
    "build_statement_data",
    "render",
]
