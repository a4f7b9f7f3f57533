"""Typed data model shared by the calculator, the renderer and the loaders.

All values are immutable. Genre tags on ``Play`` are kept exactly as they
arrive from the catalog; they are only resolved to a ``Genre`` when a
performance is priced, so an unrecognised tag fails at that point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from .errors import UnknownGenreError


class Genre(str, Enum):
    """Closed set of genres the pricing rules know about."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_tag(cls, tag: str) -> "Genre":
        """Resolve an external genre tag, raising ``UnknownGenreError`` if unrecognised."""
        try:
            return cls(tag)
        except ValueError:
            raise UnknownGenreError(tag) from None


@dataclass(frozen=True)
class Play:
    name: str
    type: str

    @property
    def genre(self) -> Genre:
        return Genre.from_tag(self.type)


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable but always store a tuple
        object.__setattr__(self, "performances", tuple(self.performances))


PlayCatalog = Mapping[str, Play]


@dataclass(frozen=True)
class StatementLine:
    """Computed figures for one performance on a statement."""

    play_name: str
    amount: int
    audience: int
    credits: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "play": self.play_name,
            "amount": self.amount,
            "audience": self.audience,
            "credits": self.credits,
        }


@dataclass(frozen=True)
class StatementData:
    """Everything a statement shows, before formatting.

    Invariant:
    - ``total_amount`` is the sum of ``line.amount`` over ``lines``.
    - ``total_credits`` is the sum of ``line.credits`` over ``lines``.
    """

    customer: str
    lines: Tuple[StatementLine, ...] = field(default_factory=tuple)

    @property
    def total_amount(self) -> int:
        return sum(line.amount for line in self.lines)

    @property
    def total_credits(self) -> int:
        return sum(line.credits for line in self.lines)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "customer": self.customer,
            "lines": [line.as_dict() for line in self.lines],
            "total_amount": self.total_amount,
            "total_credits": self.total_credits,
        }
