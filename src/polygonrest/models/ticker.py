"""Neat ticker model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ticker:
    """A ticker symbol and its display name.

    ``name`` falls back to ``symbol`` when not given.
    """

    symbol: str
    name: str | None = None

    def __post_init__(self) -> None:
        if self.name is None:
            object.__setattr__(self, "name", self.symbol)
