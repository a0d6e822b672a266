"""Data Transfer Objects emitted by use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class TaxRunSummary:
    """Counters for one TaxCalculator.compute_taxes() batch.

    ``inspected`` counts every element visited, including None entries.
    ``skipped`` counts elements that were not meaningfully taxed.
    ``updated`` is the value compute_taxes() returned.
    """

    timestamp: datetime
    total: int
    inspected: int
    skipped: int
    updated: int

    def format_line(self) -> str:
        return (
            f"[{self.timestamp.isoformat()}] OrdersTotal={self.total}, "
            f"Inspected={self.inspected}, Skipped={self.skipped}"
        )
