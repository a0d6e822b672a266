from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_pipeline.application.ports import TaxRunSink

if TYPE_CHECKING:
    from order_pipeline.application.dtos import TaxRunSummary

logger = logging.getLogger(__name__)


class LoggingTaxRunSink(TaxRunSink):
    """Writes each tax run summary line to a logger at INFO level."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def record(self, summary: TaxRunSummary) -> None:
        self._logger.info(summary.format_line())


class InMemoryTaxRunSink(TaxRunSink):
    """Keeps every recorded summary in memory, oldest first.

    Used by tests and by callers that want to inspect run counters
    after the fact.
    """

    def __init__(self) -> None:
        self._summaries: list[TaxRunSummary] = []

    @property
    def summaries(self) -> list[TaxRunSummary]:
        return list(self._summaries)

    @property
    def last(self) -> TaxRunSummary | None:
        return self._summaries[-1] if self._summaries else None

    def record(self, summary: TaxRunSummary) -> None:
        self._summaries.append(summary)
