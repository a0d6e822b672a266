from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.application.dtos import TaxRunSummary


class TaxRunSink(ABC):
    """Port for the observability sink that receives tax run summaries.

    Contract:
    - record() is called exactly once per compute_taxes() batch, after
      every order has been processed
    - record() MUST NOT raise for a well-formed summary; the calculator
      does not guard the call
    """

    @abstractmethod
    def record(self, summary: TaxRunSummary) -> None:
        """Accept the summary of a finished tax batch."""
