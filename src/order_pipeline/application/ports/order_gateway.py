from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Order


class OrderGateway(ABC):
    """Port for the external acceptance gateway.

    Contract:
    - accepts() is only called with an order that passed every
      submission precondition (id, customer, billing address, country)
    - accepts() returns a decision; it does not raise for a rejection
    - In a real system this is a blocking network call
    """

    @abstractmethod
    def accepts(self, order: Order) -> bool:
        """Return True if the gateway accepts the order for processing."""
