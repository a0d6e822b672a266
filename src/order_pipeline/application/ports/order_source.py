from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Order


class OrderSource(ABC):
    """Port for the upstream supplier of orders.

    Contract:
    - fetch_orders() returns orders in a stable, source-defined order
    - The returned list belongs to the caller; mutating it does not
      affect what later fetches return
    """

    @abstractmethod
    async def fetch_orders(self) -> list[Order]:
        """Fetch the current batch of orders."""
