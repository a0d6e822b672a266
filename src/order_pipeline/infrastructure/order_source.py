from __future__ import annotations

import asyncio
import copy
from decimal import Decimal
from typing import TYPE_CHECKING

from order_pipeline.application.ports import OrderSource
from order_pipeline.domain.entities import Order

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_LATENCY_SECONDS = 0.05


def demo_orders() -> list[Order]:
    """The fixed batch served by the demo order source."""
    return [
        Order(order_id="A-1001", subtotal=Decimal("120.00")),
        Order(order_id="A-1002", subtotal=Decimal("85.00")),
        Order(order_id="A-1003", subtotal=Decimal("210.00")),
    ]


class InMemoryOrderSource(OrderSource):
    """Order source serving a fixed list after a simulated network delay.

    Implementation notes:
    - Sleeps for latency_seconds before every fetch (0 disables the delay)
    - Returns deep copies, so tax computed on a fetched batch does not
      leak back into the source
    """

    def __init__(
        self,
        orders: Iterable[Order] | None = None,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
    ) -> None:
        if latency_seconds < 0:
            raise ValueError(f"latency_seconds must not be negative, got {latency_seconds}")
        self._orders = list(orders) if orders is not None else demo_orders()
        self._latency_seconds = latency_seconds

    async def fetch_orders(self) -> list[Order]:
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)
        return copy.deepcopy(self._orders)
