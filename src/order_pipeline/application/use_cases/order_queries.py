from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from order_pipeline.application.ports import OrderSource


async def count_high_value_orders(source: OrderSource, min_subtotal: Decimal) -> int:
    """Count fetched orders whose subtotal is at least min_subtotal."""
    orders = await source.fetch_orders()
    return sum(1 for order in orders if order.subtotal >= min_subtotal)
