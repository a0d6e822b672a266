from __future__ import annotations

from typing import TYPE_CHECKING

from order_pipeline.application.ports import OrderGateway

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Order

DEFAULT_REJECT_SUFFIX = "X"


class SuffixRejectingGateway(OrderGateway):
    """Deterministic stand-in for the external acceptance gateway.

    Rejects any order whose id ends with the configured suffix, compared
    case-insensitively, and accepts everything else. Gives tests and
    demos a repeatable way to trigger a gateway rejection.
    """

    def __init__(self, reject_suffix: str = DEFAULT_REJECT_SUFFIX) -> None:
        if not reject_suffix:
            raise ValueError("reject_suffix must not be empty")
        self._reject_suffix = reject_suffix.casefold()

    def accepts(self, order: Order) -> bool:
        order_id = (order.order_id or "").casefold()
        return not order_id.endswith(self._reject_suffix)
