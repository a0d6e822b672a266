from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_pipeline.domain.exceptions import InvalidArgumentError
from order_pipeline.domain.results import ProcessingResult
from order_pipeline.domain.validation import (
    ORDER_ID_REQUIRED,
    billing_details_violations,
    is_blank,
)

if TYPE_CHECKING:
    from order_pipeline.application.ports import OrderGateway
    from order_pipeline.domain.entities import Order

logger = logging.getLogger(__name__)

GATEWAY_REJECTED = "External gateway rejected the order."


class SubmitOrderUseCase:
    """Orchestrates the submission of a single order.

    Responsibilities:
    - Check the order id, customer, billing address and billing country,
      in that order
    - Ask the external gateway for a decision once every check passes
    - Fold the first failure (or success) into one ProcessingResult

    Business failures are returned, not raised. Only a None order, which
    breaks the call contract, raises. Callers who want an exception for
    a failed submission use ProcessingResult.raise_for_failure().
    """

    def __init__(self, gateway: OrderGateway) -> None:
        self._gateway = gateway

    def execute(self, order: Order | None) -> ProcessingResult:
        """Submit an order for processing.

        Args:
            order: The order to submit.

        Returns:
            ProcessingResult.ok() if accepted, otherwise a failed result
            whose reason names the first violated precondition or the
            gateway rejection.

        Raises:
            InvalidArgumentError: If order is None.
        """
        # Step 1: Contract check
        if order is None:
            raise InvalidArgumentError("order is required")

        # Step 2: Preconditions, first failure wins
        reason = self._first_precondition_failure(order)
        if reason is not None:
            logger.warning(f"Order {order.order_id!r} failed precondition: {reason}")
            return ProcessingResult.fail(reason)

        # Step 3: External gateway decision
        if not self._gateway.accepts(order):
            logger.warning(f"Order {order.order_id!r} rejected by gateway")
            return ProcessingResult.fail(GATEWAY_REJECTED)

        logger.info(f"Order {order.order_id!r} accepted")
        return ProcessingResult.ok()

    @staticmethod
    def _first_precondition_failure(order: Order) -> str | None:
        if is_blank(order.order_id):
            return ORDER_ID_REQUIRED

        violations = billing_details_violations(order.customer)
        return violations[0] if violations else None
