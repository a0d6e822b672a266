from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from order_pipeline.application.dtos import TaxRunSummary
from order_pipeline.domain.exceptions import InvalidArgumentError, InvalidTaxRateError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from order_pipeline.application.ports import TaxRunSink, TimeProvider
    from order_pipeline.domain.entities import Order

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.0825")
CENT = Decimal("0.01")
ZERO = Decimal("0")


class TaxCalculator:
    """Computes tax for a batch of orders and reports what changed.

    Per-order policy, applied in index order:
    - None order or order without a customer: skipped, untouched
    - subtotal <= 0: tax set to 0, skipped
    - tax-exempt customer: tax set to 0, updated
    - otherwise: tax = round(max(subtotal - discount, 0) * rate, 2), with
      halves rounded away from zero and the result clamped at 0; counted
      as updated only if it differs from the order's current tax

    A bad order never aborts the rest of the batch. Recomputing an
    unchanged taxable order does not count as an update, so a second run
    over the same batch reports only tax-exempt orders.

    Known gap: the discount always reduces the taxable base. Neither
    Customer.is_tax_exempt_override_eligible nor
    Customer.discount_tax_policy is consulted.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        tax_run_sink: TaxRunSink,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
    ) -> None:
        if tax_rate < ZERO:
            raise InvalidTaxRateError(f"Tax rate must not be negative, got {tax_rate}")

        self._time_provider = time_provider
        self._tax_run_sink = tax_run_sink
        self._tax_rate = tax_rate

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    def compute_taxes(self, orders: Sequence[Order | None] | None) -> int:
        """Compute tax for each order and return the number of orders updated.

        Args:
            orders: The batch to process. Elements may be None.

        Returns:
            How many orders had their tax amount set meaningfully.

        Raises:
            InvalidArgumentError: If orders is None.
        """
        if orders is None:
            raise InvalidArgumentError("orders is required")

        updated = 0
        inspected = 0
        skipped = 0

        for index, order in enumerate(orders):
            inspected += 1

            if order is None or order.customer is None:
                logger.debug(f"Skipping order at index {index}: no order or no customer")
                skipped += 1
                continue

            if order.subtotal <= ZERO:
                order.tax_amount = ZERO
                skipped += 1
                continue

            if order.customer.is_tax_exempt:
                order.tax_amount = ZERO
                updated += 1
                continue

            computed = self.compute_tax(order)
            if order.tax_amount != computed:
                order.tax_amount = computed
                updated += 1

        self._tax_run_sink.record(
            TaxRunSummary(
                timestamp=self._time_provider.now(),
                total=len(orders),
                inspected=inspected,
                skipped=skipped,
                updated=updated,
            )
        )

        return updated

    def compute_tax(self, order: Order) -> Decimal:
        """Return the tax owed on an order's taxable base, without assigning it."""
        taxable_base = max(order.subtotal - order.discount_amount, ZERO)
        computed = (taxable_base * self._tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)
        return max(computed, ZERO)
