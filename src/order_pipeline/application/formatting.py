"""Human-readable renderings of orders for display and integrations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from order_pipeline.domain.exceptions import InvalidArgumentError, OrderIncompleteError
from order_pipeline.domain.validation import (
    BILLING_ADDRESS_REQUIRED,
    CUSTOMER_REQUIRED,
    is_blank,
)

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Address, Order

UNKNOWN_NAME = "(unknown)"
LABEL_SEPARATOR = " — "


class ShippingLabelFormatter:
    """Builds single-line shipping labels, e.g. "Ada Smith — Seattle, WA 98101"."""

    def build_shipping_label(self, order: Order | None) -> str:
        """Render the billing address of an order's customer as one line.

        Blank city, region or postal code parts are dropped along with
        their separators, so a label never carries a double space or a
        comma dangling before the postal code.

        Raises:
            InvalidArgumentError: If order is None.
            OrderIncompleteError: If the customer or billing address is missing.
        """
        if order is None:
            raise InvalidArgumentError("order is required")

        customer = order.customer
        if customer is None:
            raise OrderIncompleteError(CUSTOMER_REQUIRED)

        if customer.billing_address is None:
            raise OrderIncompleteError(BILLING_ADDRESS_REQUIRED)

        name = customer.display_name if customer.display_name is not None else UNKNOWN_NAME
        location = self._format_location(customer.billing_address)
        if not location:
            return name

        return f"{name}{LABEL_SEPARATOR}{location}"

    @staticmethod
    def _format_location(address: Address) -> str:
        city, region, postal_code = (
            "" if is_blank(part) else part.strip()
            for part in (address.city, address.region, address.postal_code)
        )

        locality = city
        if region:
            locality = f"{city}, {region}" if city else region

        return " ".join(part for part in (locality, postal_code) if part)
