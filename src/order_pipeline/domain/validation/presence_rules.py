"""Presence checks shared by every entity-specific validator.

These are pure functions: they return every violation they find, in a
fixed order, and leave it to the caller to decide how many to keep.
The message texts double as the failure reasons reported by order
submission, so they must stay stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Customer

ORDER_REQUIRED = "Order is required."
CUSTOMER_REQUIRED = "Customer is required."
BILLING_ADDRESS_REQUIRED = "Billing address is required."
BILLING_COUNTRY_REQUIRED = "Billing address country is required."
ORDER_ID_REQUIRED = "OrderId is required."


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, and whitespace-only strings."""
    return value is None or not value.strip()


def billing_details_violations(
    customer: Customer | None,
    *,
    require_billing_address: bool = True,
    require_country: bool = True,
) -> list[str]:
    """Return the customer/billing presence violations, in check order.

    A missing parent implies its children are missing too: a None
    customer yields all three messages when both flags are set.

    Args:
        customer: The customer to inspect; may be None.
        require_billing_address: Check that a billing address is present.
            When False, the country check is skipped as well.
        require_country: Check that the billing country code is not blank.

    Returns:
        The violation messages, possibly empty.
    """
    violations: list[str] = []

    if customer is None:
        violations.append(CUSTOMER_REQUIRED)

    if not require_billing_address:
        return violations

    billing_address = customer.billing_address if customer is not None else None
    if billing_address is None:
        violations.append(BILLING_ADDRESS_REQUIRED)

    if require_country:
        country_code = billing_address.country_code if billing_address is not None else None
        if is_blank(country_code):
            violations.append(BILLING_COUNTRY_REQUIRED)

    return violations
