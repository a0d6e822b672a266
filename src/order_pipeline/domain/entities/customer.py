from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities.address import Address


class DiscountTaxPolicy(Enum):
    """How a promotional discount interacts with the taxable base.

    Carried on the customer record only. The tax calculator does not
    consult it yet: discounts always reduce the taxable base.
    """

    REDUCES_TAXABLE_BASE = "reduces_taxable_base"
    FULLY_TAXABLE = "fully_taxable"


@dataclass(frozen=True, slots=True)
class Customer:
    """Customer placing an order, owning at most one billing address."""

    id: str | None = None
    display_name: str | None = None
    is_tax_exempt: bool = False
    is_tax_exempt_override_eligible: bool = False
    discount_tax_policy: DiscountTaxPolicy = DiscountTaxPolicy.REDUCES_TAXABLE_BASE
    billing_address: Address | None = None
