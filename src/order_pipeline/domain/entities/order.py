"""Order record.

Order is the one mutable record in the domain: ``tax_amount`` is
assigned by the tax calculator. Every other field is fixed once the
order is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities.customer import Customer


@dataclass(slots=True)
class Order:
    """An order awaiting tax computation and submission.

    ``subtotal`` is expected to be non-negative but this is not enforced;
    the tax calculator treats a non-positive subtotal as "nothing to tax".
    """

    order_id: str | None = None
    customer: Customer | None = None
    subtotal: Decimal = field(default_factory=lambda: Decimal("0"))
    discount_amount: Decimal = field(default_factory=lambda: Decimal("0"))
    tax_amount: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def has_discount(self) -> bool:
        return self.discount_amount > 0
