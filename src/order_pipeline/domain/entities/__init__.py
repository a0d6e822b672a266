"""Domain entities - Order records passed through the pipeline."""

from order_pipeline.domain.entities.address import Address
from order_pipeline.domain.entities.customer import Customer, DiscountTaxPolicy
from order_pipeline.domain.entities.order import Order

__all__ = [
    "Address",
    "Customer",
    "DiscountTaxPolicy",
    "Order",
]
