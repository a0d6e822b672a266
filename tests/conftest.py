"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from order_pipeline.domain.entities import Address, Customer, Order
from order_pipeline.infrastructure.tax_run_sink import InMemoryTaxRunSink
from order_pipeline.infrastructure.time_provider import FrozenTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FrozenTimeProvider:
    """A time provider frozen at fixed_time."""
    return FrozenTimeProvider(fixed_time)


@pytest.fixture
def tax_run_sink() -> InMemoryTaxRunSink:
    """A sink that keeps tax run summaries for inspection."""
    return InMemoryTaxRunSink()


@pytest.fixture
def billing_address() -> Address:
    return Address(
        line1="123 Example St",
        city="Seattle",
        region="WA",
        postal_code="98101",
        country_code="US",
    )


@pytest.fixture
def customer(billing_address: Address) -> Customer:
    return Customer(id="C-42", display_name="Ada Lovelace", billing_address=billing_address)


@pytest.fixture
def complete_order(customer: Customer) -> Order:
    """An order that passes every validation and submission precondition."""
    return Order(
        order_id="A-1001",
        customer=customer,
        subtotal=Decimal("120.00"),
        discount_amount=Decimal("10.00"),
    )
