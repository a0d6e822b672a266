"""Console entry point that runs the demo order through the pipeline."""

from __future__ import annotations

import argparse
import asyncio
import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from order_pipeline.application.formatting import ShippingLabelFormatter
from order_pipeline.application.use_cases.compute_taxes import TaxCalculator
from order_pipeline.application.use_cases.order_queries import count_high_value_orders
from order_pipeline.application.use_cases.submit_order import SubmitOrderUseCase
from order_pipeline.config import get_settings
from order_pipeline.domain.entities import Address, Customer, Order
from order_pipeline.domain.validation import OrderValidator
from order_pipeline.infrastructure import (
    InMemoryOrderSource,
    LoggingTaxRunSink,
    SuffixRejectingGateway,
    SystemTimeProvider,
)
from order_pipeline.infrastructure.logging_config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from order_pipeline.config import Settings

logger = logging.getLogger(__name__)

DEMO_ORDER_ID = "DBG-1001"
HIGH_VALUE_THRESHOLD = Decimal("100.00")


def build_demo_order(order_id: str = DEMO_ORDER_ID) -> Order:
    """An order whose billing region is whitespace-only."""
    return Order(
        order_id=order_id,
        subtotal=Decimal("120.00"),
        discount_amount=Decimal("10.00"),
        customer=Customer(
            id="C-42",
            display_name="Ada Lovelace",
            is_tax_exempt=False,
            is_tax_exempt_override_eligible=True,
            billing_address=Address(
                line1="123 Example St",
                city="Seattle",
                region=" ",
                postal_code="98101",
                country_code="US",
            ),
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="order-pipeline",
        description="Validate, tax and submit a demo order.",
    )
    parser.add_argument(
        "--order-id",
        default=DEMO_ORDER_ID,
        help=f"Order id for the demo order (default: {DEMO_ORDER_ID}). "
        "Ids ending in X are rejected by the stand-in gateway.",
    )
    parser.add_argument(
        "--collect-all",
        action="store_true",
        help="Report every validation error instead of only the first.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override ORDER_PIPELINE_LOG_LEVEL.",
    )
    return parser


def run(order_id: str, collect_all: bool, settings: Settings) -> int:
    """Run the demo pipeline and return the process exit code."""
    order = build_demo_order(order_id)

    validation = OrderValidator(stop_on_first_error=not collect_all).validate(order)
    for error in validation.errors:
        print(f"Validation error: {error}")

    print(ShippingLabelFormatter().build_shipping_label(order))

    calculator = TaxCalculator(
        time_provider=SystemTimeProvider(),
        tax_run_sink=LoggingTaxRunSink(),
        tax_rate=settings.TAX_RATE,
    )
    source = InMemoryOrderSource(latency_seconds=settings.ORDER_SOURCE_LATENCY_SECONDS)
    batch = asyncio.run(source.fetch_orders())
    batch.append(order)
    updated = calculator.compute_taxes(batch)
    print(f"Tax updated on {updated} of {len(batch)} orders; demo order tax: {order.tax_amount}")

    high_value = asyncio.run(count_high_value_orders(source, HIGH_VALUE_THRESHOLD))
    print(f"Orders at or above {HIGH_VALUE_THRESHOLD} in source: {high_value}")

    result = SubmitOrderUseCase(SuffixRejectingGateway(settings.GATEWAY_REJECT_SUFFIX)).execute(order)
    if not result.success:
        print(f"Submission failed: {result.failure_reason}")
        return 1

    print("Submission accepted.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.LOG_LEVEL, json_format=settings.LOG_JSON)
    return run(args.order_id, args.collect_all, settings)
