"""Tests for SubmitOrderUseCase.

Tests cover:
- Accepted submission
- Precondition failures, first failure wins, gateway never consulted
- Gateway rejection of ids ending in X (any case)
- None order is a contract violation and raises
- raise_for_failure() gives callers the signaling style
"""

from dataclasses import replace

import pytest

from order_pipeline.application.ports import OrderGateway
from order_pipeline.application.use_cases.submit_order import GATEWAY_REJECTED, SubmitOrderUseCase
from order_pipeline.domain.entities import Address, Customer, Order
from order_pipeline.domain.exceptions import InvalidArgumentError, OrderSubmissionError
from order_pipeline.infrastructure.gateway import SuffixRejectingGateway

# =============================================================================
# Fixtures
# =============================================================================


class RecordingGateway(OrderGateway):
    """Gateway spy that records every order it is asked about."""

    def __init__(self, decision: bool = True) -> None:
        self._decision = decision
        self.consulted: list[Order] = []

    def accepts(self, order: Order) -> bool:
        self.consulted.append(order)
        return self._decision


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def use_case(gateway: RecordingGateway) -> SubmitOrderUseCase:
    return SubmitOrderUseCase(gateway)


@pytest.fixture
def default_use_case() -> SubmitOrderUseCase:
    return SubmitOrderUseCase(SuffixRejectingGateway())


# =============================================================================
# Success
# =============================================================================


class TestSubmitOrderSuccess:
    def test_complete_order_is_accepted(
        self, default_use_case: SubmitOrderUseCase, complete_order: Order
    ) -> None:
        result = default_use_case.execute(complete_order)

        assert result.success is True
        assert result.failure_reason is None

    def test_gateway_consulted_once(
        self, use_case: SubmitOrderUseCase, gateway: RecordingGateway, complete_order: Order
    ) -> None:
        use_case.execute(complete_order)

        assert gateway.consulted == [complete_order]


# =============================================================================
# Precondition Failures
# =============================================================================


class TestSubmitOrderPreconditions:
    def test_none_order_raises(self, use_case: SubmitOrderUseCase) -> None:
        with pytest.raises(InvalidArgumentError):
            use_case.execute(None)

    @pytest.mark.parametrize("order_id", [None, "", "  "])
    def test_blank_order_id(
        self, use_case: SubmitOrderUseCase, complete_order: Order, order_id: str | None
    ) -> None:
        result = use_case.execute(replace(complete_order, order_id=order_id))

        assert result.success is False
        assert result.failure_reason == "OrderId is required."

    def test_order_id_checked_before_customer(self, use_case: SubmitOrderUseCase) -> None:
        result = use_case.execute(Order())

        assert result.failure_reason == "OrderId is required."

    def test_missing_customer(self, use_case: SubmitOrderUseCase) -> None:
        result = use_case.execute(Order(order_id="A-1001"))

        assert result.failure_reason == "Customer is required."

    def test_missing_billing_address_never_reaches_gateway(
        self, use_case: SubmitOrderUseCase, gateway: RecordingGateway
    ) -> None:
        order = Order(order_id="A-1001", customer=Customer(id="C-1"))

        result = use_case.execute(order)

        assert result.success is False
        assert result.failure_reason == "Billing address is required."
        assert gateway.consulted == []

    def test_blank_country(self, use_case: SubmitOrderUseCase, gateway: RecordingGateway) -> None:
        customer = Customer(id="C-1", billing_address=Address(city="Seattle", country_code=" "))

        result = use_case.execute(Order(order_id="A-1001", customer=customer))

        assert result.failure_reason == "Billing address country is required."
        assert gateway.consulted == []


# =============================================================================
# Gateway Decision
# =============================================================================


class TestSubmitOrderGateway:
    @pytest.mark.parametrize("order_id", ["A-100X", "a-100x"])
    def test_ids_ending_in_x_are_rejected(
        self, default_use_case: SubmitOrderUseCase, complete_order: Order, order_id: str
    ) -> None:
        result = default_use_case.execute(replace(complete_order, order_id=order_id))

        assert result.success is False
        assert result.failure_reason == GATEWAY_REJECTED

    def test_gateway_rejection_from_port(self, complete_order: Order) -> None:
        use_case = SubmitOrderUseCase(RecordingGateway(decision=False))

        result = use_case.execute(complete_order)

        assert result.failure_reason == "External gateway rejected the order."


# =============================================================================
# Signaling Style
# =============================================================================


class TestSubmitOrderRaiseForFailure:
    def test_failed_result_can_be_raised(
        self, default_use_case: SubmitOrderUseCase, complete_order: Order
    ) -> None:
        result = default_use_case.execute(replace(complete_order, order_id="A-100X"))

        with pytest.raises(OrderSubmissionError, match="External gateway rejected the order."):
            result.raise_for_failure()
