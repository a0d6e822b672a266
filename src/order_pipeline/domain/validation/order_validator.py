from __future__ import annotations

from typing import TYPE_CHECKING

from order_pipeline.domain.entities import Order
from order_pipeline.domain.validation.presence_rules import (
    ORDER_ID_REQUIRED,
    ORDER_REQUIRED,
    billing_details_violations,
    is_blank,
)
from order_pipeline.domain.validation.validator import Validator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from order_pipeline.domain.rules import OrderRule


class OrderValidator(Validator[Order | None]):
    """Validates orders before tax computation or submission.

    Checks, in order:
        1. the order itself is present (terminal: nothing else is checked)
        2. customer, billing address and billing country are present
        3. the order id is not blank
        4. each configured OrderRule passes

    Configured rules only run against orders that passed checks 1-3, so
    a rule may assume a customer with a billing address and an order id.
    """

    def __init__(
        self,
        stop_on_first_error: bool = True,
        rules: Sequence[OrderRule] = (),
    ) -> None:
        super().__init__(stop_on_first_error)
        self._rules = tuple(rules)

    def collect_violations(self, order: Order | None) -> list[str]:
        if order is None:
            return [ORDER_REQUIRED]

        violations = billing_details_violations(order.customer)

        if is_blank(order.order_id):
            violations.append(ORDER_ID_REQUIRED)

        if violations:
            return violations

        for rule in self._rules:
            outcome = rule.apply(order)
            if not outcome.is_success:
                message = outcome.message
                violations.append(f"{rule.name} failed." if is_blank(message) else message)

        return violations
