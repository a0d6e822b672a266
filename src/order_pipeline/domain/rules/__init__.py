"""Order rules - Pluggable named business rules."""

from order_pipeline.domain.rules.order_rule import OrderRule, RuleResult

__all__ = [
    "OrderRule",
    "RuleResult",
]
