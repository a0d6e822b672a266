from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.domain.entities import Order


@dataclass(frozen=True, slots=True)
class RuleResult:
    """Pass/fail outcome of applying one OrderRule."""

    is_success: bool
    message: str | None = None

    @classmethod
    def success(cls, message: str | None = None) -> RuleResult:
        return cls(is_success=True, message=message)

    @classmethod
    def failure(cls, message: str | None = None) -> RuleResult:
        return cls(is_success=False, message=message)


class OrderRule(ABC):
    """A named business rule applied to a single order.

    Contract:
    - apply() MUST NOT mutate the order
    - apply() reports violations through RuleResult, never by raising
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short human-readable rule name, used when a failure has no message."""

    @abstractmethod
    def apply(self, order: Order) -> RuleResult:
        """Evaluate the rule against an order."""
