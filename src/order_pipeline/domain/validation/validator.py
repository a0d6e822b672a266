from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from order_pipeline.domain.validation.validation_result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Base class for validators that either fast-fail or collect all errors.

    The work is split in two layers:
    - collect_violations() is the subtype's pure rule routine. It returns
      every violation it finds, in a fixed order.
    - validate() is the policy wrapper. It records the violations into a
      fresh ValidationResult and, in fast-fail mode, keeps only the first.

    Subtypes never look at the fast-fail flag; the truncation contract is
    enforced here for all of them.
    """

    def __init__(self, stop_on_first_error: bool = True) -> None:
        self._stop_on_first_error = stop_on_first_error

    @property
    def stop_on_first_error(self) -> bool:
        return self._stop_on_first_error

    def validate(self, value: T) -> ValidationResult:
        """Validate a value.

        Args:
            value: The value to validate; may be None.

        Returns:
            A ValidationResult holding all violations (collect-all mode)
            or at most one (fast-fail mode). Never raises for invalid input.
        """
        result = ValidationResult()
        for violation in self.collect_violations(value):
            result.add(violation)

        if self._stop_on_first_error and len(result.errors) > 1:
            result.keep_first()

        return result

    @abstractmethod
    def collect_violations(self, value: T) -> Iterable[str]:
        """Return every violation found in value, in check order."""
