from __future__ import annotations

from dataclasses import dataclass

from order_pipeline.domain.exceptions import InvalidArgumentError, OrderSubmissionError


@dataclass(frozen=True, slots=True)
class ProcessingResult:
    """Outcome of submitting a single order.

    A successful result never carries a reason; a failed one always
    carries a non-blank one. Both are enforced at construction.
    Prefer the ok() and fail() factories over the constructor.
    """

    success: bool
    failure_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.failure_reason is not None:
            raise InvalidArgumentError("A successful result cannot carry a failure reason")

        if not self.success and (self.failure_reason is None or not self.failure_reason.strip()):
            raise InvalidArgumentError("A failed result requires a failure reason")

    @classmethod
    def ok(cls) -> ProcessingResult:
        return cls(success=True)

    @classmethod
    def fail(cls, reason: str) -> ProcessingResult:
        return cls(success=False, failure_reason=reason)

    def raise_for_failure(self) -> None:
        """Raise OrderSubmissionError if this result is a failure.

        Lets callers that prefer exceptions treat a failed submission as
        an abort without the use case itself raising for business rules.
        """
        if not self.success:
            raise OrderSubmissionError(self.failure_reason)
