"""Domain exceptions for order-pipeline.

Exception hierarchy:
    DomainException (base)
    ├── Contract Errors
    │   ├── InvalidArgumentError
    │   └── InvalidTaxRateError
    └── Order Errors
        ├── OrderIncompleteError
        └── OrderSubmissionError

Business-rule violations are not raised: validators return a
ValidationResult and submission returns a ProcessingResult. Exceptions
are reserved for contract violations and for callers that explicitly
opt into raising (ProcessingResult.raise_for_failure).
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors."""


# =============================================================================
# Contract Errors
# =============================================================================


class InvalidArgumentError(DomainException):
    """Raised when None is passed where a value is mandatory.

    Examples:
        - TaxCalculator.compute_taxes(None)
        - SubmitOrderUseCase.execute(None)
    """


class InvalidTaxRateError(DomainException):
    """Raised when a tax calculator is built with a negative rate."""


# =============================================================================
# Order Errors
# =============================================================================


class OrderIncompleteError(DomainException):
    """Raised when an order lacks data an operation cannot do without.

    Used by formatting, which has no result channel to report through.
    """


class OrderSubmissionError(DomainException):
    """Raised by ProcessingResult.raise_for_failure() for a failed submission.

    Carries the first violated precondition (or the gateway rejection)
    as both the message and the ``reason`` attribute.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
