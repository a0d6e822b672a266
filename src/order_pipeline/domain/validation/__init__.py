"""Validation - Accumulating validators and shared presence rules."""

from order_pipeline.domain.validation.order_validator import OrderValidator
from order_pipeline.domain.validation.presence_rules import (
    BILLING_ADDRESS_REQUIRED,
    BILLING_COUNTRY_REQUIRED,
    CUSTOMER_REQUIRED,
    ORDER_ID_REQUIRED,
    ORDER_REQUIRED,
    billing_details_violations,
    is_blank,
)
from order_pipeline.domain.validation.validation_result import ValidationResult
from order_pipeline.domain.validation.validator import Validator

__all__ = [
    "BILLING_ADDRESS_REQUIRED",
    "BILLING_COUNTRY_REQUIRED",
    "CUSTOMER_REQUIRED",
    "ORDER_ID_REQUIRED",
    "ORDER_REQUIRED",
    "OrderValidator",
    "ValidationResult",
    "Validator",
    "billing_details_violations",
    "is_blank",
]
