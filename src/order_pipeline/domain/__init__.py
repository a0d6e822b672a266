"""Domain layer - Order records, validation and business results.

This layer contains:
- Entities: Address, Customer and Order records
- Validation: ValidationResult, presence rules and the validator framework
- Rules: Pluggable named business rules applied to an order
- Results: ProcessingResult for submission outcomes
- Domain Exceptions: Contract violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
