"""order-pipeline - Order validation, tax computation and submission."""
