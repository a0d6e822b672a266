"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: The order-pipeline demo command

Entrypoints wire infrastructure adapters into use cases and format
results for the console.
"""
