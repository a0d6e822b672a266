"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from order_pipeline.application.ports.order_gateway import OrderGateway
from order_pipeline.application.ports.order_source import OrderSource
from order_pipeline.application.ports.tax_run_sink import TaxRunSink
from order_pipeline.application.ports.time_provider import TimeProvider

__all__ = [
    "OrderGateway",
    "OrderSource",
    "TaxRunSink",
    "TimeProvider",
]
