"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Time Provider: Clock abstraction for testability
- Gateway: Deterministic stand-in for the external acceptance gateway
- Order Source: In-memory asynchronous order supplier
- Tax Run Sinks: Logging and in-memory observability sinks
- Logging Config: Handler and formatter setup for entry points

Infrastructure adapters implement the ports defined in the application layer.
"""

from order_pipeline.infrastructure.gateway import SuffixRejectingGateway
from order_pipeline.infrastructure.order_source import InMemoryOrderSource
from order_pipeline.infrastructure.tax_run_sink import InMemoryTaxRunSink, LoggingTaxRunSink
from order_pipeline.infrastructure.time_provider import FrozenTimeProvider, SystemTimeProvider

__all__ = [
    "FrozenTimeProvider",
    "InMemoryOrderSource",
    "InMemoryTaxRunSink",
    "LoggingTaxRunSink",
    "SuffixRejectingGateway",
    "SystemTimeProvider",
]
