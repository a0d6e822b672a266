"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Tax computation, order submission and order queries
- Ports: Abstract interfaces for clocks, gateways, order sources and sinks
- DTOs: Data transfer objects emitted by use cases
- Formatting: Human-readable renderings of orders

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
