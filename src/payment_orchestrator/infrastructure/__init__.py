"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Gateway: In-memory payment gateway recording every post
- Event Sinks: structlog-backed sink (default) and in-memory sink
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_orchestrator.infrastructure.event_sinks import InMemoryEventSink, StructlogEventSink
from payment_orchestrator.infrastructure.payment_gateway import GatewayCall, InMemoryPaymentGateway
from payment_orchestrator.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "GatewayCall",
    "InMemoryEventSink",
    "InMemoryPaymentGateway",
    "StructlogEventSink",
    "SystemTimeProvider",
]
