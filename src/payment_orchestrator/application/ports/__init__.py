"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_orchestrator.application.ports.event_sink import EventSink
from payment_orchestrator.application.ports.payment_gateway import PaymentGateway
from payment_orchestrator.application.ports.time_provider import TimeProvider

__all__ = [
    "EventSink",
    "PaymentGateway",
    "TimeProvider",
]
