"""Application services - Collaborator wrappers used by the use cases."""

from payment_orchestrator.application.services.gateway_dispatcher import GatewayDispatcher
from payment_orchestrator.application.services.notifications import (
    AnalyticsRecorder,
    PaymentNotifier,
)
from payment_orchestrator.application.services.publisher import BestEffortPublisher

__all__ = [
    "AnalyticsRecorder",
    "BestEffortPublisher",
    "GatewayDispatcher",
    "PaymentNotifier",
]
