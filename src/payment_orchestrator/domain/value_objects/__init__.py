"""Value objects - Immutable objects defined by their attributes."""

from payment_orchestrator.domain.value_objects.currency import Currency
from payment_orchestrator.domain.value_objects.payment_method import PaymentMethod

__all__ = [
    "Currency",
    "PaymentMethod",
]
