"""Domain entities - Immutable records produced by the orchestrator."""

from payment_orchestrator.domain.entities.refund import REFUND_FEE_RATE, Refund
from payment_orchestrator.domain.entities.transaction import Transaction

__all__ = [
    "REFUND_FEE_RATE",
    "Refund",
    "Transaction",
]
