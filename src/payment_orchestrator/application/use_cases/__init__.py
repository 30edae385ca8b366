"""Use cases - Single entry points for each payment operation."""

from payment_orchestrator.application.use_cases.process_payment import ProcessPaymentUseCase
from payment_orchestrator.application.use_cases.refund_payment import RefundPaymentUseCase

__all__ = [
    "ProcessPaymentUseCase",
    "RefundPaymentUseCase",
]
