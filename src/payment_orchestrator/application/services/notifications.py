"""Post-transaction side effects: user confirmation and analytics.

Both are fire-and-forget and independent of each other; neither one's
failure affects the other or the payment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.domain.events import (
    PaymentAnalytics,
    PaymentConfirmation,
    RefundRecorded,
)

if TYPE_CHECKING:
    from payment_orchestrator.application.services.publisher import BestEffortPublisher
    from payment_orchestrator.domain.entities import Refund, Transaction


class PaymentNotifier:
    def __init__(self, publisher: BestEffortPublisher) -> None:
        self._publisher = publisher

    def payment_succeeded(self, transaction: Transaction) -> bool:
        return self._publisher.publish(
            PaymentConfirmation(
                user_id=transaction.user_id,
                amount=transaction.final_amount,
                currency=transaction.currency,
            )
        )


class AnalyticsRecorder:
    def __init__(self, publisher: BestEffortPublisher) -> None:
        self._publisher = publisher

    def payment_processed(self, transaction: Transaction) -> bool:
        return self._publisher.publish(
            PaymentAnalytics(
                user_id=transaction.user_id,
                amount=transaction.final_amount,
                currency=transaction.currency,
                method=transaction.payment_method.value,
            )
        )

    def refund_processed(self, refund: Refund) -> bool:
        return self._publisher.publish(
            RefundRecorded(
                transaction_id=refund.transaction_id,
                user_id=refund.user_id,
                amount=refund.amount,
                net_amount=refund.net_amount,
                currency=refund.currency,
            )
        )
