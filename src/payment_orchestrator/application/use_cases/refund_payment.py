from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.domain.entities import Refund

if TYPE_CHECKING:
    from payment_orchestrator.application.dtos import RefundRequest
    from payment_orchestrator.application.ports import TimeProvider
    from payment_orchestrator.application.services import AnalyticsRecorder, GatewayDispatcher


class RefundPaymentUseCase:
    """Builds a Refund and dispatches it to the refund endpoint.

    The referenced transaction is not looked up: existence, ownership by
    user_id and amount <= original charge are NOT checked.
    """

    def __init__(
        self,
        *,
        dispatcher: GatewayDispatcher,
        analytics: AnalyticsRecorder,
        time_provider: TimeProvider,
    ) -> None:
        self._dispatcher = dispatcher
        self._analytics = analytics
        self._time_provider = time_provider

    def execute(self, request: RefundRequest) -> Refund:
        """Execute the refund workflow.

        Raises:
            GatewayDispatchError: The gateway failed; no analytics fired.
        """
        refund = Refund.create(
            transaction_id=request.transaction_id,
            user_id=request.user_id,
            reason=request.reason,
            amount=request.amount,
            currency=request.currency,
            metadata=request.metadata,
            created_at=self._time_provider.now(),
        )

        self._dispatcher.dispatch_refund(refund)
        self._analytics.refund_processed(refund)

        return refund
