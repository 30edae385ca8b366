from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.domain.entities import Transaction
from payment_orchestrator.domain.events import RiskAssessed
from payment_orchestrator.logging_config import get_logger

if TYPE_CHECKING:
    from payment_orchestrator.application.dtos import PaymentRequest
    from payment_orchestrator.application.ports import TimeProvider
    from payment_orchestrator.application.services import (
        AnalyticsRecorder,
        BestEffortPublisher,
        GatewayDispatcher,
        PaymentNotifier,
    )
    from payment_orchestrator.domain.services import (
        CurrencyConverter,
        DiscountEngine,
        FraudAnalyzer,
        PaymentValidator,
    )

logger = get_logger(__name__)


class ProcessPaymentUseCase:
    """Orchestrates the process payment workflow.

    Step order is a strict contract; each step runs only if the previous
    one succeeded:
    1. Validate method and metadata (fatal; nothing else has happened yet)
    2. Fraud check on the requested amount (classification only, never fatal)
    3. Apply discount
    4. Convert currency (on the discounted amount)
    5. Build the immutable Transaction
    6. Dispatch to the gateway (fatal; errors propagate unmodified)
    7. Notify user, then record analytics (best effort)

    Side-effect failures in steps 2 and 7 are captured and logged by the
    BestEffortPublisher; they never abort a payment.

    The use case keeps no per-call state, so one instance can serve
    concurrent calls on separate requests without locking.
    """

    def __init__(
        self,
        *,
        validator: PaymentValidator,
        fraud_analyzer: FraudAnalyzer,
        discount_engine: DiscountEngine,
        currency_converter: CurrencyConverter,
        dispatcher: GatewayDispatcher,
        publisher: BestEffortPublisher,
        notifier: PaymentNotifier,
        analytics: AnalyticsRecorder,
        time_provider: TimeProvider,
    ) -> None:
        self._validator = validator
        self._fraud_analyzer = fraud_analyzer
        self._discount_engine = discount_engine
        self._converter = currency_converter
        self._dispatcher = dispatcher
        self._publisher = publisher
        self._notifier = notifier
        self._analytics = analytics
        self._time_provider = time_provider

    def execute(self, request: PaymentRequest) -> Transaction:
        """Execute the process payment workflow.

        Args:
            request: The payment request.

        Returns:
            The Transaction that was dispatched. The caller owns it.

        Raises:
            UnsupportedMethodError: Method is not supported.
            InvalidMetadataError: Required metadata is missing.
            GatewayDispatchError: The gateway failed; notification and
                analytics did not fire.
        """
        # Step 1: Validate before any side effect
        method = self._validator.validate(request.method, request.metadata)

        # Step 2: Fraud check
        self._run_fraud_check(request)

        # Step 3: Discount
        if request.discount_code and not self._discount_engine.is_known(request.discount_code):
            logger.debug("discount_code_unknown", code=request.discount_code)
        final_amount = self._discount_engine.apply(request.amount, request.discount_code)

        # Step 4: Conversion
        final_amount = self._converter.convert(final_amount, request.currency)

        # Step 5: Build record
        transaction = Transaction.create(
            user_id=request.user_id,
            original_amount=request.amount,
            final_amount=final_amount,
            currency=request.currency,
            payment_method=method,
            metadata=request.metadata,
            discount_code=request.discount_code,
            fraud_checked=request.fraud_check_level,
            created_at=self._time_provider.now(),
        )

        # Step 6: Dispatch
        self._dispatcher.dispatch(method, transaction)

        # Step 7: Observers
        self._notifier.payment_succeeded(transaction)
        self._analytics.payment_processed(transaction)

        return transaction

    def _run_fraud_check(self, request: PaymentRequest) -> None:
        assessment = self._fraud_analyzer.check(
            request.fraud_check_level, request.user_id, request.amount
        )
        if assessment is None:
            return

        self._publisher.publish(
            RiskAssessed(
                user_id=assessment.user_id,
                amount=assessment.amount,
                tier=assessment.tier,
                level=assessment.level,
                check_level=assessment.check_level,
            )
        )
