"""
PaymentProcessor: composition root and public entry point.

Wires settings, domain services, application services and infrastructure
defaults into the two use cases, and exposes them with flat signatures.
"""
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from payment_orchestrator.application.dtos import PaymentRequest, RefundRequest
from payment_orchestrator.application.services import (
    AnalyticsRecorder,
    BestEffortPublisher,
    GatewayDispatcher,
    PaymentNotifier,
)
from payment_orchestrator.application.use_cases import ProcessPaymentUseCase, RefundPaymentUseCase
from payment_orchestrator.config import ProcessorSettings
from payment_orchestrator.domain.services import (
    CurrencyConverter,
    DiscountEngine,
    FraudAnalyzer,
    PaymentValidator,
)
from payment_orchestrator.infrastructure.event_sinks import StructlogEventSink
from payment_orchestrator.infrastructure.time_provider import SystemTimeProvider
from payment_orchestrator.logging_config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Mapping

    from payment_orchestrator.application.ports import EventSink, PaymentGateway, TimeProvider
    from payment_orchestrator.domain.entities import Refund, Transaction
    from payment_orchestrator.domain.value_objects import PaymentMethod


class PaymentProcessor:
    """Validates, prices and dispatches payments and refunds.

    Args:
        gateway: The payment gateway; the processor never builds its own transport.
        settings: Conversion rate, base currency and discount rules.
            Defaults to ProcessorSettings() (environment, then defaults).
        event_sink: Receives risk, confirmation and analytics events.
            Defaults to StructlogEventSink.
        time_provider: Clock for record timestamps. Defaults to the system clock.
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        settings: ProcessorSettings | None = None,
        *,
        event_sink: EventSink | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        self._settings = settings or ProcessorSettings()
        time_provider = time_provider or SystemTimeProvider()

        publisher = BestEffortPublisher(event_sink or StructlogEventSink())
        dispatcher = GatewayDispatcher(gateway)
        analytics = AnalyticsRecorder(publisher)

        self._converter = CurrencyConverter(
            rate=self._settings.conversion_rate,
            base_currency=self._settings.base_currency,
        )
        self._process = ProcessPaymentUseCase(
            validator=PaymentValidator(),
            fraud_analyzer=FraudAnalyzer(),
            discount_engine=DiscountEngine(self._settings.discount_rules),
            currency_converter=self._converter,
            dispatcher=dispatcher,
            publisher=publisher,
            notifier=PaymentNotifier(publisher),
            analytics=analytics,
            time_provider=time_provider,
        )
        self._refund = RefundPaymentUseCase(
            dispatcher=dispatcher,
            analytics=analytics,
            time_provider=time_provider,
        )

    @property
    def settings(self) -> ProcessorSettings:
        return self._settings

    @property
    def conversion_rate(self) -> Decimal:
        return self._converter.rate

    def process_payment(
        self,
        amount: Decimal | int | float | str,
        currency: str,
        user_id: Any,
        method: PaymentMethod | str,
        metadata: Mapping[str, Any] | None,
        discount_code: str | None = None,
        fraud_check_level: int = 0,
    ) -> Transaction:
        request = PaymentRequest(
            amount=amount,
            currency=currency,
            user_id=user_id,
            method=method,
            metadata=metadata,
            discount_code=discount_code,
            fraud_check_level=fraud_check_level,
        )
        return self._process.execute(request)

    def refund_payment(
        self,
        transaction_id: str,
        user_id: Any,
        reason: str,
        amount: Decimal | int | float | str,
        currency: str,
        metadata: Mapping[str, Any] | None = None,
    ) -> Refund:
        request = RefundRequest(
            transaction_id=transaction_id,
            user_id=user_id,
            reason=reason,
            amount=amount,
            currency=currency,
            metadata=metadata,
        )
        return self._refund.execute(request)


def create_processor(
    gateway: PaymentGateway,
    settings: ProcessorSettings | None = None,
    *,
    event_sink: EventSink | None = None,
    time_provider: TimeProvider | None = None,
) -> PaymentProcessor:
    """Build a PaymentProcessor and configure logging from its settings.

    Use this from an application entry point. Libraries embedding the
    processor should construct PaymentProcessor directly and leave global
    logging alone.
    """
    settings = settings or ProcessorSettings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)
    return PaymentProcessor(
        gateway,
        settings,
        event_sink=event_sink,
        time_provider=time_provider,
    )
