"""Tests for best-effort publishing, notification and analytics."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from payment_orchestrator.application.ports import EventSink
from payment_orchestrator.application.services import (
    AnalyticsRecorder,
    BestEffortPublisher,
    PaymentNotifier,
)
from payment_orchestrator.domain.entities import Refund, Transaction
from payment_orchestrator.domain.events import (
    PaymentAnalytics,
    PaymentConfirmation,
    RefundRecorded,
)
from payment_orchestrator.domain.value_objects import PaymentMethod
from payment_orchestrator.infrastructure.event_sinks import InMemoryEventSink


class ExplodingSink(EventSink):
    def emit(self, event):  # type: ignore[no-untyped-def]
        raise RuntimeError("sink down")


@pytest.fixture
def transaction() -> Transaction:
    return Transaction.create(
        user_id=1,
        original_amount=Decimal("100"),
        final_amount=Decimal("120.0"),
        currency="EUR",
        payment_method=PaymentMethod.PAYPAL,
        metadata={"paypalAccount": "acc"},
        discount_code=None,
        fraud_checked=0,
        created_at=datetime(2024, 1, 15, tzinfo=UTC),
    )


# =============================================================================
# BestEffortPublisher
# =============================================================================


class TestBestEffortPublisher:
    def test_returns_true_when_sink_accepts(self, transaction: Transaction) -> None:
        sink = InMemoryEventSink()
        event = PaymentConfirmation(user_id=1, amount=Decimal("1"), currency="USD")

        assert BestEffortPublisher(sink).publish(event) is True
        assert sink.events == [event]

    def test_sink_failure_is_captured_and_logged(self) -> None:
        publisher = BestEffortPublisher(ExplodingSink())
        event = PaymentConfirmation(user_id=1, amount=Decimal("1"), currency="USD")

        with capture_logs() as logs:
            accepted = publisher.publish(event)

        assert accepted is False
        failures = [log for log in logs if log["event"] == "side_effect_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "warning"
        assert failures[0]["event_name"] == "payment_confirmation"


# =============================================================================
# Notifier and Analytics
# =============================================================================


class TestPaymentNotifier:
    def test_emits_confirmation_with_final_amount(self, transaction: Transaction) -> None:
        sink = InMemoryEventSink()

        PaymentNotifier(BestEffortPublisher(sink)).payment_succeeded(transaction)

        assert sink.events == [
            PaymentConfirmation(user_id=1, amount=Decimal("120.0"), currency="EUR")
        ]


class TestAnalyticsRecorder:
    def test_emits_payment_analytics(self, transaction: Transaction) -> None:
        sink = InMemoryEventSink()

        AnalyticsRecorder(BestEffortPublisher(sink)).payment_processed(transaction)

        assert sink.events == [
            PaymentAnalytics(user_id=1, amount=Decimal("120.0"), currency="EUR", method="paypal")
        ]

    def test_emits_refund_analytics(self) -> None:
        sink = InMemoryEventSink()
        refund = Refund.create(
            transaction_id="tx1",
            user_id=1,
            reason="r",
            amount=Decimal("100"),
            currency="USD",
            metadata=None,
            created_at=datetime(2024, 1, 15, tzinfo=UTC),
        )

        AnalyticsRecorder(BestEffortPublisher(sink)).refund_processed(refund)

        (event,) = sink.of_type(RefundRecorded)
        assert event.net_amount == Decimal("95")

    def test_failure_reported_as_false(self, transaction: Transaction) -> None:
        recorder = AnalyticsRecorder(BestEffortPublisher(ExplodingSink()))

        assert recorder.payment_processed(transaction) is False
