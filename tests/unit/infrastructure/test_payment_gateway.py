from datetime import UTC, datetime
from decimal import Decimal

from payment_orchestrator.application.ports import PaymentGateway
from payment_orchestrator.domain.entities import Refund
from payment_orchestrator.infrastructure.payment_gateway import InMemoryPaymentGateway


def make_refund() -> Refund:
    return Refund.create(
        transaction_id="tx1",
        user_id=1,
        reason="r",
        amount=Decimal("10"),
        currency="USD",
        metadata=None,
        created_at=datetime(2024, 1, 15, tzinfo=UTC),
    )


class TestInMemoryPaymentGateway:
    def test_implements_payment_gateway(self) -> None:
        assert isinstance(InMemoryPaymentGateway(), PaymentGateway)

    def test_records_calls_in_order(self) -> None:
        gateway = InMemoryPaymentGateway()
        refund = make_refund()

        gateway.post("/payments/refund", refund)
        gateway.post("/payments/credit", refund)

        assert [call.endpoint for call in gateway.calls] == ["/payments/refund", "/payments/credit"]
        assert gateway.calls[0].body is refund

    def test_accepts_with_unique_reference(self) -> None:
        gateway = InMemoryPaymentGateway()

        first = gateway.post("/payments/refund", make_refund())
        second = gateway.post("/payments/refund", make_refund())

        assert first.status == "accepted"
        assert first.reference != second.reference
