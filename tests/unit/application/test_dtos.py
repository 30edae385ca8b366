from decimal import Decimal

import pytest

from payment_orchestrator.application.dtos import PaymentRequest, RefundRequest, to_amount
from payment_orchestrator.domain.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    UnsupportedMethodError,
)
from payment_orchestrator.domain.value_objects import PaymentMethod


class TestToAmount:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100, Decimal("100")),
            ("19.99", Decimal("19.99")),
            (0.1, Decimal("0.1")),
            (Decimal("5"), Decimal("5")),
        ],
    )
    def test_coerces_to_decimal(self, value: object, expected: Decimal) -> None:
        assert to_amount(value) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -1, "-0.01", "abc", None, True, "NaN", "Infinity"])
    def test_rejects_invalid_amounts(self, value: object) -> None:
        with pytest.raises(InvalidAmountError):
            to_amount(value)  # type: ignore[arg-type]


class TestPaymentRequest:
    def test_normalizes_amount_and_currency(self) -> None:
        request = PaymentRequest(amount=100, currency="eur", user_id=1, method="paypal")

        assert request.amount == Decimal("100")
        assert isinstance(request.amount, Decimal)
        assert request.currency == "EUR"

    def test_defaults(self) -> None:
        request = PaymentRequest(amount=1, currency="USD", user_id=1, method="paypal")

        assert request.metadata is None
        assert request.discount_code is None
        assert request.fraud_check_level == 0

    def test_resolves_method(self) -> None:
        request = PaymentRequest(amount=1, currency="USD", user_id=1, method="paypal")

        assert request.method is PaymentMethod.PAYPAL

    @pytest.mark.parametrize(
        ("amount", "currency"), [(100, "EURO"), (0, "USD"), (-5, "DOLLARS")]
    )
    def test_unsupported_method_reported_before_amount_and_currency(
        self, amount: int, currency: str
    ) -> None:
        with pytest.raises(UnsupportedMethodError):
            PaymentRequest(amount=amount, currency=currency, user_id=1, method="bitcoin")

    def test_rejects_invalid_currency(self) -> None:
        with pytest.raises(InvalidCurrencyError):
            PaymentRequest(amount=1, currency="DOLLARS", user_id=1, method="paypal")

    def test_rejects_non_positive_amount(self) -> None:
        with pytest.raises(InvalidAmountError):
            PaymentRequest(amount=0, currency="USD", user_id=1, method="paypal")


class TestRefundRequest:
    def test_normalizes_amount(self) -> None:
        request = RefundRequest(
            transaction_id="tx1", user_id=1, reason="r", amount="50", currency="usd"
        )

        assert request.amount == Decimal("50")
        assert request.currency == "USD"

    def test_rejects_negative_amount(self) -> None:
        with pytest.raises(InvalidAmountError):
            RefundRequest(transaction_id="tx1", user_id=1, reason="r", amount=-5, currency="USD")
