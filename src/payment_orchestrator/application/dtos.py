"""Data Transfer Objects for use case input/output."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from payment_orchestrator.domain.exceptions import InvalidAmountError
from payment_orchestrator.domain.value_objects import Currency, PaymentMethod

if TYPE_CHECKING:
    from collections.abc import Mapping


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Coerce a caller-supplied amount into a positive, finite Decimal.

    Floats go through str() so 0.1 stays 0.1 rather than its binary expansion.

    Raises:
        InvalidAmountError: Not a number, not finite, or not greater than 0.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}") from e

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than 0, got {value!r}")

    return amount


@dataclass(frozen=True)
class PaymentRequest:
    """Input DTO for the ProcessPayment use case.

    method is resolved before amount and currency are checked, so an
    unsupported method is always the first error reported.
    """

    amount: Decimal
    currency: str
    user_id: Any
    method: PaymentMethod | str
    metadata: Mapping[str, Any] | None = None
    discount_code: str | None = None
    fraud_check_level: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", PaymentMethod.parse(self.method))
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "currency", Currency(self.currency).code)


@dataclass(frozen=True)
class RefundRequest:
    """Input DTO for the RefundPayment use case."""

    transaction_id: str
    user_id: Any
    reason: str
    amount: Decimal
    currency: str
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "currency", Currency(self.currency).code)


@dataclass(frozen=True)
class GatewayResponse:
    """Acknowledgement returned by a PaymentGateway.post() call."""

    status: str
    reference: str | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)
