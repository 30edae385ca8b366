"""Payment domain events.

Frozen dataclass events record observable facts of a payment run (risk
classification, confirmation, analytics). They are handed to an EventSink;
the domain stays free of any transport or format.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from payment_orchestrator.domain.services.fraud_analyzer import RiskLevel, RiskTier


@dataclass(frozen=True, slots=True)
class DomainEvent:
    name: ClassVar[str] = "domain_event"

    def as_fields(self) -> dict[str, Any]:
        """Flatten the event into primitive values for structured logging."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, Decimal):
                value = str(value)
            result[f.name] = value
        return result


@dataclass(frozen=True, slots=True)
class RiskAssessed(DomainEvent):
    name: ClassVar[str] = "fraud_risk_assessed"

    user_id: Any
    amount: Decimal
    tier: RiskTier
    level: RiskLevel
    check_level: int


@dataclass(frozen=True, slots=True)
class PaymentConfirmation(DomainEvent):
    """Confirmation addressed to the paying user; delivery is not tracked."""

    name: ClassVar[str] = "payment_confirmation"

    user_id: Any
    amount: Decimal
    currency: str

    @property
    def message(self) -> str:
        return f"Your payment of {self.amount} {self.currency} was successful."


@dataclass(frozen=True, slots=True)
class PaymentAnalytics(DomainEvent):
    name: ClassVar[str] = "payment_analytics"

    user_id: Any
    amount: Decimal
    currency: str
    method: str


@dataclass(frozen=True, slots=True)
class RefundRecorded(DomainEvent):
    name: ClassVar[str] = "refund_recorded"

    transaction_id: str
    user_id: Any
    amount: Decimal
    net_amount: Decimal
    currency: str
