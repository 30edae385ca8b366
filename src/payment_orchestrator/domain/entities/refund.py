from __future__ import annotations

import copy
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from payment_orchestrator.domain.entities.transaction import freeze_metadata

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

REFUND_FEE_RATE = Decimal("0.05")


@dataclass(frozen=True, slots=True)
class Refund:
    """Immutable refund record.

    net_amount is derived: amount minus the fixed refund fee.
    The referenced transaction is NOT looked up; transaction_id is opaque.

    Use the create() factory method to construct instances.
    """

    transaction_id: str
    user_id: Any
    reason: str
    amount: Decimal
    currency: str
    metadata: Mapping[str, Any]
    date: datetime
    net_amount: Decimal

    @classmethod
    def create(
        cls,
        *,
        transaction_id: str,
        user_id: Any,
        reason: str,
        amount: Decimal,
        currency: str,
        metadata: Mapping[str, Any] | None,
        created_at: datetime,
    ) -> Refund:
        return cls(
            transaction_id=transaction_id,
            user_id=user_id,
            reason=reason,
            amount=amount,
            currency=currency,
            metadata=freeze_metadata(metadata),
            date=created_at,
            net_amount=amount - amount * REFUND_FEE_RATE,
        )

    @property
    def fee(self) -> Decimal:
        return self.amount - self.net_amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "transactionId": self.transaction_id,
            "userId": self.user_id,
            "reason": self.reason,
            "amount": str(self.amount),
            "currency": self.currency,
            "metadata": copy.deepcopy(dict(self.metadata)),
            "date": self.date.isoformat(),
            "netAmount": str(self.net_amount),
        }
