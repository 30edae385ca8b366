"""Transaction entity: the immutable record of one processed payment."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime
    from decimal import Decimal

    from payment_orchestrator.domain.value_objects import PaymentMethod


def freeze_metadata(metadata: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Return a read-only deep copy of caller-supplied metadata.

    Later mutation of the caller's mapping (or of nested values in it)
    does not reach the returned view.
    """
    return MappingProxyType(copy.deepcopy(dict(metadata or {})))


@dataclass(frozen=True, slots=True)
class Transaction:
    """Immutable record of a successfully assembled payment.

    Created exactly once per process_payment call and never mutated. The
    orchestrator keeps no reference after returning it.

    Fields:
        original_amount: Amount as requested, before discount and conversion.
        final_amount: Amount after discount, then currency conversion.
        fraud_checked: The fraud check level that was applied (0 = skipped).
        timestamp: UTC instant at which the record was built.
    """

    user_id: Any
    original_amount: Decimal
    final_amount: Decimal
    currency: str
    payment_method: PaymentMethod
    metadata: Mapping[str, Any]
    discount_code: str | None
    fraud_checked: int
    timestamp: datetime

    @classmethod
    def create(
        cls,
        *,
        user_id: Any,
        original_amount: Decimal,
        final_amount: Decimal,
        currency: str,
        payment_method: PaymentMethod,
        metadata: Mapping[str, Any] | None,
        discount_code: str | None,
        fraud_checked: int,
        created_at: datetime,
    ) -> Transaction:
        """Factory method assembling a Transaction from post-pipeline values.

        Args:
            user_id: Opaque identifier of the paying user.
            original_amount: Requested amount.
            final_amount: Discounted and converted amount.
            currency: ISO currency code of the request.
            payment_method: Validated payment method.
            metadata: Method-specific fields; deep-copied, never aliased.
            discount_code: Code as supplied by the caller (may be unknown).
            fraud_checked: Fraud check level applied.
            created_at: Build instant (UTC) from the TimeProvider.

        Returns:
            A new Transaction instance.
        """
        return cls(
            user_id=user_id,
            original_amount=original_amount,
            final_amount=final_amount,
            currency=currency,
            payment_method=payment_method,
            metadata=freeze_metadata(metadata),
            discount_code=discount_code,
            fraud_checked=fraud_checked,
            timestamp=created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the record as a JSON-friendly dict (ISO-8601 timestamp)."""
        return {
            "userId": self.user_id,
            "originalAmount": str(self.original_amount),
            "finalAmount": str(self.final_amount),
            "currency": self.currency,
            "paymentMethod": self.payment_method.value,
            "metadata": copy.deepcopy(dict(self.metadata)),
            "discountCode": self.discount_code,
            "fraudChecked": self.fraud_checked,
            "timestamp": self.timestamp.isoformat(),
        }
