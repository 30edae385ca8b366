from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from payment_orchestrator.domain.exceptions import InvalidMetadataError
from payment_orchestrator.domain.value_objects import PaymentMethod

if TYPE_CHECKING:
    from collections.abc import Mapping

CREDIT_CARD_FIELDS = ("cardNumber", "expiry")
PAYPAL_FIELDS = ("paypalAccount",)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not value


def _missing(metadata: Mapping[str, Any], fields: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(name for name in fields if _is_blank(metadata.get(name)))


class PaymentValidator:
    """Checks method-specific metadata before anything else runs.

    Stateless; a single instance may be shared between processors.
    """

    def validate(self, method: PaymentMethod | str, metadata: Mapping[str, Any] | None) -> PaymentMethod:
        """Validate the method and its metadata.

        Args:
            method: Requested payment method (member or wire value).
            metadata: Method-specific fields.

        Returns:
            The resolved PaymentMethod.

        Raises:
            UnsupportedMethodError: Method is not in the supported set.
            InvalidMetadataError: A required field is missing or blank.
        """
        resolved = PaymentMethod.parse(method)
        metadata = metadata or {}

        match resolved:
            case PaymentMethod.CREDIT_CARD:
                missing = _missing(metadata, CREDIT_CARD_FIELDS)
                if missing:
                    raise InvalidMetadataError("Invalid card metadata", missing=missing)
            case PaymentMethod.PAYPAL:
                missing = _missing(metadata, PAYPAL_FIELDS)
                if missing:
                    raise InvalidMetadataError("Invalid PayPal metadata", missing=missing)
            case _:
                assert_never(resolved)

        return resolved
