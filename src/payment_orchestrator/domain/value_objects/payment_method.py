from __future__ import annotations

from enum import Enum

from payment_orchestrator.domain.exceptions import UnsupportedMethodError


class PaymentMethod(Enum):
    """Closed set of supported payment methods.

    Adding a member here is a deliberate decision: validation rules and
    gateway routing both match exhaustively on this enum.
    """

    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"

    @classmethod
    def parse(cls, value: PaymentMethod | str) -> PaymentMethod:
        """Resolve a raw method value into a PaymentMethod.

        Args:
            value: A PaymentMethod member or its wire value (e.g. "paypal").

        Returns:
            The matching PaymentMethod.

        Raises:
            UnsupportedMethodError: If the value names no supported method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedMethodError(value) from e
