"""Gateway endpoint routing.

Routing is an exhaustive match over PaymentMethod, so every method the
validator accepts has an endpoint. A new method without a route fails type
checking (assert_never) instead of being silently dropped at runtime.
"""

from __future__ import annotations

from typing import assert_never

from payment_orchestrator.domain.value_objects import PaymentMethod

CREDIT_ENDPOINT = "/payments/credit"
PAYPAL_ENDPOINT = "/payments/paypal"
REFUND_ENDPOINT = "/payments/refund"


def endpoint_for(method: PaymentMethod) -> str:
    match method:
        case PaymentMethod.CREDIT_CARD:
            return CREDIT_ENDPOINT
        case PaymentMethod.PAYPAL:
            return PAYPAL_ENDPOINT
        case _:
            assert_never(method)
