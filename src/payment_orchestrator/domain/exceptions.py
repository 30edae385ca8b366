"""Domain exceptions for payment-orchestrator.

Exception hierarchy:
    PaymentError (base)
    ├── Request Validation Errors
    │   ├── UnsupportedMethodError
    │   ├── InvalidMetadataError
    │   ├── InvalidAmountError
    │   └── InvalidCurrencyError
    └── Dispatch Errors
        └── GatewayDispatchError

Validation errors are raised before any side effect: no fraud check, no
gateway call and no transaction record happen for a rejected request.
Dispatch errors are raised by gateway adapters and reach the caller unchanged.
"""

from __future__ import annotations


class PaymentError(Exception):
    """Base exception for all payment-orchestrator errors.

    Catch this to separate business failures from programming errors
    (TypeError, AttributeError, ...) raised by collaborators.
    """


# =============================================================================
# Request Validation Errors
# =============================================================================


class UnsupportedMethodError(PaymentError):
    """Raised when a payment method is outside the supported set.

    The supported set is closed (see PaymentMethod). There is no fallback
    route for unknown methods.
    """

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(f"Unsupported payment method: {method!r}")


class InvalidMetadataError(PaymentError):
    """Raised when method-specific metadata is missing required fields.

    Required fields:
        - credit_card: cardNumber, expiry
        - paypal: paypalAccount
    """

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)


class InvalidAmountError(PaymentError):
    """Raised when a payment or refund amount is not a positive decimal."""


class InvalidCurrencyError(PaymentError):
    """Raised when a currency code is not a three-letter ISO 4217 code."""


# =============================================================================
# Dispatch Errors
# =============================================================================


class GatewayDispatchError(PaymentError):
    """Raised by gateway adapters when the gateway rejects or fails a post.

    This is FATAL for process_payment: the transaction has already been
    assembled, but notification and analytics do not fire. The orchestrator
    never retries; resilience is the gateway adapter's concern.
    """

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        self.endpoint = endpoint
        super().__init__(message)
