"""payment-orchestrator: validation, fraud tiers, discounts, conversion and gateway dispatch."""

from payment_orchestrator.config import ProcessorSettings
from payment_orchestrator.domain.entities import Refund, Transaction
from payment_orchestrator.domain.exceptions import (
    GatewayDispatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidMetadataError,
    PaymentError,
    UnsupportedMethodError,
)
from payment_orchestrator.domain.value_objects import PaymentMethod
from payment_orchestrator.processor import PaymentProcessor, create_processor

__all__ = [
    "GatewayDispatchError",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidMetadataError",
    "PaymentError",
    "PaymentMethod",
    "PaymentProcessor",
    "ProcessorSettings",
    "Refund",
    "Transaction",
    "UnsupportedMethodError",
    "create_processor",
]
