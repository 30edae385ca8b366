"""Domain services - Stateless business rules."""

from payment_orchestrator.domain.services.currency_converter import CurrencyConverter
from payment_orchestrator.domain.services.discount_engine import (
    DEFAULT_DISCOUNT_RULES,
    DiscountEngine,
    DiscountRule,
    FlatOff,
    PercentageOff,
)
from payment_orchestrator.domain.services.fraud_analyzer import (
    FraudAnalyzer,
    RiskAssessment,
    RiskLevel,
    RiskTier,
)
from payment_orchestrator.domain.services.routing import REFUND_ENDPOINT, endpoint_for
from payment_orchestrator.domain.services.validator import PaymentValidator

__all__ = [
    "DEFAULT_DISCOUNT_RULES",
    "REFUND_ENDPOINT",
    "CurrencyConverter",
    "DiscountEngine",
    "DiscountRule",
    "FlatOff",
    "FraudAnalyzer",
    "PaymentValidator",
    "PercentageOff",
    "RiskAssessment",
    "RiskLevel",
    "RiskTier",
    "endpoint_for",
]
