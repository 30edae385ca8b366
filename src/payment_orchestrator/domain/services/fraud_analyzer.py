"""Amount-tiered fraud risk classification.

The analyzer classifies; it never rejects. No amount or level combination
raises, so a risk assessment can never abort a payment.

Tiers:
    amount <  100  -> LIGHT check   (< 10 very low risk, else low risk)
    amount >= 100  -> HEAVY check   (< 1000 medium risk, else high risk)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

HEAVY_CHECK_THRESHOLD = Decimal("100")
VERY_LOW_RISK_CEILING = Decimal("10")
HIGH_RISK_THRESHOLD = Decimal("1000")


class RiskTier(Enum):
    LIGHT = "light"
    HEAVY = "heavy"


class RiskLevel(Enum):
    VERY_LOW = "very low risk"
    LOW = "low risk"
    MEDIUM = "medium risk"
    HIGH = "high risk"


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Outcome of one fraud check."""

    user_id: Any
    amount: Decimal
    tier: RiskTier
    level: RiskLevel
    check_level: int


class FraudAnalyzer:
    def classify(self, amount: Decimal) -> tuple[RiskTier, RiskLevel]:
        if amount < HEAVY_CHECK_THRESHOLD:
            level = RiskLevel.VERY_LOW if amount < VERY_LOW_RISK_CEILING else RiskLevel.LOW
            return RiskTier.LIGHT, level

        level = RiskLevel.MEDIUM if amount < HIGH_RISK_THRESHOLD else RiskLevel.HIGH
        return RiskTier.HEAVY, level

    def check(self, level: int, user_id: Any, amount: Decimal) -> RiskAssessment | None:
        """Run the fraud check gated by the caller's check level.

        Returns:
            None when level <= 0 (check skipped, nothing to record),
            otherwise the RiskAssessment for the amount.
        """
        if level <= 0:
            return None

        tier, risk = self.classify(amount)
        return RiskAssessment(
            user_id=user_id,
            amount=amount,
            tier=tier,
            level=risk,
            check_level=level,
        )
