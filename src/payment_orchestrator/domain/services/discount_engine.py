"""Discount codes mapped to pure amount transforms.

The rule table is configuration: it is supplied at construction and frozen.
Rules are plain callables (Decimal -> Decimal); PercentageOff and FlatOff
cover the built-in codes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

DiscountRule = Callable[[Decimal], Decimal]


@dataclass(frozen=True, slots=True)
class PercentageOff:
    """Take a fraction off the amount: PercentageOff(Decimal("0.20")) is 20% off."""

    rate: Decimal

    def __call__(self, amount: Decimal) -> Decimal:
        return amount * (Decimal(1) - self.rate)


@dataclass(frozen=True, slots=True)
class FlatOff:
    """Subtract a fixed value.

    With no floor the result may go negative, as WELCOME10 does on small
    amounts; pass floor to clamp it.
    """

    value: Decimal
    floor: Decimal | None = None

    def __call__(self, amount: Decimal) -> Decimal:
        discounted = amount - self.value
        if self.floor is not None and discounted < self.floor:
            return self.floor
        return discounted


DEFAULT_DISCOUNT_RULES: Mapping[str, DiscountRule] = MappingProxyType(
    {
        "SUMMER20": PercentageOff(Decimal("0.20")),
        "WELCOME10": FlatOff(Decimal("10")),
    }
)


class DiscountEngine:
    def __init__(self, rules: Mapping[str, DiscountRule] | None = None) -> None:
        self._rules: Mapping[str, DiscountRule] = MappingProxyType(
            dict(DEFAULT_DISCOUNT_RULES if rules is None else rules)
        )

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(self._rules)

    def is_known(self, code: str | None) -> bool:
        return bool(code) and code in self._rules

    def apply(self, amount: Decimal, code: str | None) -> Decimal:
        """Apply the rule registered for code.

        A missing code and an unknown code both leave the amount unchanged;
        unknown codes are ignored, not rejected.
        """
        if not code:
            return amount

        rule = self._rules.get(code)
        if rule is None:
            return amount

        return rule(amount)
