from __future__ import annotations

from decimal import Decimal

DEFAULT_BASE_CURRENCY = "USD"
DEFAULT_CONVERSION_RATE = Decimal("1.2")


class CurrencyConverter:
    """Single-rate currency conversion.

    The base currency passes through unchanged; every other currency is
    multiplied by one configured rate. This is a placeholder, not a rate
    table: a real system would inject a rate lookup keyed by currency pair.
    """

    def __init__(
        self,
        rate: Decimal = DEFAULT_CONVERSION_RATE,
        base_currency: str = DEFAULT_BASE_CURRENCY,
    ) -> None:
        if rate <= 0:
            raise ValueError(f"Conversion rate must be greater than 0, got {rate}")
        self._rate = rate
        self._base_currency = base_currency

    @property
    def rate(self) -> Decimal:
        return self._rate

    @property
    def base_currency(self) -> str:
        return self._base_currency

    def convert(self, amount: Decimal, currency: str) -> Decimal:
        if currency == self._base_currency:
            return amount
        return amount * self._rate
