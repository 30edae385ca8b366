from __future__ import annotations

from dataclasses import dataclass

from payment_orchestrator.domain.exceptions import InvalidCurrencyError

CODE_LENGTH = 3


@dataclass(frozen=True)
class Currency:
    """Domain value object for ISO 4217 currency codes.

    Normalization:
      - Whitespace is trimmed
      - Letters are upper-cased ("usd" -> "USD")
      - Exactly three ASCII letters remain
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidCurrencyError(f"Currency code must be a string, got {self.code!r}")

        normalized = self.code.strip().upper()

        if normalized != self.code:
            object.__setattr__(self, "code", normalized)

        if len(normalized) != CODE_LENGTH or not (normalized.isascii() and normalized.isalpha()):
            raise InvalidCurrencyError(
                f"Currency must be a three-letter ISO 4217 code, got {self.code!r}"
            )

    def __str__(self) -> str:
        return self.code
