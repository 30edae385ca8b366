"""
Processor settings using pydantic-settings v2.

Settings are frozen once built; a PaymentProcessor captures one instance for
its whole lifetime, so concurrent calls only ever read configuration.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal
from types import MappingProxyType

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payment_orchestrator.domain.exceptions import InvalidCurrencyError
from payment_orchestrator.domain.services.currency_converter import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_CONVERSION_RATE,
)
from payment_orchestrator.domain.services.discount_engine import DEFAULT_DISCOUNT_RULES
from payment_orchestrator.domain.value_objects import Currency


class ProcessorSettings(BaseSettings):
    conversion_rate: Decimal = Field(default=DEFAULT_CONVERSION_RATE, gt=0)
    base_currency: str = DEFAULT_BASE_CURRENCY
    # Rules are callables, so they come from code, not from the environment
    discount_rules: Mapping[str, Callable[[Decimal], Decimal]] = Field(
        default_factory=lambda: dict(DEFAULT_DISCOUNT_RULES),
        exclude=True,
        validate_default=True,
    )

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_",
        env_file=".env",
        extra="ignore",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    @field_validator("base_currency")
    @classmethod
    def _normalize_currency(cls, v: str) -> str:
        try:
            return Currency(v).code
        except InvalidCurrencyError as e:
            raise ValueError(str(e)) from e

    @field_validator("discount_rules")
    @classmethod
    def _freeze_rules(
        cls, v: Mapping[str, Callable[[Decimal], Decimal]]
    ) -> Mapping[str, Callable[[Decimal], Decimal]]:
        return MappingProxyType(dict(v))

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()
