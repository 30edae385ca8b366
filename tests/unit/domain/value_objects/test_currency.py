import pytest

from payment_orchestrator.domain.exceptions import InvalidCurrencyError
from payment_orchestrator.domain.value_objects import Currency


class TestCurrencyCreation:
    def test_creates_valid_currency(self) -> None:
        currency = Currency(code="EUR")

        assert currency.code == "EUR"
        assert str(currency) == "EUR"

    def test_equal_codes_are_equal(self) -> None:
        assert Currency("USD") == Currency("USD")


class TestCurrencyNormalization:
    def test_upper_cases_code(self) -> None:
        assert Currency(code="usd").code == "USD"

    def test_trims_whitespace(self) -> None:
        assert Currency(code="  gbp ").code == "GBP"


class TestCurrencyValidation:
    @pytest.mark.parametrize("code", ["", "   ", "US", "EURO", "U5D", "€UR"])
    def test_raises_for_malformed_code(self, code: str) -> None:
        with pytest.raises(InvalidCurrencyError):
            Currency(code=code)

    def test_raises_for_non_string(self) -> None:
        with pytest.raises(InvalidCurrencyError):
            Currency(code=840)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        currency = Currency("USD")

        with pytest.raises(AttributeError):
            currency.code = "EUR"  # type: ignore[misc]
