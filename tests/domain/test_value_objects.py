"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.value_objects import BarcodeCode, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "OMR"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        m = Money.of(1.5)
        assert m.amount == Decimal("1.5")

    def test_of_factory_with_currency(self):
        assert Money.of("2", "USD").currency == "USD"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_label_uses_three_decimals_and_currency(self):
        assert Money.of("1.5").label() == "1.500 OMR"
        assert Money.of("12").label() == "12.000 OMR"

    def test_label_rounds_extra_decimals(self):
        assert Money.of("0.12345").label() == "0.123 OMR"

    def test_str_is_label(self):
        assert str(Money.of("3.25", "USD")) == "3.250 USD"


# ── BarcodeCode ──────────────────────────────────────────────────────────────


class TestBarcodeCode:

    def test_valid_code(self):
        code = BarcodeCode("0011135808409")
        assert code.payload == "001113580840"
        assert code.check_digit == 9
        assert str(code) == "0011135808409"

    def test_equality_by_value(self):
        assert BarcodeCode("4006381333931") == BarcodeCode("4006381333931")

    def test_wrong_check_digit_rejected(self):
        with pytest.raises(ValidationError, match="expected 9"):
            BarcodeCode("0011135808400")

    @pytest.mark.parametrize(
        "value", ["", "123", "00111358084090", "001113580840x", "００１１１３５８０８４０９"]
    )
    def test_wrong_shape_rejected(self, value):
        with pytest.raises(ValidationError, match="exactly 13 digits"):
            BarcodeCode(value)

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            BarcodeCode(11135808409)  # type: ignore[arg-type]
