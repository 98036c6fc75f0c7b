"""Tests for input validation and amount parsing."""

from decimal import Decimal

import pytest

from finwise.domain.errors import ValidationError
from finwise.domain.validation import (
    normalize_items,
    require_non_negative_balance,
    require_positive_amount,
    to_money,
)
from finwise.utils.amount_parser import parse_amount


class TestParseAmount:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123.45", Decimal("123.45")),
            ("$1,234.56", Decimal("1234.56")),
            ("(10.00)", Decimal("-10.00")),
            (" -7 ", Decimal("-7")),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)


class TestToMoney:
    def test_decimal_passes_through(self):
        value = Decimal("0.1")
        assert to_money(value) is value

    @pytest.mark.parametrize("value", [0.1, True, None, Decimal("NaN"), Decimal("Infinity")])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            to_money(value)

    def test_bad_string_is_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid amount"):
            to_money("twelve")


class TestGuards:
    def test_zero_balance_allowed(self):
        assert require_non_negative_balance(0) == Decimal("0")

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError):
            require_positive_amount(Decimal("0.00"))

    def test_string_items_rejected(self):
        with pytest.raises(ValidationError):
            normalize_items("bread")
