"""Tests for exact decimal arithmetic."""

from decimal import Decimal, getcontext

from finwise.domain.money import exact_add, exact_subtract, exact_sum


class TestExactArithmetic:
    def test_sum_of_nothing_is_zero(self):
        total = exact_sum([])

        assert total == Decimal("0")
        assert isinstance(total, Decimal)

    def test_sum_wider_than_default_context(self):
        assert getcontext().prec < 40
        values = [Decimal("1E+20"), Decimal("1E-20"), Decimal("3")]

        assert exact_sum(values) == Decimal("100000000000000000003.00000000000000000001")

    def test_sum_with_carries(self):
        values = [Decimal("9" * 35)] * 12

        assert exact_sum(values) == Decimal("11" + "9" * 33 + "88")

    def test_subtract_keeps_every_digit(self):
        assert exact_subtract(Decimal("1E+30"), Decimal("1")) == Decimal("9" * 30)

    def test_subtract_can_go_negative(self):
        assert exact_subtract(Decimal("1"), Decimal("1.000000000000000000000000000000001")) == Decimal(
            "-1E-33"
        )

    def test_add(self):
        assert exact_add(Decimal("0.1"), Decimal("0.2")) == Decimal("0.3")

    def test_global_context_untouched(self):
        prec = getcontext().prec
        exact_sum([Decimal("1E+50"), Decimal("1E-50")])

        assert getcontext().prec == prec
