"""
Test suite for currency module

Tests Money arithmetic, rounding and formatting.
All monetary calculations must use Decimal precision.
"""

import pytest
from decimal import Decimal

from bank_sim.currency import Money, Currency, as_money, to_decimal


class TestMoney:
    """Test Money class operations"""

    def test_money_creation(self):
        """Test Money object creation and rounding"""
        money = Money(Decimal('100.50'), Currency.USD)
        assert money.amount == Decimal('100.50')
        assert money.currency == Currency.USD

        # Amounts are kept exactly; rounding happens for display
        assert Money(Decimal('100.555')).amount == Decimal('100.555')
        assert Money(Decimal('100.555')).rounded().amount == Decimal('100.56')
        assert Money(Decimal('100.554')).rounded().amount == Decimal('100.55')

    def test_float_input_converted_via_string(self):
        assert Money(0.1).amount == Decimal('0.10')
        assert Money(0.1) + Money(0.2) == Money(Decimal('0.30'))

    def test_money_arithmetic(self):
        a = Money(Decimal('100.50'))
        b = Money(Decimal('50.25'))

        assert (a + b).amount == Decimal('150.75')
        assert (a - b).amount == Decimal('50.25')
        assert (a * Decimal('0.05')).amount == Decimal('5.025')
        assert (-a).amount == Decimal('-100.50')
        assert abs(Money(Decimal('-3'))).amount == Decimal('3.00')

    def test_comparisons(self):
        assert Money(Decimal('1')) < Money(Decimal('2'))
        assert Money(Decimal('2')) >= Money(Decimal('2.00'))
        assert Money(Decimal('-1')) <= Money.zero()
        assert Money(Decimal('3')) > Money(Decimal('2.99'))

    def test_predicates(self):
        assert Money.zero().is_zero()
        assert Money(Decimal('0.01')).is_positive()
        assert Money(Decimal('-0.01')).is_negative()

    def test_immutable(self):
        money = Money(Decimal('1'))
        with pytest.raises(AttributeError):
            money.amount = Decimal('2')

    def test_formatting(self):
        assert Money(Decimal('1050')).to_string() == "USD 1,050.00"
        assert Money(Decimal('1050')).format() == "$1050.00"
        assert Money(Decimal('-25.5')).format() == "-$25.50"

    def test_formatting_rounds_half_up(self):
        assert Money(Decimal('0.125')).format() == "$0.13"
        assert Money(Decimal('1234.005')).to_string() == "USD 1,234.01"
        assert Money(Decimal('-0.004')).format() == "$0.00"

    def test_out_of_range_amount(self):
        """Amounts too large to show to the cent raise ValueError"""
        with pytest.raises(ValueError, match="out of range"):
            Money(Decimal('1e27'))

        big = Money(Decimal('9e25'))
        with pytest.raises(ValueError, match="out of range"):
            big * Decimal('100')

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValueError, match="must be finite"):
            Money(Decimal('NaN'))


class TestHelpers:
    """Test conversion helpers"""

    def test_to_decimal(self):
        assert to_decimal("12.30") == Decimal('12.30')
        assert to_decimal(5) == Decimal('5')
        assert to_decimal(Decimal('1.5')) == Decimal('1.5')

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
    def test_to_decimal_rejects_garbage(self, value):
        with pytest.raises(ValueError, match="Cannot convert"):
            to_decimal(value)

    def test_as_money(self):
        money = Money(Decimal('3'))
        assert as_money(money) is money
        assert as_money("7.5") == Money(Decimal('7.50'))

    def test_currency_lookup(self):
        assert Currency.from_code("usd") is Currency.USD
        with pytest.raises(ValueError, match="Unsupported currency"):
            Currency.from_code("XYZ")
