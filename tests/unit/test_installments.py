"""Unit tests for credit card installment generation"""

import pytest
from datetime import date
from decimal import Decimal
from cashflow_engine.domain.billing import assign_billing_cycle
from cashflow_engine.domain.exceptions import InvalidInstallmentInputError
from cashflow_engine.domain.installments import MAX_AMOUNT, generate_installments, to_cents


def _generate(amount, installments, purchase=date(2025, 1, 9), closing_day=10, due_day=15):
    return generate_installments(
        purchase_date=purchase,
        amount=amount,
        installments=installments,
        closing_day=closing_day,
        due_day=due_day,
    )


def test_remainder_goes_to_first_installment():
    """$100.01 in 3x -> 33.35 + 33.33 + 33.33"""
    series = _generate(100.01, 3)

    assert [inst.amount for inst in series] == [Decimal("33.35"), Decimal("33.33"), Decimal("33.33")]
    assert sum(inst.amount for inst in series) == Decimal("100.01")


def test_even_division_all_equal():
    """Test series with evenly divisible amount"""
    series = _generate(90, 3)
    assert [inst.amount_cents for inst in series] == [3000, 3000, 3000]


def test_indivisible_cents_sum_exactly():
    """Test $100 in 3x still sums to 10000 cents"""
    series = _generate(100, 3)
    assert sum(inst.amount_cents for inst in series) == 10000
    assert series[0].amount_cents >= series[1].amount_cents
    assert series[1].amount_cents == series[2].amount_cents


@pytest.mark.parametrize("amount", ["0", "0.01", "0.1", "19.99", "1234.56", "99999.99", "0.07"])
@pytest.mark.parametrize("installments", [1, 2, 3, 7, 12, 24])
def test_sum_matches_total_to_the_cent(amount, installments):
    """Series always sums to the rounded total, remainder only on the first"""
    series = _generate(float(amount), installments)

    assert len(series) == installments
    assert sum(inst.amount for inst in series) == Decimal(amount)
    assert all(inst.amount_cents == series[-1].amount_cents for inst in series[1:])
    assert series[0].amount_cents - series[-1].amount_cents < installments


def test_more_installments_than_cents():
    """Test 2 cents in 3x -> first takes both cents"""
    series = _generate(0.02, 3)
    assert [inst.amount_cents for inst in series] == [2, 0, 0]


def test_single_installment_matches_billing_cycle():
    """Test 1x uses the purchase's billing cycle (February, month 1)"""
    purchase = date(2025, 1, 10)
    series = _generate(50, 1, purchase=purchase)
    bill = assign_billing_cycle(purchase, 10, 15)

    assert len(series) == 1
    assert (series[0].statement_month, series[0].statement_year) == (1, 2025)
    assert (series[0].statement_month, series[0].statement_year) == (bill.statement_month, bill.statement_year)
    assert series[0].due_date == bill.due_date == date(2025, 2, 15)


def test_installments_advance_one_statement_each():
    """Test 3x on Jan/Feb/Mar statements (0-based months 0, 1, 2)"""
    series = _generate(300, 3, purchase=date(2025, 1, 9))

    assert [inst.index for inst in series] == [1, 2, 3]
    assert [inst.statement_month for inst in series] == [0, 1, 2]
    assert [inst.due_date for inst in series] == [date(2025, 1, 15), date(2025, 2, 15), date(2025, 3, 15)]


def test_december_purchase_wraps_into_new_year():
    """Test December purchase before closing -> Dec, Jan, Feb statements"""
    series = _generate(300, 3, purchase=date(2025, 12, 9))

    assert [(i.statement_month, i.statement_year) for i in series] == [(11, 2025), (0, 2026), (1, 2026)]


def test_december_purchase_on_closing_day_starts_in_january():
    """Test December purchase on closing day -> first statement January"""
    series = _generate(200, 2, purchase=date(2025, 12, 10))

    assert [(i.statement_month, i.statement_year) for i in series] == [(0, 2026), (1, 2026)]


def test_due_day_before_closing_day_pays_following_month():
    """Test closing 20, due 10 -> each statement due the month after"""
    series = _generate(200, 2, purchase=date(2025, 1, 25), closing_day=20, due_day=10)

    assert [i.statement_month for i in series] == [1, 2]
    assert [i.due_date for i in series] == [date(2025, 3, 10), date(2025, 4, 10)]


def test_due_day_31_clamps_per_month():
    """Test due day 31 clamped to each month's length"""
    series = _generate(400, 4, purchase=date(2025, 1, 20), closing_day=10, due_day=31)

    assert [i.due_date for i in series] == [
        date(2025, 2, 28),
        date(2025, 3, 31),
        date(2025, 4, 30),
        date(2025, 5, 31),
    ]


def test_due_day_31_leap_february():
    """Test due day 31 in leap February -> Feb 29"""
    series = _generate(100, 1, purchase=date(2028, 1, 20), closing_day=10, due_day=31)
    assert series[0].due_date == date(2028, 2, 29)


def test_installment_ids_are_deterministic():
    """Test ids depend only on purchase date and index"""
    first = _generate(100, 3, purchase=date(2025, 3, 7))
    second = _generate(100, 3, purchase=date(2025, 3, 7))

    assert [i.installment_id for i in first] == ["2025-03-07-i1", "2025-03-07-i2", "2025-03-07-i3"]
    assert [i.installment_id for i in first] == [i.installment_id for i in second]


def test_accepts_decimal_amount():
    """Test Decimal input is used as-is"""
    series = _generate(Decimal("10.00"), 4)
    assert [i.amount_cents for i in series] == [250, 250, 250, 250]


def test_zero_installments_rejected():
    """Test installments < 1 raises"""
    with pytest.raises(InvalidInstallmentInputError, match="installments"):
        _generate(100, 0)


def test_negative_amount_rejected():
    """Test negative amount raises"""
    with pytest.raises(InvalidInstallmentInputError, match="amount"):
        _generate(-0.01, 2)


def test_to_cents_rounds_half_up():
    """Test cent conversion avoids float drift and banker's rounding"""
    assert to_cents(100.01) == 10001
    assert to_cents("0.005") == 1
    assert to_cents(Decimal("12.344")) == 1234


@pytest.mark.parametrize("amount", [Decimal("1000000000.01"), Decimal("1e27"), float("inf"), Decimal("NaN")])
def test_out_of_range_amount_rejected(amount):
    """Test amounts above MAX_AMOUNT or not finite raise instead of overflowing"""
    with pytest.raises(InvalidInstallmentInputError, match="amount"):
        _generate(amount, 3)


def test_maximum_amount_accepted():
    """Test MAX_AMOUNT itself still splits to the cent"""
    series = _generate(MAX_AMOUNT, 3)
    assert sum(inst.amount_cents for inst in series) == 100000000000
