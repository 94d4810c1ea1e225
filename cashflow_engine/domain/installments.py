"""Installment series generation for credit card purchases"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Union

from cashflow_engine.domain.billing import assign_billing_cycle, due_date_for_statement
from cashflow_engine.domain.exceptions import InvalidInstallmentInputError
from cashflow_engine.domain.models import Installment
from cashflow_engine.utils.date_utils import shift_month

# Largest purchase accepted; keeps cent arithmetic inside the default decimal precision
MAX_AMOUNT = Decimal("1000000000")


def to_decimal(amount: Union[Decimal, float, int, str]) -> Decimal:
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def to_cents(amount: Union[Decimal, float, int, str]) -> int:
    """Convert a money amount to integer cents, rounding half up"""
    return int((to_decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def installment_id(purchase_date: date, index: int) -> str:
    return f"{purchase_date.isoformat()}-i{index}"


def generate_installments(
    purchase_date: date,
    amount: Union[Decimal, float, int, str],
    installments: int,
    closing_day: int,
    due_day: int,
) -> List[Installment]:
    """
    Split a credit card purchase into monthly installments.

    Requirements:
    - Amounts are computed in integer cents so the series sums to the total exactly
    - First installment absorbs the rounding remainder (< installments cents)
    - Installment 1 lands on the statement assign_billing_cycle picks; each
      following installment lands one statement later

    Args:
        purchase_date: Date of the purchase
        amount: Total purchase amount
        installments: Number of installments (>= 1)
        closing_day: Card closing day (1-31)
        due_day: Card due day (1-31)

    Returns:
        List of Installment objects ordered by index

    Raises:
        InvalidInstallmentInputError: installments < 1, or amount negative,
            not finite or above MAX_AMOUNT

    Example:
        100.01 in 3x -> [33.35, 33.33, 33.33]
        10001 cents / 3 = 3333 base, remainder 2
        First installment: 3333 + 2 = 3335
    """
    if installments < 1:
        raise InvalidInstallmentInputError(f"installments must be >= 1, got {installments}")

    value = to_decimal(amount)
    if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
        raise InvalidInstallmentInputError(f"amount must be between 0 and {MAX_AMOUNT}, got {amount}")

    total_cents = to_cents(amount)

    first_bill = assign_billing_cycle(purchase_date, closing_day, due_day)

    # Calculate base amount and remainder
    base_cents = total_cents // installments
    remainder_cents = total_cents - base_cents * installments

    series = []
    for i in range(installments):
        index = i + 1
        # Back to calendar month numbers for the date arithmetic
        year, month = shift_month(first_bill.statement_year, first_bill.statement_month + 1, i)

        # First installment absorbs remainder to ensure exact total
        cents = base_cents + (remainder_cents if index == 1 else 0)

        series.append(
            Installment(
                index=index,
                amount_cents=cents,
                statement_month=month - 1,
                statement_year=year,
                due_date=due_date_for_statement(year, month, closing_day, due_day),
                installment_id=installment_id(purchase_date, index),
            )
        )

    return series
