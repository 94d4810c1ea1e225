"""Credit card billing cycle assignment"""

from datetime import date

from cashflow_engine.domain.models import BillAssignment, BillingCycleParameters
from cashflow_engine.utils.date_utils import clamp_day, shift_month


def due_date_for_statement(statement_year: int, statement_month: int, closing_day: int, due_day: int) -> date:
    """
    Due date of a statement (statement_month here is the calendar month, 1-12).

    Cards whose due day comes before the closing day are paid in the month
    after the statement (closing 20, due 10: the February statement is due
    March 10). The day is clamped to the due month's length.
    """
    year, month = statement_year, statement_month
    if due_day < closing_day:
        year, month = shift_month(year, month, 1)
    return clamp_day(year, month, due_day)


def assign_billing_cycle(purchase_date: date, closing_day: int, due_day: int) -> BillAssignment:
    """
    Map a purchase to its statement month and due date.

    Purchases on or after the closing day roll into the next month's
    statement (December rolls into January of the next year).
    statement_month is 0-based: January is 0, December is 11.
    """
    year, month = purchase_date.year, purchase_date.month
    if purchase_date.day >= closing_day:
        year, month = shift_month(year, month, 1)

    return BillAssignment(
        statement_month=month - 1,
        statement_year=year,
        due_date=due_date_for_statement(year, month, closing_day, due_day),
    )


def assign_for_card(purchase_date: date, card: BillingCycleParameters) -> BillAssignment:
    return assign_billing_cycle(purchase_date, card.closing_day, card.due_day)
