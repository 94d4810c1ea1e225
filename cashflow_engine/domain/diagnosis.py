"""Dashboard insights derived from the month's figures"""

from decimal import Decimal, ROUND_FLOOR
from typing import List

from cashflow_engine.domain.models import DiagnosisInput, DiagnosisInsight

POSITIVE = "positive"
NEUTRAL = "neutral"
CAUTION = "caution"

HEALTHY_SAVINGS_RATE = 20  # percent of income


def savings_rate(month_net: float, month_income: float) -> int:
    """Net as a whole percent of income; halves round up toward +inf (-12.5 -> -12)"""
    exact = Decimal(str(month_net / month_income * 100))
    return int((exact + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def _savings_insight(month_net: float, month_income: float) -> DiagnosisInsight:
    rate = savings_rate(month_net, month_income)
    if rate >= HEALTHY_SAVINGS_RATE:
        return DiagnosisInsight(f"You are saving {rate}% of your income this month.", POSITIVE)
    if rate >= 0:
        return DiagnosisInsight(f"You are saving {rate}% of your income this month.", NEUTRAL)
    return DiagnosisInsight(f"Your expenses exceeded your income by {abs(rate)}% this month.", CAUTION)


def generate_diagnosis(data: DiagnosisInput) -> List[DiagnosisInsight]:
    """
    Build up to three calm, non-judgmental insights about the month.

    Priority:
    1. Savings rate (when there is income)
    2. Budget health (when budgets exist)
    3. Month direction, projection vs current (when days remain)
    """
    insights = []

    if data.month_income > 0:
        insights.append(_savings_insight(data.month_net, data.month_income))

    budgets = data.budget_summary
    if budgets is not None and budgets.total > 0:
        if budgets.over_budget == 0:
            insights.append(DiagnosisInsight(f"All {budgets.total} budgets are within their limits.", POSITIVE))
        else:
            insights.append(
                DiagnosisInsight(f"{budgets.over_budget} of {budgets.total} budgets went over their limit.", CAUTION)
            )

    if data.remaining_days > 0:
        projected, current = data.projected_month_net, data.month_net
        if projected < 0 <= current:
            insights.append(
                DiagnosisInsight("The projected result is negative; check for spending you can adjust.", CAUTION)
            )
        elif projected < current and current > 0:
            insights.append(
                DiagnosisInsight("Variable spending may reduce your balance by the end of the month.", CAUTION)
            )
        elif projected > current and projected >= 0:
            insights.append(
                DiagnosisInsight("Your pace points to a better result by the end of the month.", POSITIVE)
            )

    return insights
