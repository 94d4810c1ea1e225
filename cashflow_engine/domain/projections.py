"""Month-end and year-end net cash projections"""

from decimal import Decimal, ROUND_HALF_UP

from cashflow_engine.domain.models import (
    MonthProjectionInput,
    MonthProjectionResult,
    YearProjectionInput,
    YearProjectionResult,
)


def round2(value: float) -> float:
    """Round to cents, halves away from zero"""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def project_month_net(data: MonthProjectionInput) -> MonthProjectionResult:
    """
    Project the month-end net from three disjoint parts.

    Formula:
        daily_avg = last_n_days_discretionary_net / window_days
        projected = past_net + future_scheduled_net + daily_avg * remaining_days

    The trailing window must exclude scheduled items, otherwise recurring
    obligations would be counted twice.

    Fallbacks:
    - remaining_days <= 0: past_net (month already ended)
    - window_days <= 0: past_net + future_scheduled_net (nothing to extrapolate)
    """
    if data.remaining_days <= 0:
        return MonthProjectionResult(
            value=data.past_net,
            explanation="Month already ended; showing the final result.",
        )

    scheduled_only = data.past_net + data.future_scheduled_net

    if data.window_days <= 0:
        return MonthProjectionResult(
            value=round2(scheduled_only),
            explanation="Not enough recent data; projection includes scheduled transactions only.",
        )

    daily_avg = data.last_n_days_discretionary_net / data.window_days
    projected = scheduled_only + daily_avg * data.remaining_days

    return MonthProjectionResult(
        value=round2(projected),
        explanation=f"Based on the average of the last {data.window_days} days plus scheduled transactions.",
    )


def project_year_end_impact(data: YearProjectionInput) -> YearProjectionResult:
    """
    Project the cumulative net for the rest of the year (conservative).

    Strategy:
    - With history, use the lesser of the projected month net and the
      historical monthly average. For losses that is the larger loss.
    - Without history, use the projected month net alone.
    - impact = monthly_rate * months_remaining

    months_remaining counts full months after the current one.
    """
    if data.months_remaining <= 0:
        return YearProjectionResult(value=0.0, explanation="Year already ended; no months remaining.")

    history = data.historical_monthly_nets or []

    if history:
        historical_avg = sum(history) / len(history)
        rate = min(data.projected_month_net, historical_avg)
        explanation = (
            f"Conservative estimate: lower of this month's projection ({data.projected_month_net:,.2f}) "
            f"and the average of the last {len(history)} months ({historical_avg:,.2f})."
        )
    else:
        rate = data.projected_month_net
        explanation = "Based on this month's projected pace (no earlier history)."

    return YearProjectionResult(value=round2(rate * data.months_remaining), explanation=explanation)
