"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class RecurrenceRule:
    """How a recurring transaction repeats"""

    pattern: str  # "weekly" | "monthly" | "yearly"
    anchor_date: date
    target_day: Optional[int] = None


@dataclass(frozen=True)
class ScheduledOccurrence:
    """One generated date of a recurring series (anchor counts as index 1)"""

    date: date
    index: int


@dataclass(frozen=True)
class BillingCycleParameters:
    """Credit card statement settings, both as day-of-month values"""

    closing_day: int
    due_day: int


@dataclass(frozen=True)
class BillAssignment:
    """Statement period a purchase falls into"""

    statement_month: int  # 0-11, January is 0
    statement_year: int
    due_date: date


@dataclass(frozen=True)
class Installment:
    """Single portion of a credit card purchase"""

    index: int
    amount_cents: int
    statement_month: int  # 0-11, January is 0
    statement_year: int
    due_date: date
    installment_id: str

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_cents) / 100


@dataclass(frozen=True)
class MonthProjectionInput:
    """Pre-aggregated sums for the current month"""

    past_net: float
    future_scheduled_net: float
    last_n_days_discretionary_net: float
    remaining_days: int
    window_days: int


@dataclass(frozen=True)
class YearProjectionInput:
    """Current month projection plus prior monthly results"""

    projected_month_net: float
    months_remaining: int
    historical_monthly_nets: Optional[List[float]] = None


@dataclass(frozen=True)
class ProjectionResult:
    """Projected figure with a human-readable explanation"""

    value: float
    explanation: str


MonthProjectionResult = ProjectionResult
YearProjectionResult = ProjectionResult


@dataclass(frozen=True)
class BudgetSummary:
    """Budget counts for the current month"""

    total: int
    on_track: int
    over_budget: int


@dataclass(frozen=True)
class DiagnosisInput:
    """Month figures used to build dashboard insights"""

    month_net: float
    month_income: float
    projected_month_net: float
    remaining_days: int
    budget_summary: Optional[BudgetSummary] = None


@dataclass(frozen=True)
class DiagnosisInsight:
    """Short dashboard message"""

    text: str
    tone: str  # "positive" | "neutral" | "caution"
