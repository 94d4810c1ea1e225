"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional

from cashflow_engine.config import settings
from cashflow_engine.domain.installments import MAX_AMOUNT

Pattern = Literal["weekly", "monthly", "yearly"]
Tone = Literal["positive", "neutral", "caution"]


class RecurrencePreviewRequest(BaseModel):
    """Request body for POST /v1/recurrences/preview"""

    series_id: str = Field(..., min_length=1, description="Parent transaction identifier")
    anchor_date: date = Field(..., description="Date of the first transaction in the series")
    pattern: Optional[Pattern] = Field(None, description="Defaults to monthly")
    target_day: Optional[int] = Field(None, ge=1, le=31)
    end_date: Optional[date] = Field(None, description="Last allowed date; default is 31 Dec of this year")
    recurring_count: Optional[int] = Field(None, ge=1, le=60, description="Series size including the anchor")
    existing_dates: List[date] = Field(default_factory=list, description="Dates already persisted for the series")

    @model_validator(mode="after")
    def check_bounds(self) -> "RecurrencePreviewRequest":
        if self.end_date is not None and self.end_date < self.anchor_date:
            raise ValueError("end_date must not be before anchor_date")
        return self


class OccurrenceSchema(BaseModel):
    """Single generated occurrence"""

    key: str
    date: date
    index: int


class RecurrencePreviewResponse(BaseModel):
    """Response for POST /v1/recurrences/preview"""

    series_id: str
    pattern: Pattern
    total_in_series: int
    occurrences: List[OccurrenceSchema]
    next_anchor: Optional[date] = None


class BillingCycleRequest(BaseModel):
    """Request body for POST /v1/billing-cycle"""

    purchase_date: date
    closing_day: int = Field(..., ge=1, le=31)
    due_day: int = Field(..., ge=1, le=31)


class BillingCycleResponse(BaseModel):
    """Response for POST /v1/billing-cycle"""

    statement_month: int = Field(..., description="0-based: January is 0")
    statement_year: int
    due_date: date


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/installments"""

    purchase_date: date
    amount: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Total purchase amount")
    installments: int = Field(..., ge=1, le=settings.max_installments)
    closing_day: int = Field(..., ge=1, le=31)
    due_day: int = Field(..., ge=1, le=31)


class InstallmentSchema(BaseModel):
    """Single installment in a purchase series"""

    installment_id: str
    index: int
    amount: Decimal
    amount_cents: int
    statement_month: int = Field(..., description="0-based: January is 0")
    statement_year: int
    due_date: date


class InstallmentResponse(BaseModel):
    """Response for POST /v1/installments"""

    total_cents: int
    installments: List[InstallmentSchema]


class MonthProjectionRequest(BaseModel):
    """Request body for POST /v1/projections/month"""

    past_net: float
    future_scheduled_net: float = 0.0
    last_n_days_discretionary_net: float
    remaining_days: int
    window_days: int


class YearProjectionRequest(BaseModel):
    """Request body for POST /v1/projections/year-end"""

    projected_month_net: float
    months_remaining: int
    historical_monthly_nets: Optional[List[float]] = None


class ProjectionResponse(BaseModel):
    """Response for both projection endpoints"""

    value: float
    explanation: str


class BudgetSummarySchema(BaseModel):
    total: int = Field(..., ge=0)
    on_track: int = Field(..., ge=0)
    over_budget: int = Field(..., ge=0)


class DiagnosisRequest(BaseModel):
    """Request body for POST /v1/diagnosis"""

    month_net: float
    month_income: float
    projected_month_net: float
    remaining_days: int
    budget_summary: Optional[BudgetSummarySchema] = None


class InsightSchema(BaseModel):
    text: str
    tone: Tone


class DiagnosisResponse(BaseModel):
    """Response for POST /v1/diagnosis"""

    insights: List[InsightSchema]
