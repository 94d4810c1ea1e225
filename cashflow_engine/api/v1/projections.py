"""Dashboard figures: month-end and year-end projections, diagnosis insights"""

import time
from fastapi import APIRouter, Request

from cashflow_engine.api.v1.schemas import (
    DiagnosisRequest,
    DiagnosisResponse,
    InsightSchema,
    MonthProjectionRequest,
    ProjectionResponse,
    YearProjectionRequest,
)
from cashflow_engine.api.dependencies import get_request_id
from cashflow_engine.domain.diagnosis import generate_diagnosis
from cashflow_engine.domain.models import (
    BudgetSummary,
    DiagnosisInput,
    MonthProjectionInput,
    YearProjectionInput,
)
from cashflow_engine.domain.projections import project_month_net, project_year_end_impact
from cashflow_engine.infrastructure.observability.logging import log_calculation
from cashflow_engine.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/projections/month", response_model=ProjectionResponse)
def month_projection(request_body: MonthProjectionRequest, request: Request):
    """Project the current month's closing net"""
    start_time = time.time()
    result = project_month_net(MonthProjectionInput(**request_body.model_dump()))

    record_calculation("month_projection")
    log_calculation(get_request_id(request), "month_projection", 1, (time.time() - start_time) * 1000)
    return ProjectionResponse(value=result.value, explanation=result.explanation)


@router.post("/projections/year-end", response_model=ProjectionResponse)
def year_end_projection(request_body: YearProjectionRequest, request: Request):
    """Project the net impact of the months left in the year"""
    start_time = time.time()
    result = project_year_end_impact(YearProjectionInput(**request_body.model_dump()))

    record_calculation("year_projection")
    log_calculation(get_request_id(request), "year_projection", 1, (time.time() - start_time) * 1000)
    return ProjectionResponse(value=result.value, explanation=result.explanation)


@router.post("/diagnosis", response_model=DiagnosisResponse)
def diagnosis(request_body: DiagnosisRequest, request: Request):
    """Up to three insights for the dashboard"""
    start_time = time.time()
    budgets = request_body.budget_summary
    insights = generate_diagnosis(
        DiagnosisInput(
            month_net=request_body.month_net,
            month_income=request_body.month_income,
            projected_month_net=request_body.projected_month_net,
            remaining_days=request_body.remaining_days,
            budget_summary=BudgetSummary(**budgets.model_dump()) if budgets else None,
        )
    )

    record_calculation("diagnosis")
    log_calculation(get_request_id(request), "diagnosis", len(insights), (time.time() - start_time) * 1000)
    return DiagnosisResponse(insights=[InsightSchema(text=i.text, tone=i.tone) for i in insights])
