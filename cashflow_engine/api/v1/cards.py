"""Credit card endpoints: billing cycle lookup and installment series"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from cashflow_engine.api.v1.schemas import (
    BillingCycleRequest,
    BillingCycleResponse,
    InstallmentRequest,
    InstallmentResponse,
    InstallmentSchema,
)
from cashflow_engine.api.dependencies import get_request_id
from cashflow_engine.domain.billing import assign_billing_cycle
from cashflow_engine.domain.installments import generate_installments
from cashflow_engine.domain.exceptions import InvalidInstallmentInputError
from cashflow_engine.infrastructure.observability.logging import log_calculation
from cashflow_engine.infrastructure.observability.metrics import record_calculation, rejected_input_counter

router = APIRouter()


@router.post("/billing-cycle", response_model=BillingCycleResponse)
def get_billing_cycle(request_body: BillingCycleRequest, request: Request):
    """Statement month and due date for a single purchase"""
    start_time = time.time()
    assignment = assign_billing_cycle(
        request_body.purchase_date,
        request_body.closing_day,
        request_body.due_day,
    )

    record_calculation("billing_cycle")
    log_calculation(get_request_id(request), "billing_cycle", 1, (time.time() - start_time) * 1000)

    return BillingCycleResponse(
        statement_month=assignment.statement_month,
        statement_year=assignment.statement_year,
        due_date=assignment.due_date,
    )


@router.post("/installments", response_model=InstallmentResponse)
def create_installments(request_body: InstallmentRequest, request: Request):
    """
    Split a purchase into installments, one per statement.

    Nothing is stored here: callers upsert each installment by its
    installment_id so resubmitting the same purchase stays idempotent.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        series = generate_installments(
            purchase_date=request_body.purchase_date,
            amount=request_body.amount,
            installments=request_body.installments,
            closing_day=request_body.closing_day,
            due_day=request_body.due_day,
        )

    except InvalidInstallmentInputError as e:
        rejected_input_counter.labels(operation="installments").inc()
        logging.warning(f"Invalid installment input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("installments", kind="installment", item_count=len(series))
    log_calculation(request_id, "installments", len(series), duration_ms)

    return InstallmentResponse(
        total_cents=sum(inst.amount_cents for inst in series),
        installments=[
            InstallmentSchema(
                installment_id=inst.installment_id,
                index=inst.index,
                amount=inst.amount,
                amount_cents=inst.amount_cents,
                statement_month=inst.statement_month,
                statement_year=inst.statement_year,
                due_date=inst.due_date,
            )
            for inst in series
        ],
    )
