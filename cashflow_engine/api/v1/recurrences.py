"""POST /v1/recurrences/preview - Expand a recurring transaction into future dates"""

import time
from datetime import date
from fastapi import APIRouter, Depends, Request

from cashflow_engine.api.v1.schemas import (
    OccurrenceSchema,
    RecurrencePreviewRequest,
    RecurrencePreviewResponse,
)
from cashflow_engine.api.dependencies import get_request_id, get_today
from cashflow_engine.config import settings
from cashflow_engine.domain.recurrence import (
    MONTHLY,
    filter_new_occurrences,
    generate_series,
    occurrence_key,
)
from cashflow_engine.infrastructure.observability.logging import log_calculation
from cashflow_engine.infrastructure.observability.metrics import record_calculation
from cashflow_engine.utils.date_utils import end_of_year

router = APIRouter()


@router.post("/recurrences/preview", response_model=RecurrencePreviewResponse)
def preview_recurrence(
    request_body: RecurrencePreviewRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Generate the occurrences a recurring transaction still needs.

    Flow:
    1. Pick the bound: recurring_count (series size including the anchor)
       or end_date, defaulting to the end of the current year
    2. Generate at most recurrence_max_instances dates per request
    3. Drop dates already persisted for the series
    4. Return the remaining occurrences keyed for upsert, plus next_anchor
       when the per-request cap cut the series short
    """
    start_time = time.time()
    request_id = get_request_id(request)
    pattern = request_body.pattern or MONTHLY
    cap = settings.recurrence_max_instances

    if request_body.recurring_count is not None:
        wanted = request_body.recurring_count - 1
        boundary = date.max
    else:
        wanted = None
        boundary = request_body.end_date or end_of_year(today)

    max_count = cap if wanted is None else min(wanted, cap)

    # One extra date tells whether the cap cut the series short
    lookahead = generate_series(
        request_body.anchor_date,
        pattern,
        target_day=request_body.target_day,
        boundary=boundary,
        max_count=max_count + 1,
    )
    generated = lookahead[:max_count]

    next_anchor = None
    if len(lookahead) > max_count and (wanted is None or wanted > cap):
        next_anchor = generated[-1].date

    fresh = filter_new_occurrences(generated, request_body.existing_dates)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("recurrence", kind="occurrence", item_count=len(fresh))
    log_calculation(request_id, "recurrence", len(fresh), duration_ms)

    return RecurrencePreviewResponse(
        series_id=request_body.series_id,
        pattern=pattern,
        total_in_series=request_body.recurring_count or len(generated) + 1,
        occurrences=[
            OccurrenceSchema(
                key=occurrence_key(request_body.series_id, occ),
                date=occ.date,
                index=occ.index,
            )
            for occ in fresh
        ],
        next_anchor=next_anchor,
    )
