"""Prometheus metrics for calculation volume, generated items and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "cashflow_calculation_total",
    "Total engine calculations served",
    ["operation"],  # recurrence | billing_cycle | installments | month_projection | year_projection | diagnosis
)

generated_items_counter = Counter(
    "cashflow_generated_items_total",
    "Occurrences and installments produced",
    ["kind"],  # occurrence | installment
)

rejected_input_counter = Counter(
    "cashflow_rejected_input_total",
    "Calculations refused because of invalid input",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str, kind: str | None = None, item_count: int = 0) -> None:
    """Record one calculation and, for series operations, how many items it produced"""
    calculation_counter.labels(operation=operation).inc()
    if kind is not None and item_count > 0:
        generated_items_counter.labels(kind=kind).inc(item_count)
