"""Prometheus metrics for monitoring sales, simulations and auth health"""

from prometheus_client import Counter, Histogram

# Simulator metrics
simulation_counter = Counter(
    "socia_simulation_total",
    "Price simulations computed",
    ["sale_mode"],  # cash | credit
)

# Sales metrics
sale_counter = Counter(
    "socia_sale_total",
    "Sales recorded",
    ["sale_mode"],  # cash | credit
)

sale_amount_bucket_counter = Counter(
    "socia_sale_amount_bucket",
    "Sales recorded by ticket size",
    ["bucket"],  # <$500, $500-$1000, $1000-$2000, $2000+
)

goal_upsert_counter = Counter(
    "socia_goal_upserts_total",
    "Challenge goals created or updated",
    ["action"],  # created | updated
)

# Auth service metrics
auth_failures_counter = Counter(
    "auth_failures_total",
    "Failed or rejected auth service calls",
    ["reason"],  # invalid_session | unavailable
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_sale(is_credit: bool, amount: float) -> None:
    """Record sale metrics for monitoring credit share and ticket distribution"""
    sale_mode = "credit" if is_credit else "cash"
    sale_counter.labels(sale_mode=sale_mode).inc()

    if amount < 500:
        bucket = "<$500"
    elif amount < 1_000:
        bucket = "$500-$1000"
    elif amount < 2_000:
        bucket = "$1000-$2000"
    else:
        bucket = "$2000+"

    sale_amount_bucket_counter.labels(bucket=bucket).inc()
