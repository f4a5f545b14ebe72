"""Prometheus metrics for monitoring interest assessments, rate fallbacks and duplicate flags"""

from prometheus_client import Counter, Histogram

# Accrual metrics
interest_assessment_counter = Counter(
    "finance_core_interest_assessments_total",
    "Bill interest assessments requested",
    ["outcome"],  # assessed | skipped
)

accrued_interest_histogram = Histogram(
    "finance_core_accrued_interest",
    "Interest, penalty and correction added to overdue bills",
    buckets=[1, 10, 50, 100, 500, 1000, 5000],
)

rate_fallback_counter = Counter(
    "finance_core_rate_fallbacks_total",
    "Rate snapshots replaced by the fallback rates",
)

# Import metrics
duplicates_flagged_counter = Counter(
    "finance_core_duplicates_flagged_total",
    "Imported rows flagged as likely duplicates",
    ["match_type"],  # within_batch | existing_database
)


def record_interest_assessment(assessed: bool, total_interest: float = 0.0) -> None:
    """Record assessment outcome and, when assessed, the amount accrued"""
    outcome = "assessed" if assessed else "skipped"
    interest_assessment_counter.labels(outcome=outcome).inc()

    if assessed:
        accrued_interest_histogram.observe(total_interest)


def record_duplicates(within_batch: int, existing_database: int) -> None:
    duplicates_flagged_counter.labels(match_type="within_batch").inc(within_batch)
    duplicates_flagged_counter.labels(match_type="existing_database").inc(existing_database)
