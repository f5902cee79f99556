"""Prometheus metrics for the fee, payment and validation engine.

Metrics are informational side effects; no engine result depends on them.
"""

from prometheus_client import Counter, Histogram

# Shipping metrics
shipping_fee_calculations_total = Counter(
    "feeengine_shipping_fee_calculations_total",
    "Total shipping fee calculations",
    ["strategy", "status"]  # strategy: standard|volumetric|rush, status: success|rejected
)

shipping_fee_amount = Histogram(
    "feeengine_shipping_fee_amount",
    "Calculated shipping fee in VND",
    ["strategy"],
    buckets=[0, 10000, 22000, 30000, 50000, 75000, 100000, 250000, 500000]
)

# Payment metrics
payments_processed_total = Counter(
    "feeengine_payments_processed_total",
    "Total payment and refund calls forwarded to the gateway",
    ["method", "operation", "status"]  # operation: payment|refund, status: success|error
)

# Validation metrics
validation_issues_total = Counter(
    "feeengine_validation_issues_total",
    "Total validation issues detected",
    ["section", "severity"]
)

validation_reports_total = Counter(
    "feeengine_validation_reports_total",
    "Total detailed validation reports generated",
    ["verdict"]  # verdict: valid|invalid
)
