"""
Prometheus metrics collection for propcheck

Counts rule evaluations and failures so hosts can monitor data quality
without parsing validation results themselves.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Private registry so embedding applications keep their own default registry clean
REGISTRY = CollectorRegistry()


# =======================
# RULE METRICS
# =======================

rule_evaluations_total = Counter(
    name="propcheck_rule_evaluations_total",
    documentation="Total number of rule evaluations",
    labelnames=["rule_type", "outcome"],  # outcome: passed, failed
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="propcheck_validation_failures_total",
    documentation="Total number of validation failures by rule type and severity",
    labelnames=["rule_type", "severity"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="propcheck_validation_duration_seconds",
    documentation="Time spent validating a single instance in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)


# =======================
# EXPORT
# =======================

def get_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


# =======================
# HELPERS
# =======================

class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            engine.validate(instance)
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        metric = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = metric.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def record_rule_evaluation(rule_type: str, passed: bool, severity: str = "error") -> None:
    """
    Record the outcome of a single rule evaluation.

    Args:
        rule_type: Type of the validation rule (e.g. "greater_than")
        passed: Whether the rule passed
        severity: Severity of the rule, counted only for failures
    """
    outcome = "passed" if passed else "failed"
    rule_evaluations_total.labels(rule_type=rule_type, outcome=outcome).inc()
    if not passed:
        validation_failures_total.labels(rule_type=rule_type, severity=severity).inc()
