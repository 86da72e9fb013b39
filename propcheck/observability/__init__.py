"""
Logging and metrics for the validation engine.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import get_metrics, record_rule_evaluation, track_duration

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "get_metrics",
    "record_rule_evaluation",
    "track_duration",
]
