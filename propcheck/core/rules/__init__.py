"""
Validation rule engine and configuration management.
"""

from .accessor import get_member_value, humanize_member_name, member_accessor
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import PropertyRule, RuleEngine

__all__ = [
    "RuleEngine",
    "PropertyRule",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "get_member_value",
    "member_accessor",
    "humanize_member_name",
]
