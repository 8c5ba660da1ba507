"""
Shared formatting helpers.
"""

from .formatting import (
    ARGUMENT_SEPARATOR,
    RULE_DELIMITER,
    flatten,
    format_argument,
    format_rule,
    join_rules,
    snake_case,
)

__all__ = [
    "ARGUMENT_SEPARATOR",
    "RULE_DELIMITER",
    "flatten",
    "format_argument",
    "format_rule",
    "join_rules",
    "snake_case",
]
