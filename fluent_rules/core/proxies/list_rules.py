"""
Membership proxied rules: in and not_in.
"""

from typing import Any

from .base_proxy import ProxyRule
from fluent_rules.utils.formatting import format_argument


class MembershipRule(ProxyRule):
    """
    Validates membership in a fixed list of values.

    Accepts either the values themselves or a single list/tuple/set:
    ``In("a", "b")`` and ``In(["a", "b"])`` are the same rule. Each value is
    double-quoted and embedded quotes are doubled, so values may contain
    commas.
    """

    def __init__(self, *values: Any):
        if len(values) == 1 and isinstance(values[0], (list, tuple, set, frozenset)):
            values = tuple(values[0])
        self.values = list(values)

    def format_values(self) -> str:
        return ",".join(
            '"' + format_argument(value).replace('"', '""') + '"'
            for value in self.values
        )

    def __str__(self) -> str:
        return f"{self.rule_name}:{self.format_values()}"


class In(MembershipRule):
    rule_name = "in"


class NotIn(MembershipRule):
    rule_name = "not_in"
