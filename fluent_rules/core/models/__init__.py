"""
Data models for recorded rule calls and compiled rule sets.

All models use Pydantic for runtime validation.
"""

from .compiled_rule_set import CompiledRuleSet
from .rule_call import RuleCall

__all__ = [
    "RuleCall",
    "CompiledRuleSet",
]
