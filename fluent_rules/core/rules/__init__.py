"""
Rule builder, vocabularies and rule-set configuration.
"""

from .rule_builder import RuleBuilder, RuleShortcut, build_rule, rule
from .rule_config import RuleConfigLoader, compile_rules
from .vocabulary import RuleKind, classify

__all__ = [
    "RuleBuilder",
    "RuleShortcut",
    "build_rule",
    "rule",
    "RuleConfigLoader",
    "compile_rules",
    "RuleKind",
    "classify",
]
