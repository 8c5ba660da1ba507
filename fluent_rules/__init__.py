"""
fluent-rules: a fluent builder for form-validation rule strings.
"""

from fluent_rules.core.errors import UnresolvableRuleCall
from fluent_rules.core.proxies import ProxyRule, ProxyRuleFactory
from fluent_rules.core.rules import RuleBuilder, RuleShortcut, build_rule, rule

__all__ = [
    "RuleBuilder",
    "RuleShortcut",
    "build_rule",
    "rule",
    "ProxyRule",
    "ProxyRuleFactory",
    "UnresolvableRuleCall",
]
