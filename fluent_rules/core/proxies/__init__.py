"""
Proxied rule implementations.

Provides the stateful rule objects (unique, exists, in, not_in,
dimensions) and the factory the RuleBuilder creates them through.
"""

from .base_proxy import ProxyRule
from .database_rules import DatabaseRule, Exists, Unique
from .dimensions import Dimensions
from .factory import ProxyRuleFactory, default_proxy_factory
from .list_rules import In, MembershipRule, NotIn

__all__ = [
    "ProxyRule",
    "ProxyRuleFactory",
    "default_proxy_factory",
    "DatabaseRule",
    "Unique",
    "Exists",
    "MembershipRule",
    "In",
    "NotIn",
    "Dimensions",
]
