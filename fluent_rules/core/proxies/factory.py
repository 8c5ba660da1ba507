"""
Proxied rule factory.

The RuleBuilder never instantiates proxied rules directly; it asks a
factory for one by canonical rule name. Applications that need extra
rule objects register them on their own factory and inject it.
"""

from typing import Any

from .base_proxy import ProxyRule
from .database_rules import Exists, Unique
from .dimensions import Dimensions
from .list_rules import In, NotIn
from fluent_rules.core.errors import UnresolvableRuleCall


class ProxyRuleFactory:
    """
    Creates proxied rule objects by name.
    """

    DEFAULT_REGISTRY: dict[str, type[ProxyRule]] = {
        "dimensions": Dimensions,
        "exists": Exists,
        "in": In,
        "not_in": NotIn,
        "unique": Unique,
    }

    def __init__(self, registry: dict[str, type[ProxyRule]] | None = None):
        """
        Initialize the factory.

        Args:
            registry: Rule name to ProxyRule class mapping; defaults to the
                      built-in dimensions/exists/in/not_in/unique rules
        """
        self.registry = dict(self.DEFAULT_REGISTRY if registry is None else registry)

    def register(self, name: str, rule_class: type[ProxyRule]) -> "ProxyRuleFactory":
        """Register (or replace) the class used for ``name``."""
        self.registry[name] = rule_class
        return self

    def create(self, name: str, *arguments: Any, **keyword_arguments: Any) -> ProxyRule:
        """
        Create a proxied rule.

        Args:
            name: Canonical rule name
            *arguments: Passed through to the rule constructor unmodified
            **keyword_arguments: Passed through to the rule constructor unmodified

        Returns:
            The new rule object

        Raises:
            UnresolvableRuleCall: If no class is registered under ``name``
        """
        rule_class = self.registry.get(name)
        if rule_class is None:
            raise UnresolvableRuleCall(name)

        return rule_class(*arguments, **keyword_arguments)

    def rule_names(self) -> list[str]:
        return sorted(self.registry)


default_proxy_factory = ProxyRuleFactory()
