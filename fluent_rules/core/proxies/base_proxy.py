"""
Base interface for proxied rules.

A proxied rule is a stateful rule object that keeps accepting
configuration calls after it is created and renders itself to a single
validation-engine token when stringified.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from fluent_rules.core.errors import UnresolvableRuleCall


class ProxyRule(ABC):
    """
    Abstract base class for all proxied rules.

    Subclasses declare which of their methods may be reached through a
    RuleBuilder chain in ``configuration_methods``; anything else stays
    private to the rule object.
    """

    rule_name: ClassVar[str]
    configuration_methods: ClassVar[frozenset[str]] = frozenset()

    def supports(self, method: str) -> bool:
        """Whether ``method`` can be forwarded to this rule from a builder chain."""
        return method in self.configuration_methods

    def configure(self, method: str, *arguments: Any, **keyword_arguments: Any) -> "ProxyRule":
        """
        Apply a configuration method by name.

        Args:
            method: snake_case configuration method name
            *arguments: Positional arguments for the method
            **keyword_arguments: Keyword arguments for the method

        Returns:
            This rule, for chaining

        Raises:
            UnresolvableRuleCall: If the method is not a configuration method
        """
        if not self.supports(method):
            raise UnresolvableRuleCall(method)

        getattr(self, method)(*arguments, **keyword_arguments)
        return self

    @abstractmethod
    def __str__(self) -> str:
        """Render the validation-engine token."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"
