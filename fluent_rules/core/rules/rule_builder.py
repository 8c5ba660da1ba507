"""
Fluent builder for validation-rule strings.

A RuleBuilder collects rule tokens for a single field:

    rule.required().string(3, 20).unique("users", "username").ignore(user_id)

Local rules are rendered to string tokens immediately; proxied rules are
delegated to rule objects created through a ProxyRuleFactory and keep
accepting configuration calls until another proxied rule is added. The
final rule list is the local tokens followed by the proxied rules, each
group in call order.
"""

from functools import partial
from typing import Any, Callable

from .vocabulary import RuleKind, classify
from fluent_rules.core.errors import UnresolvableRuleCall
from fluent_rules.core.proxies import ProxyRule, ProxyRuleFactory, default_proxy_factory
from fluent_rules.observability.logger import get_logger
from fluent_rules.utils.formatting import format_rule, join_rules, snake_case

logger = get_logger(__name__)


class RuleBuilder:
    """
    Builds the rule list for one validation field.

    Any rule in the vocabulary is available as a method, either snake_case
    (``required_if``) or camelCase (``requiredIf``); Python keywords take a
    trailing underscore (``in_``). Unknown names raise UnresolvableRuleCall
    as soon as they are looked up.
    """

    def __init__(self, proxy_factory: ProxyRuleFactory | None = None):
        """
        Initialize an empty builder.

        Args:
            proxy_factory: Factory used for proxied rules (unique, exists, ...)
        """
        self.proxy_factory = proxy_factory or default_proxy_factory
        self._local_rules: list[str] = []
        self._proxied_rules: list[ProxyRule] = []

    def __getattr__(self, name: str) -> Callable[..., "RuleBuilder"]:
        if name.startswith("_"):
            raise AttributeError(name)

        rule = snake_case(name)
        if classify(rule) is None and not self._can_configure_latest(rule):
            raise UnresolvableRuleCall(name)

        return partial(self.apply, name)

    def apply(self, method: str, *arguments: Any, **keyword_arguments: Any) -> "RuleBuilder":
        """
        Resolve and apply one chained call by name.

        Args:
            method: Rule or configuration method name, snake_case or camelCase
            *arguments: Rule arguments
            **keyword_arguments: Only accepted by custom and proxied rules

        Returns:
            This builder

        Raises:
            UnresolvableRuleCall: If the name is not a rule and the latest
                                  proxied rule cannot take it either
            TypeError: If a token rule is given keyword arguments
        """
        rule = snake_case(method)
        kind = classify(rule)

        if kind is RuleKind.CUSTOM:
            logger.debug(f"Expanding custom rule: {rule}")
            return self.CUSTOM_EXPANSIONS[rule](self, *arguments, **keyword_arguments)

        if kind is None:
            return self.configure_latest(method, *arguments, **keyword_arguments)

        if kind is RuleKind.PROXY:
            handle = self.proxy_factory.create(rule, *arguments, **keyword_arguments)
            logger.debug(f"Added proxied rule: {handle}")
            self._proxied_rules.append(handle)
            return self

        if keyword_arguments:
            raise TypeError(f"{rule}() does not accept keyword arguments")

        # Simple rules, flags, rules with arguments and rules with id and arguments
        return self._push(format_rule(rule, arguments))

    def configure_latest(self, method: str, *arguments: Any, **keyword_arguments: Any) -> "RuleBuilder":
        """
        Forward a configuration call to the most recently added proxied rule.

        The rule object's return value is discarded; the builder stays the
        head of the chain.

        Raises:
            UnresolvableRuleCall: If there is no proxied rule yet, or it has
                                  no configuration method of that name
        """
        rule = snake_case(method)
        if not self._can_configure_latest(rule):
            raise UnresolvableRuleCall(method)

        self.latest_proxy.configure(rule, *arguments, **keyword_arguments)
        logger.debug(f"Configured proxied rule with {rule}(): {self.latest_proxy}")
        return self

    def _can_configure_latest(self, rule: str) -> bool:
        proxy = self.latest_proxy
        return proxy is not None and proxy.supports(rule)

    def _push(self, token: str) -> "RuleBuilder":
        logger.debug(f"Added local rule: {token}")
        self._local_rules.append(token)
        return self

    @property
    def latest_proxy(self) -> ProxyRule | None:
        return self._proxied_rules[-1] if self._proxied_rules else None

    @property
    def local_rules(self) -> tuple[str, ...]:
        return tuple(self._local_rules)

    @property
    def proxied_rules(self) -> tuple[ProxyRule, ...]:
        return tuple(self._proxied_rules)

    def get(self) -> list[str | ProxyRule]:
        """
        Get the rule list for the validation engine.

        Returns:
            Local string tokens followed by proxied rule objects
        """
        return [*self._local_rules, *self._proxied_rules]

    def __str__(self) -> str:
        return join_rules(self.get())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    # custom rules

    def when(self, condition: Any, callback: Callable[["RuleBuilder"], Any]) -> "RuleBuilder":
        """
        Apply ``callback(self)`` only when ``condition`` holds.

        ``condition`` may be a zero-argument callable, which is evaluated.
        """
        should_call = condition() if callable(condition) else condition

        if should_call:
            callback(self)

        return self

    def email(self, max: Any = None) -> "RuleBuilder":
        self._push("email")

        if max is not None:
            self.apply("max", max)

        return self

    def active_url(self, max: Any = None) -> "RuleBuilder":
        self._push("active_url")

        if max is not None:
            self.apply("max", max)

        return self

    def character(self) -> "RuleBuilder":
        """A single alphabetic character."""
        return self.alpha().apply("max", 1)

    def alpha(self, *bounds: Any) -> "RuleBuilder":
        self._push("alpha")
        return self._apply_min_and_max(bounds)

    def alpha_dash(self, *bounds: Any) -> "RuleBuilder":
        self._push("alpha_dash")
        return self._apply_min_and_max(bounds)

    def alpha_num(self, *bounds: Any) -> "RuleBuilder":
        self._push("alpha_num")
        return self._apply_min_and_max(bounds)

    # file, image, json and url bound their payload with size, not max

    def file(self, max: Any = None) -> "RuleBuilder":
        self._push("file")

        if max is not None:
            self.apply("size", max)

        return self

    def image(self, max: Any = None) -> "RuleBuilder":
        self._push("image")

        if max is not None:
            self.apply("size", max)

        return self

    def json(self, max: Any = None) -> "RuleBuilder":
        self._push("json")

        if max is not None:
            self.apply("size", max)

        return self

    def url(self, max: Any = None) -> "RuleBuilder":
        self._push("url")

        if max is not None:
            self.apply("size", max)

        return self

    def string(self, *bounds: Any) -> "RuleBuilder":
        self._push("string")
        return self._apply_min_and_max(bounds)

    def integer(self, *bounds: Any) -> "RuleBuilder":
        self._push("integer")
        return self._apply_min_and_max(bounds)

    def numeric(self, *bounds: Any) -> "RuleBuilder":
        self._push("numeric")
        return self._apply_min_and_max(bounds)

    def _apply_min_and_max(self, bounds: tuple[Any, ...]) -> "RuleBuilder":
        """
        Emit min/max from ``(min, max)`` or a single ``[min, max]`` pair.

        Missing trailing values are treated as absent, so ``string(3)``
        only emits ``min:3`` and ``string(None, 20)`` only ``max:20``.
        """
        if not bounds:
            return self

        if isinstance(bounds[0], (list, tuple)):
            bounds = tuple(bounds[0])

        minimum, maximum = (*bounds, None, None)[:2]

        if minimum is not None:
            self.apply("min", minimum)

        if maximum is not None:
            self.apply("max", maximum)

        return self

    CUSTOM_EXPANSIONS: dict[str, Callable[..., "RuleBuilder"]] = {
        "active_url": active_url,
        "alpha": alpha,
        "alpha_dash": alpha_dash,
        "alpha_num": alpha_num,
        "character": character,
        "email": email,
        "file": file,
        "image": image,
        "integer": integer,
        "json": json,
        "numeric": numeric,
        "string": string,
        "url": url,
        "when": when,
    }


class RuleShortcut:
    """
    Starts a new RuleBuilder from any rule call.

    ``rule.required()`` is ``RuleBuilder().required()``.
    """

    def __init__(self, proxy_factory: ProxyRuleFactory | None = None):
        self.proxy_factory = proxy_factory

    def __getattr__(self, name: str) -> Callable[..., RuleBuilder]:
        if name.startswith("_"):
            raise AttributeError(name)

        if classify(snake_case(name)) is None:
            raise UnresolvableRuleCall(name)

        return partial(build_rule, name, proxy_factory=self.proxy_factory)


def build_rule(
    method: str,
    *arguments: Any,
    proxy_factory: ProxyRuleFactory | None = None,
    **keyword_arguments: Any,
) -> RuleBuilder:
    """
    Create a builder and apply its first call.

    Args:
        method: First rule of the chain
        *arguments: Arguments for that rule
        proxy_factory: Factory for the new builder's proxied rules
        **keyword_arguments: Keyword arguments for that rule

    Returns:
        The new builder, ready for further chaining
    """
    return RuleBuilder(proxy_factory).apply(method, *arguments, **keyword_arguments)


rule = RuleShortcut()
