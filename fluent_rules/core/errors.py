"""
Errors raised while building rule chains.
"""


class UnresolvableRuleCall(AttributeError):
    """Raised when a chained call is not a known rule and cannot be forwarded to a proxied rule."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(
            f"Unable to handle or proxy the method {method}(). "
            "If it is to be applied to a proxy rule, ensure it is called "
            "directly after the original proxy rule."
        )
