"""
Dimensions - image dimension constraints.
"""

from typing import Any

from .base_proxy import ProxyRule


class Dimensions(ProxyRule):
    """
    Constrains the pixel dimensions of an uploaded image.

    Parameters:
    - constraints: Initial constraints, e.g. {"min_width": 100, "ratio": "3/2"}

    Constraints render as ``dimensions:key=value,...`` in the order they
    were first set; setting a key again replaces its value in place.
    """

    rule_name = "dimensions"
    configuration_methods = frozenset({
        "width",
        "height",
        "min_width",
        "min_height",
        "max_width",
        "max_height",
        "ratio",
    })

    def __init__(self, constraints: dict[str, Any] | None = None, **named_constraints: Any):
        self.constraints: dict[str, Any] = {}
        self.constraints.update(constraints or {})
        self.constraints.update(named_constraints)

    def width(self, value: int) -> "Dimensions":
        self.constraints["width"] = value
        return self

    def height(self, value: int) -> "Dimensions":
        self.constraints["height"] = value
        return self

    def min_width(self, value: int) -> "Dimensions":
        self.constraints["min_width"] = value
        return self

    def min_height(self, value: int) -> "Dimensions":
        self.constraints["min_height"] = value
        return self

    def max_width(self, value: int) -> "Dimensions":
        self.constraints["max_width"] = value
        return self

    def max_height(self, value: int) -> "Dimensions":
        self.constraints["max_height"] = value
        return self

    def ratio(self, value: float | str) -> "Dimensions":
        """Width/height ratio, either a number or a "3/2" style fraction."""
        self.constraints["ratio"] = value
        return self

    def __str__(self) -> str:
        return "dimensions:" + ",".join(f"{key}={value}" for key, value in self.constraints.items())
