"""
Token formatting utilities for rule strings.

Rule tokens travel to the validation engine as plain text, so every
argument has to be rendered the way the engine's parser expects it:
comma separated, nested sequences spread in place, booleans and None
collapsed to the engine's legacy string forms.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

RULE_DELIMITER = "|"
ARGUMENT_SEPARATOR = ","

_CAMEL_BOUNDARY = re.compile(r"(.)(?=[A-Z])")


def snake_case(method: str) -> str:
    """
    Normalize a called method name to its canonical rule name.

    Args:
        method: The attribute name as written by the caller

    Returns:
        The snake_case rule name

    Examples:
        >>> snake_case("requiredIf")
        'required_if'
        >>> snake_case("alpha_dash")
        'alpha_dash'
        >>> snake_case("in_")
        'in'
    """
    name = method.replace(" ", "")
    if not name.islower():
        name = _CAMEL_BOUNDARY.sub(r"\1_", name).lower()

    # Trailing underscores only escape Python keywords (in_, not_in_)
    return name.rstrip("_") or name


def flatten(arguments: Iterable[Any]) -> list[Any]:
    """
    Flatten nested argument sequences depth first.

    Lists, tuples and sets are expanded in place, mappings contribute their
    values. Strings and bytes are atoms.

    Examples:
        >>> flatten([1, [2, (3, 4)], "ab"])
        [1, 2, 3, 4, 'ab']
    """
    flat: list[Any] = []
    for argument in arguments:
        if isinstance(argument, Mapping):
            flat.extend(flatten(argument.values()))
        elif isinstance(argument, (list, tuple, set, frozenset)):
            flat.extend(flatten(argument))
        else:
            flat.append(argument)
    return flat


def format_argument(value: Any) -> str:
    """
    Render one argument the way the validation engine reads it.

    None and False become an empty string, True becomes "1".
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def format_rule(rule: str, arguments: Iterable[Any] = ()) -> str:
    """
    Build a ``name:arg1,arg2`` token.

    Examples:
        >>> format_rule("max", [10])
        'max:10'
        >>> format_rule("between", [[1, 5]])
        'between:1,5'
        >>> format_rule("required")
        'required'
    """
    values = flatten(arguments)
    if not values:
        return rule
    return f"{rule}:" + ARGUMENT_SEPARATOR.join(format_argument(value) for value in values)


def join_rules(rules: Iterable[Any]) -> str:
    """Join rule tokens and proxy handles into the pipe-delimited wire form."""
    return RULE_DELIMITER.join(str(rule) for rule in rules)
