"""
Rule vocabularies and the lookup table that classifies a rule name.

Every chained call on a RuleBuilder is resolved against these fixed
groups. Custom rules are listed inside their base group as well (they are
still plain tokens as far as the validation engine cares) but take
priority during classification.
"""

from enum import Enum

SIMPLE_RULES = (
    "accepted",
    "active_url",
    "alpha",
    "alpha_dash",
    "alpha_num",
    "array",
    "boolean",
    "character",
    "confirmed",
    "date",
    "distinct",
    "email",
    "file",
    "filled",
    "image",
    "integer",
    "ip",
    "json",
    "nullable",
    "numeric",
    "present",
    "required",
    "string",
    "timezone",
    "url",
)

RULES_WITH_ARGUMENTS = (
    "after",
    "before",
    "between",
    "date_format",
    "different",
    "digits",
    "digits_between",
    "in_array",
    "max",
    "mimetypes",
    "mimes",
    "min",
    "regex",
    "required_with",
    "required_with_all",
    "required_without",
    "required_without_all",
    "same",
    "size",
    "when",
)

RULES_WITH_ID_AND_ARGUMENTS = (
    "required_if",
    "required_unless",
)

FLAGS = (
    "bail",
    "sometimes",
)

PROXIED_RULES = (
    "dimensions",
    "exists",
    "in",
    "not_in",
    "unique",
)

CUSTOM_RULES = frozenset({
    "active_url",
    "alpha",
    "alpha_dash",
    "alpha_num",
    "character",
    "email",
    "file",
    "image",
    "integer",
    "json",
    "numeric",
    "string",
    "url",
    "when",
})


class RuleKind(Enum):
    """How a canonical rule name is turned into output."""

    CUSTOM = "custom"
    SIMPLE = "simple"
    WITH_ARGUMENTS = "with_arguments"
    WITH_ID_AND_ARGUMENTS = "with_id_and_arguments"
    FLAG = "flag"
    PROXY = "proxy"


RULE_GROUPS: dict[RuleKind, tuple[str, ...]] = {
    RuleKind.SIMPLE: SIMPLE_RULES,
    RuleKind.WITH_ARGUMENTS: RULES_WITH_ARGUMENTS,
    RuleKind.WITH_ID_AND_ARGUMENTS: RULES_WITH_ID_AND_ARGUMENTS,
    RuleKind.FLAG: FLAGS,
    RuleKind.PROXY: PROXIED_RULES,
}

RULE_KINDS: dict[str, RuleKind] = {
    name: kind
    for kind, names in RULE_GROUPS.items()
    for name in names
}
RULE_KINDS.update({name: RuleKind.CUSTOM for name in CUSTOM_RULES})


def classify(rule: str) -> RuleKind | None:
    """
    Look up how a canonical rule name is handled.

    Args:
        rule: snake_case rule name

    Returns:
        The RuleKind, or None when the name is not part of any vocabulary
    """
    return RULE_KINDS.get(rule)

