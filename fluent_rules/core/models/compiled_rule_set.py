"""
CompiledRuleSet model representing the final rules of one field.
"""

from pydantic import BaseModel, Field, field_validator

from fluent_rules.utils.formatting import RULE_DELIMITER


class CompiledRuleSet(BaseModel):
    """
    The rule tokens of one field, as handed to the validation engine.

    Attributes:
        field_name: Form field the rules apply to
        rules: Rule tokens, local rules first then proxied rules
        rule_string: The same tokens joined with "|"
    """

    field_name: str = Field(..., min_length=1)
    rules: list[str] = Field(default_factory=list)
    rule_string: str = ""

    @field_validator('rule_string')
    @classmethod
    def check_rule_string_consistency(cls, v, info):
        """Validate that rule_string is exactly the joined rules."""
        rules = info.data.get('rules')
        if rules is not None and v != RULE_DELIMITER.join(rules):
            raise ValueError("rule_string does not match rules")
        return v

    @classmethod
    def from_builder(cls, field_name: str, builder) -> "CompiledRuleSet":
        """Snapshot a RuleBuilder's current rules."""
        rules = [str(rule) for rule in builder.get()]
        return cls(
            field_name=field_name,
            rules=rules,
            rule_string=RULE_DELIMITER.join(rules),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "field_name": "username",
                "rules": ["required", "string", "min:3", "max:20", "unique:users,NULL,NULL,id"],
                "rule_string": "required|string|min:3|max:20|unique:users,NULL,NULL,id"
            }
        }
