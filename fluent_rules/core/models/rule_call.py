"""
RuleCall model representing one recorded call in a rule chain.
"""

from typing import Any

from pydantic import BaseModel, Field


class RuleCall(BaseModel):
    """
    A single chained call, as read from a rule-set file.

    Attributes:
        method: Rule or configuration method name ("required", "ignore")
        arguments: Positional arguments
        keyword_arguments: Keyword arguments (proxied and custom rules only)
    """

    method: str = Field(..., min_length=1)
    arguments: list[Any] = Field(default_factory=list)
    keyword_arguments: dict[str, Any] = Field(default_factory=dict)

    def apply_to(self, builder):
        """Replay this call on ``builder`` and return the builder."""
        return builder.apply(self.method, *self.arguments, **self.keyword_arguments)

    class Config:
        json_schema_extra = {
            "example": {
                "method": "unique",
                "arguments": ["users", "email"],
                "keyword_arguments": {}
            }
        }
