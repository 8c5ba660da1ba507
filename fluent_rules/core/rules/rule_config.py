"""
Rule-set configuration management.

Loads per-field rule chains from YAML files and replays them onto
RuleBuilders.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .rule_builder import RuleBuilder
from fluent_rules.core.models import CompiledRuleSet, RuleCall
from fluent_rules.core.proxies import ProxyRuleFactory
from fluent_rules.observability.logger import get_logger

logger = get_logger(__name__)


class RuleConfigLoader:
    """
    Loads rule chains from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email:
        - required
        - email: 255

      username:
        - required
        - string: [3, 20]
        - unique: [users, username]
        - ignore: 5

      avatar:
        - image: 2048
        - dimensions: {min_width: 100, ratio: 3/2}
    ```

    Each entry is one chained call, in order. A bare string takes no
    arguments; a one-key mapping takes a list (positional arguments), a
    mapping (keyword arguments), null (no arguments) or a scalar (one
    positional argument).
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, list[RuleCall]]:
        """
        Load and parse the rule chains from the YAML file.

        Returns:
            Field name to ordered list of RuleCall

        Raises:
            ValueError: If YAML is invalid or an entry is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        field_rules = config["rules"] or {}
        if not isinstance(field_rules, dict):
            raise ValueError("'rules' section must map field names to rule lists")

        calls: dict[str, list[RuleCall]] = {}
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")

            calls[str(field_name)] = [
                self._parse_call(str(field_name), entry, idx)
                for idx, entry in enumerate(field_rule_list)
            ]

        logger.info(
            f"Loaded rule chains for {len(calls)} fields",
            extra={"config_path": str(self.config_path)}
        )
        return calls

    def build(self, proxy_factory: ProxyRuleFactory | None = None) -> dict[str, RuleBuilder]:
        """
        Replay every field's chain onto a fresh RuleBuilder.

        Raises:
            UnresolvableRuleCall: If a chain contains an unknown call
        """
        builders = {}
        for field_name, calls in self.load_rules().items():
            builder = RuleBuilder(proxy_factory)
            for call in calls:
                call.apply_to(builder)
            builders[field_name] = builder
        return builders

    def _parse_call(self, field_name: str, entry: Any, idx: int) -> RuleCall:
        """
        Parse a single chain entry.

        Args:
            field_name: The field the chain belongs to
            entry: The entry from YAML
            idx: Position of the entry in the chain (for error messages)

        Returns:
            Parsed RuleCall

        Raises:
            ValueError: If the entry is malformed
        """
        if isinstance(entry, str):
            method, value = entry, None
        elif isinstance(entry, dict) and len(entry) == 1:
            method, value = next(iter(entry.items()))
        else:
            raise ValueError(
                f"Rule {idx} for field '{field_name}' must be a rule name or a single-key mapping"
            )

        arguments: list[Any] = []
        keyword_arguments: dict[str, Any] = {}
        if isinstance(value, list):
            arguments = value
        elif isinstance(value, dict):
            keyword_arguments = {str(key): item for key, item in value.items()}
        elif value is not None:
            arguments = [value]

        try:
            return RuleCall(
                method=method,
                arguments=arguments,
                keyword_arguments=keyword_arguments,
            )
        except ValidationError as e:
            raise ValueError(f"Invalid rule {idx} for field '{field_name}': {e}") from e


def compile_rules(builders: dict[str, RuleBuilder]) -> dict[str, CompiledRuleSet]:
    """
    Snapshot every builder into a CompiledRuleSet.

    Args:
        builders: Field name to RuleBuilder

    Returns:
        Field name to CompiledRuleSet, in the same order
    """
    return {
        field_name: CompiledRuleSet.from_builder(field_name, builder)
        for field_name, builder in builders.items()
    }
