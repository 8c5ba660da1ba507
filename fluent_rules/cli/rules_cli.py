"""
Command-line interface for rule sets.

Usage:
    python -m fluent_rules.cli.rules_cli compile --config <rules.yaml> [options]
    python -m fluent_rules.cli.rules_cli vocabulary
"""

import argparse
import json
import sys

from fluent_rules.core.errors import UnresolvableRuleCall
from fluent_rules.core.rules import RuleConfigLoader, compile_rules
from fluent_rules.core.rules.vocabulary import CUSTOM_RULES, RULE_GROUPS
from fluent_rules.observability.logger import get_logger, log_operation


logger = get_logger(__name__)


def compile_command(args) -> int:
    """
    Compile a YAML rule set and print the rule strings.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        with log_operation("Compiling rule set", logger=logger, config=args.config):
            builders = RuleConfigLoader(args.config).build()
    except (FileNotFoundError, ValueError, UnresolvableRuleCall, TypeError):
        # already logged by log_operation
        return 1

    compiled = compile_rules(builders)

    if args.field:
        if args.field not in compiled:
            logger.error(f"Field not found in rule set: {args.field}")
            return 1
        compiled = {args.field: compiled[args.field]}

    if args.format == "json":
        print(json.dumps(
            {name: rule_set.model_dump() for name, rule_set in compiled.items()},
            indent=2
        ))
    else:
        for name, rule_set in compiled.items():
            print(f"{name}: {rule_set.rule_string}")

    return 0


def vocabulary_command(args) -> int:
    """Print every rule group and the rule names in it."""
    for kind, names in RULE_GROUPS.items():
        print(f"{kind.value}:")
        for name in names:
            marker = " (custom)" if name in CUSTOM_RULES else ""
            print(f"  {name}{marker}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validation rule-set tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print each field's rule string
  python -m fluent_rules.cli.rules_cli compile --config config/rules.yaml

  # JSON output for a single field
  python -m fluent_rules.cli.rules_cli compile --config config/rules.yaml \\
      --format json --field username

  # List the known rule names
  python -m fluent_rules.cli.rules_cli vocabulary
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compile_parser = subparsers.add_parser("compile", help="Compile a YAML rule set")
    compile_parser.add_argument(
        "--config",
        required=True,
        help="Path to rule-set YAML file"
    )
    compile_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )
    compile_parser.add_argument(
        "--field",
        help="Only print this field"
    )

    subparsers.add_parser("vocabulary", help="List known rule names")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "compile":
        return compile_command(args)
    return vocabulary_command(args)


if __name__ == "__main__":
    sys.exit(main())
