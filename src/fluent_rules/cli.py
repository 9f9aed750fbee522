"""CLI entry point for the ``fr`` rule builder.

Usage examples::

    # Build one rule string from calls
    fr required string:1,255 email
    # -> required|string|min:1|max:255|email

    # Proxy rules and refinements
    fr unique:users,email ignore:5

    # JSON list output
    fr -j required email

    # Register extension rules for this run
    fr -e uppercase -e slug required uppercase slug

    # Compile a JSONL rule set
    fr -c rules.jsonl
"""


import argparse
import json
import logging
import sys

from .builder import Rule
from .errors import RuleBuilderError
from .registry import DEFAULT_REGISTRY, ExtensionRegistry
from .ruleset import RuleSet, parse_call_token
from .version import PACKAGE_VERSION

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_ERROR = 2


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="fr",
        description="Build pipe-delimited validation rule strings.",
        epilog="Calls take the form NAME or NAME:ARG[,ARG...] and apply in order.",
    )
    p.add_argument(
        "calls",
        nargs="*",
        metavar="CALL",
        help="Builder calls, e.g. 'required' 'string:1,255' 'unique:users'.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    p.add_argument(
        "-c", "--config",
        default=None,
        metavar="JSONL",
        help="Compile a JSONL rule set instead of positional calls.",
    )
    p.add_argument(
        "-e", "--extend",
        action="append",
        default=[],
        metavar="NAME",
        help="Register an extension rule for this run. Can be repeated.",
    )
    p.add_argument(
        "-j", "--json",
        action="store_true",
        default=False,
        help="Output results as JSON.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log rule dispatch decisions to stderr.",
    )
    return p


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _build_from_calls(tokens: list[str], registry: ExtensionRegistry) -> Rule:
    """Apply ``NAME:ARGS`` tokens in order to one builder."""
    builder = Rule(registry=registry)
    for token in tokens:
        method, arguments = parse_call_token(token)
        builder.apply(method, *arguments)
    return builder


def _emit_rule(builder: Rule, args: argparse.Namespace) -> None:
    if args.json:
        json.dump(builder.to_strings(), sys.stdout)
        sys.stdout.write("\n")
        return
    print(builder)


def _emit_rule_set(compiled: dict[str, str], args: argparse.Namespace) -> None:
    if args.json:
        json.dump(compiled, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return
    for attribute, rules in compiled.items():
        print(f"{attribute}: {rules}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def cli_main(argv: list[str] | None = None) -> int:
    """Entry point for the ``fr`` command.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Exit code suitable for ``sys.exit``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if not args.calls and args.config is None:
        print("fr: nothing to build; pass CALL arguments or -c", file=sys.stderr)
        return EXIT_ERROR

    try:
        if args.config is not None:
            rule_set = RuleSet.from_jsonl(args.config)
            rule_set.registry.extend(args.extend)
            _emit_rule_set(rule_set.to_dict(), args)
        else:
            registry = ExtensionRegistry(DEFAULT_REGISTRY.rules())
            registry.extend(args.extend)
            _emit_rule(_build_from_calls(args.calls, registry), args)
    except (RuleBuilderError, ValueError, TypeError, OSError) as exc:
        logger.debug("build failed", exc_info=True)
        print(f"fr: {exc}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


def main() -> None:
    """Thin wrapper that calls ``sys.exit`` with the CLI return code."""
    sys.exit(cli_main())
