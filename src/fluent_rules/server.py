"""MCP server exposing the rule builder as tools."""


import argparse
import json
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .builder import Rule
from .errors import RuleBuilderError
from .registry import DEFAULT_REGISTRY
from .ruleset import RuleSet, parse_call_token
from .version import PACKAGE_VERSION

MCP_SERVER_NAME = "fluent-rules"
mcp_server = FastMCP(MCP_SERVER_NAME)


def _build(calls: list[str]) -> dict:
    """Apply ``NAME:ARGS`` call tokens to a fresh builder and describe the result."""
    builder = Rule()
    for token in calls:
        method, arguments = parse_call_token(token)
        builder.apply(method, *arguments)
    return {"rule": str(builder), "rules": builder.to_strings()}


@mcp_server.tool()
def build_rule(calls: list[str]) -> str:
    """Build a pipe-delimited validation rule string.

    Each call is ``name`` or ``name:arg1,arg2`` and is applied in order, for
    example ``["required", "string:1,255", "unique:users,email", "ignore:5"]``.
    Returns a JSON object with the rule string and the individual rules.
    """
    try:
        result = _build(calls)
    except (RuleBuilderError, ValueError, TypeError) as exc:
        return json.dumps({"error": str(exc)})
    return json.dumps(result, indent=2)


@mcp_server.tool()
def compile_rule_file(file_path: str) -> str:
    """Compile a JSONL rule-set file into per-attribute rule strings.

    Returns a JSON object mapping each attribute to its rule string.
    """
    path = Path(file_path)
    if not path.is_file():
        return json.dumps({"error": f"File not found: {file_path}"})

    try:
        compiled = RuleSet.from_jsonl(path).to_dict()
    except (RuleBuilderError, ValueError, TypeError, OSError) as exc:
        return json.dumps({"error": f"Could not compile rule set: {exc}"})

    return json.dumps({"file": file_path, "rules": compiled}, indent=2)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the MCP server CLI parser."""
    parser = argparse.ArgumentParser(
        prog="fluent-rules",
        description="Run the fluent-rules MCP server on stdio.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    parser.add_argument(
        "-e", "--extend",
        action="append",
        default=[],
        metavar="NAME",
        help="Register an extension rule for the server process. Can be repeated.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the fluent-rules MCP server on stdio."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    DEFAULT_REGISTRY.extend(args.extend)
    mcp_server.run()
