"""JSONL-backed rule sets: per-attribute call chains compiled to rule strings.

Each non-blank line of a rule-set file is a JSON object of one of two
shapes::

    {"extend": ["uppercase", "slug"]}
    {"attribute": "email", "rules": [["required"], ["email", 255], "bail"]}

A call is either a bare method name or a ``[method, *arguments]`` list.
Extension lines register rules on the rule set's own registry, which starts
as a copy of the process-wide registry.
"""


import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from .arguments import ARGUMENT_DELIMITER, ARGUMENT_SEPARATOR
from .builder import Rule
from .registry import DEFAULT_REGISTRY, ExtensionRegistry

logger = logging.getLogger(__name__)

Call: TypeAlias = tuple[str, tuple[object, ...]]

_ATTRIBUTE_FIELD = "attribute"
_RULES_FIELD = "rules"
_EXTEND_FIELD = "extend"


@dataclass
class AttributeRules:
    """Ordered builder calls for a single attribute."""

    attribute: str
    calls: list[Call] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        """Serialize to the JSONL object shape."""
        return {
            _ATTRIBUTE_FIELD: self.attribute,
            _RULES_FIELD: [[method, *arguments] for method, arguments in self.calls],
        }


class RuleSet:
    """Named attribute rule chains with their own extension registry."""

    def __init__(
        self,
        attributes: Iterable[AttributeRules] = (),
        extensions: Iterable[str] = (),
    ) -> None:
        """Initialize a rule set.

        Args:
            attributes: Attribute call chains, compiled in this order.
            extensions: Rule names registered for this rule set only, on top
                of whatever the process-wide registry holds.
        """
        self.attributes = list(attributes)
        self.extensions = list(extensions)
        names = [rules.attribute for rules in self.attributes]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate attributes in rule set: {', '.join(duplicates)}")
        self.registry = ExtensionRegistry(DEFAULT_REGISTRY.rules())
        self.registry.extend(self.extensions)

    @classmethod
    def from_jsonl(cls, path: str | Path) -> "RuleSet":
        """Build a rule set from a JSONL file."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        attributes, extensions = _parse_rule_set_lines(lines)
        logger.debug(
            "loaded %d attribute(s) and %d extension(s) from %s",
            len(attributes),
            len(extensions),
            path,
        )
        return cls(attributes, extensions)

    def to_jsonl(self, path: str | Path) -> None:
        """Write this rule set as JSONL, extensions first."""
        output_path = Path(path)
        with output_path.open("w", encoding="utf-8") as handle:
            if self.extensions:
                handle.write(json.dumps({_EXTEND_FIELD: self.extensions}))
                handle.write("\n")
            for rules in self.attributes:
                handle.write(json.dumps(rules.to_payload()))
                handle.write("\n")

    def compile(self) -> dict[str, Rule]:
        """Apply every attribute's calls to a fresh builder."""
        compiled: dict[str, Rule] = {}
        for rules in self.attributes:
            builder = Rule(registry=self.registry)
            for method, arguments in rules.calls:
                builder.apply(method, *arguments)
            compiled[rules.attribute] = builder
        return compiled

    def to_dict(self) -> dict[str, str]:
        """Return the compiled rule string for each attribute."""
        return {attribute: str(rule) for attribute, rule in self.compile().items()}


def parse_call_token(token: str) -> Call:
    """Parse a ``name[:arg,arg...]`` token into a builder call."""
    method, _, raw_arguments = token.partition(ARGUMENT_DELIMITER)
    method = method.strip()
    if not method:
        raise ValueError(f"Missing rule name in {token!r}")
    if not raw_arguments:
        return method, ()
    return method, tuple(raw_arguments.split(ARGUMENT_SEPARATOR))


def _parse_call(raw: object, line_number: int) -> Call:
    """Parse one JSON call entry."""
    if isinstance(raw, str):
        return raw, ()
    if isinstance(raw, Sequence) and raw and isinstance(raw[0], str):
        return raw[0], tuple(raw[1:])
    raise TypeError(
        f"Line {line_number}: each rule must be a name or a [name, *arguments] list"
    )


def _parse_rule_set_lines(
    lines: Iterable[str],
) -> tuple[list[AttributeRules], list[str]]:
    """Parse attribute and extension lines from JSONL text."""
    attributes: list[AttributeRules] = []
    extensions: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue

        try:
            payload = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON on line {line_number}: {exc.msg}") from exc

        if not isinstance(payload, dict):
            raise TypeError(f"Line {line_number} must be a JSON object")

        if _EXTEND_FIELD in payload:
            names = payload[_EXTEND_FIELD]
            if not isinstance(names, list) or not all(
                isinstance(name, str) for name in names
            ):
                raise TypeError(
                    f"Line {line_number} must contain a list of strings in "
                    f"'{_EXTEND_FIELD}'"
                )
            extensions.extend(names)
            continue

        attribute = payload.get(_ATTRIBUTE_FIELD)
        if not isinstance(attribute, str):
            raise TypeError(
                f"Line {line_number} must contain string '{_ATTRIBUTE_FIELD}'"
            )

        raw_calls = payload.get(_RULES_FIELD)
        if not isinstance(raw_calls, list):
            raise TypeError(f"Line {line_number} must contain list '{_RULES_FIELD}'")

        calls = [_parse_call(raw, line_number) for raw in raw_calls]
        attributes.append(AttributeRules(attribute=attribute, calls=calls))

    return attributes, extensions
