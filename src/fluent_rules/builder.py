"""Fluent validation rule builder.

A :class:`Rule` accumulates rule entries in call order and renders them as a
pipe-delimited string::

    >>> str(Rule.string(1, 10).email().unique("users").ignore(5))
    'string|min:1|max:10|email|unique:users,NULL,"5",id'

Every call name is resolved to a canonical identifier and classified, in
this order, as a local rule (built in or registered at runtime), a proxy
rule produced by the rule factory, or a refinement of the proxy rule
appended last. Anything else raises :class:`UnresolvableCallError` and
leaves the builder untouched.
"""


import functools
import logging
import warnings
from collections.abc import Callable
from enum import StrEnum
from typing import Any, TypeAlias

from .arguments import build_rule_string, flatten
from .errors import UnresolvableCallError
from .naming import resolve_rule
from .overrides import CUSTOM_RULES
from .proxy import ProxyRule, build_proxy_rule
from .registry import DEFAULT_REGISTRY, ExtensionRegistry

logger = logging.getLogger(__name__)

RuleEntry: TypeAlias = str | ProxyRule

RULE_SEPARATOR = "|"

BASIC_RULES: frozenset[str] = frozenset(
    {
        # rules
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
        "optional",
        "present",
        "required",
        "string",
        "timezone",
        "url",
        # rules with arguments
        "after",
        "before",
        "between",
        "date_format",
        "different",
        "digits",
        "digits_between",
        "foreign_key",
        "in_array",
        "max",
        "mimetypes",
        "mimes",
        "min",
        "raw",
        "regex",
        "required_with",
        "required_with_all",
        "required_without",
        "required_without_all",
        "same",
        "size",
        "unique",
        "when",
        # rules with identifier and arguments
        "required_if",
        "required_unless",
        # flags
        "bail",
        "sometimes",
    }
)

PROXIED_RULES: frozenset[str] = frozenset({"dimensions", "exists", "in", "not_in"})

assert not BASIC_RULES & PROXIED_RULES, "Rule listed as both basic and proxied"


class RuleKind(StrEnum):
    """How a call is dispatched by the builder."""

    LOCAL = "local"
    PROXY = "proxy"
    CHAIN = "chain"


class RuleMeta(type):
    """Let ``Rule.<name>(...)`` start a new chain on a fresh builder."""

    def __getattr__(cls, name: str) -> Callable[..., "Rule"]:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(cls(), name)


class Rule(metaclass=RuleMeta):
    """Ordered, append-only builder of validation rule entries."""

    def __init__(self, registry: ExtensionRegistry | None = None) -> None:
        """Create an empty builder.

        Args:
            registry: Extension rules treated as local rules. Defaults to the
                process-wide :data:`DEFAULT_REGISTRY`.
        """
        self.registry = DEFAULT_REGISTRY if registry is None else registry
        self._applied_rules: list[RuleEntry] = []
        # Instance calls register on this builder's registry.
        self.extend = self.extend_registry

    @classmethod
    def extend(cls, *rules: object) -> None:
        """Register extension rules on the process-wide registry.

        Called on an instance, this is :meth:`extend_registry` instead.
        """
        DEFAULT_REGISTRY.extend(rules)

    def extend_registry(self, *rules: object) -> "Rule":
        """Register extension rules on this builder's own registry."""
        self.registry.extend(rules)
        return self

    @classmethod
    def extend_with_rules(cls, *rules: object) -> None:
        """Deprecated alias of :meth:`extend`."""
        warnings.warn(
            "Rule.extend_with_rules() is deprecated; use Rule.extend()",
            DeprecationWarning,
            stacklevel=2,
        )
        cls.extend(rules)

    def __getattr__(self, method: str) -> Callable[..., "Rule"]:
        if method.startswith("_") or "_applied_rules" not in self.__dict__:
            raise AttributeError(method)
        if self.classify(method) is None:
            raise UnresolvableCallError(method)
        return functools.partial(self.apply, method)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify(self, method: str) -> RuleKind | None:
        """Return how ``method`` would be dispatched, or ``None`` if it cannot be."""
        rule = resolve_rule(method)
        if self.is_local_rule(rule):
            return RuleKind.LOCAL
        if self.is_proxy_rule(rule):
            return RuleKind.PROXY
        if self.can_apply_to_latest_proxy_rule(method):
            return RuleKind.CHAIN
        return None

    def is_local_rule(self, rule: str) -> bool:
        return rule in BASIC_RULES or rule in self.registry

    def is_proxy_rule(self, rule: str) -> bool:
        return rule in PROXIED_RULES

    def latest_proxy_rule(self) -> ProxyRule | None:
        """Return the last entry if it is a proxy rule."""
        if self._applied_rules and isinstance(self._applied_rules[-1], ProxyRule):
            return self._applied_rules[-1]
        return None

    def can_apply_to_latest_proxy_rule(self, method: str) -> bool:
        latest = self.latest_proxy_rule()
        return latest is not None and latest.supports(method)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def apply(self, method: str, *arguments: Any) -> "Rule":
        """Resolve ``method`` and apply it with ``arguments``.

        Raises:
            UnresolvableCallError: ``method`` is neither a local rule, a
                proxy rule, nor a refinement of the latest proxy rule.
        """
        kind = self.classify(method)
        logger.debug("dispatching %s() as %s", method, kind)
        if kind is RuleKind.LOCAL:
            return self.apply_local_rule(resolve_rule(method), *arguments)
        if kind is RuleKind.PROXY:
            return self.apply_proxy_rule(resolve_rule(method), *arguments)
        if kind is RuleKind.CHAIN:
            return self.apply_to_latest_proxy_rule(method, *arguments)
        raise UnresolvableCallError(method)

    def apply_local_rule(self, rule: str, *arguments: Any) -> "Rule":
        """Apply a local rule through its custom override, if any."""
        custom = CUSTOM_RULES.get(rule)
        if custom is not None:
            return custom(self, *arguments)
        return self.append(build_rule_string(rule, flatten(arguments)))

    def apply_proxy_rule(self, rule: str, *arguments: Any) -> "Rule":
        """Build a proxy rule with the rule factory and append it."""
        return self.append(build_proxy_rule(rule, *arguments))

    def apply_to_latest_proxy_rule(self, method: str, *arguments: Any) -> "Rule":
        """Refine the latest proxy rule in place."""
        latest = self.latest_proxy_rule()
        if latest is None:
            raise UnresolvableCallError(method)
        latest.refine(method, *arguments)
        return self

    # ------------------------------------------------------------------
    # Rule store
    # ------------------------------------------------------------------

    def append(self, entry: RuleEntry) -> "Rule":
        """Append a rendered string rule or a proxy rule object."""
        self._applied_rules.append(entry)
        return self

    def get(self) -> list[RuleEntry]:
        """Return a snapshot of the applied rules in call order."""
        return list(self._applied_rules)

    def to_strings(self) -> list[str]:
        """Return every applied rule rendered as a string."""
        return [str(entry) for entry in self._applied_rules]

    def __str__(self) -> str:
        return RULE_SEPARATOR.join(self.to_strings())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
