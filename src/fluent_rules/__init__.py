"""Public package interface for fluent-rules."""

from .builder import BASIC_RULES, PROXIED_RULES, Rule, RuleEntry, RuleKind
from .errors import RuleBuilderError, UnresolvableCallError
from .registry import DEFAULT_REGISTRY, ExtensionRegistry
from .ruleset import RuleSet

__all__ = [
    "BASIC_RULES",
    "DEFAULT_REGISTRY",
    "ExtensionRegistry",
    "PROXIED_RULES",
    "Rule",
    "RuleBuilderError",
    "RuleEntry",
    "RuleKind",
    "RuleSet",
    "UnresolvableCallError",
]
