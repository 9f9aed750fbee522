"""Rule factory that produces proxy rule objects by identifier."""


from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeAlias

from fluent_rules.errors import UnresolvableCallError

from .base import ProxyRule
from .database import Exists, Unique
from .dimensions import Dimensions
from .membership import In, NotIn

ProxyRuleFactory: TypeAlias = Callable[..., ProxyRule]

PROXY_RULE_FACTORIES: Mapping[str, ProxyRuleFactory] = MappingProxyType(
    {
        "dimensions": Dimensions,
        "exists": Exists,
        "in": In,
        "not_in": NotIn,
        "unique": Unique,
    }
)


def build_proxy_rule(rule: str, *arguments: Any) -> ProxyRule:
    """Build the proxy rule registered for ``rule`` with positional arguments."""
    factory = PROXY_RULE_FACTORIES.get(rule)
    if factory is None:
        raise UnresolvableCallError(rule)
    return factory(*arguments)
