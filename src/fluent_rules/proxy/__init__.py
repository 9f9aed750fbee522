"""Proxy rule objects and the factory that builds them."""

from .base import DatabaseRule, ProxyRule
from .database import Exists, Unique
from .dimensions import Dimensions
from .factory import PROXY_RULE_FACTORIES, build_proxy_rule
from .membership import In, NotIn

__all__ = [
    "DatabaseRule",
    "Dimensions",
    "Exists",
    "In",
    "NotIn",
    "PROXY_RULE_FACTORIES",
    "ProxyRule",
    "Unique",
    "build_proxy_rule",
]
