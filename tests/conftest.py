"""Shared fixtures for rule builder tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from fluent_rules import ExtensionRegistry, Rule


@pytest.fixture
def registry() -> ExtensionRegistry:
    """Isolated registry with neutral rules that have no custom overrides."""
    return ExtensionRegistry(["basic", "basic_alternative"])


@pytest.fixture
def make_rule(registry: ExtensionRegistry) -> Callable[[], Rule]:
    """Factory for builders bound to the isolated registry."""
    return lambda: Rule(registry=registry)
