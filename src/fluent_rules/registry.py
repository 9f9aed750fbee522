"""Process-wide registry of runtime extension rules."""


import logging
import threading
from collections.abc import Iterable

from .arguments import flatten

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Additive set of rule identifiers handled as local rules.

    Registration and lookup share one lock so a reader never observes a
    partially extended list. Entries are never removed.
    """

    def __init__(self, rules: Iterable[object] = ()) -> None:
        """Initialize the registry, optionally seeded with rule names."""
        self._lock = threading.Lock()
        self._rules: tuple[str, ...] = ()
        self.extend(rules)

    def extend(self, *rules: object) -> None:
        """Register rule names given individually, as lists, or nested lists."""
        names = flatten(rules)
        if not all(isinstance(name, str) for name in names):
            raise TypeError("extension rule names must be strings")
        with self._lock:
            self._rules = self._rules + tuple(names)
        if names:
            logger.debug("registered extension rules: %s", ", ".join(names))

    def rules(self) -> tuple[str, ...]:
        """Return a snapshot of the registered rule names in order."""
        with self._lock:
            return self._rules

    def __contains__(self, rule: object) -> bool:
        with self._lock:
            return rule in self._rules

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.rules())!r})"


DEFAULT_REGISTRY = ExtensionRegistry()
