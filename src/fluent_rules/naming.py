"""Method-name to rule-identifier resolution.

Callers invoke arbitrarily named methods on a builder (``isString``,
``alphaDash``, ``not_in``...). Before classification every call name is
reduced to a canonical snake_case rule identifier:

1. a trailing underscore used to dodge Python keywords is dropped
   (``in_`` -> ``in``);
2. a leading chaining prefix is stripped (``isString`` -> ``string``);
3. the remainder is converted to snake_case (``alphaDash`` -> ``alpha_dash``).

Prefix stripping is triggered by a literal ``startswith`` test and then trims
every leading character found in the prefix, without any word-boundary
check. So ``issue`` resolves to ``ue`` and ``isset`` to ``et``. Existing
callers rely on this.
"""


import re

CHAINING_METHOD_PREFIXES: tuple[str, ...] = ("is", "allowed", "has", "matches")

_WHITESPACE_RE = re.compile(r"\s+")
_CASE_BOUNDARY_RE = re.compile(r"(.)(?=[A-Z])")


def strip_keyword_suffix(method: str) -> str:
    """Drop one trailing underscore (``in_`` -> ``in``)."""
    if len(method) > 1 and method.endswith("_"):
        return method[:-1]
    return method


def strip_method_prefix(method: str) -> str:
    """Trim the first matching chaining prefix and lowercase what follows.

    Once a prefix matches, every leading character that occurs in it is
    trimmed, not just the prefix itself (``hash`` -> ``""``).
    """
    for prefix in CHAINING_METHOD_PREFIXES:
        if method.startswith(prefix):
            remainder = method.lstrip(prefix)
            return remainder[:1].lower() + remainder[1:]
    return method


def snake_case(value: str) -> str:
    """Convert ``camelCase``/``StudlyCase`` words to ``snake_case``.

    Already-lowercase input is returned unchanged, so the conversion is
    idempotent for canonical identifiers.
    """
    if value.isascii() and value.isalpha() and value.islower():
        return value
    words = _WHITESPACE_RE.split(value.strip())
    joined = "".join(word[:1].upper() + word[1:] for word in words)
    return _CASE_BOUNDARY_RE.sub(r"\1_", joined).lower()


def method_name_to_rule(method: str) -> str:
    """Return the canonical rule identifier for a bare method name."""
    return snake_case(method)


def resolve_rule(method: str) -> str:
    """Resolve a raw call name to its canonical rule identifier."""
    return method_name_to_rule(strip_method_prefix(strip_keyword_suffix(method)))
