"""Exception types raised by the rule builder."""


class RuleBuilderError(Exception):
    """Base class for rule builder failures."""


class UnresolvableCallError(RuleBuilderError, AttributeError):
    """Raised when a call is not a local rule, proxy rule, or chain refinement.

    Also an ``AttributeError`` so attribute-style lookups on a builder behave
    like ordinary missing attributes (``hasattr`` returns ``False``).
    """

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"Unable to handle or proxy the method {method}(). If it is to be "
            "applied to a proxy rule, ensure it is called directly after the "
            "original proxy rule."
        )
