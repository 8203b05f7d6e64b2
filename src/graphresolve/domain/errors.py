"""Error taxonomy raised by the resolution engine.

Every error is raised synchronously from ``Resolver.call`` and aborts the remaining
rule pass. The surrounding GraphQL layer is expected to turn them into field errors.
"""

from __future__ import annotations


class ResolverError(RuntimeError):
    """Base class for resolution failures."""


class InvalidConfiguration(ResolverError):
    """Raised when a resolver definition is configured with unusable values."""


class UnresolvableParameter(ResolverError):
    """Raised when a methodic rule matches neither a callable, a resolver method nor a
    resource set operation."""

    def __init__(self, definition: object, resolver_name: str) -> None:
        self.definition = definition
        self.resolver_name = resolver_name
        super().__init__(
            f"Unable to resolve parameter of type {type(definition).__name__} "
            f"in {resolver_name}"
        )


class UnknownAttribute(ResolverError):
    """Raised when an equality filter targets an attribute the resource set lacks."""

    def __init__(self, attribute: str, resolver_name: str) -> None:
        self.attribute = attribute
        self.resolver_name = resolver_name
        super().__init__(f"{resolver_name} cannot filter on unknown attribute {attribute!r}")


class UnresolvableArgument(ResolverError):
    """Raised when an argument has no matching method and the resource set cannot be
    filtered."""

    def __init__(self, argument: str, resolver_name: str) -> None:
        self.argument = argument
        self.resolver_name = resolver_name
        super().__init__(f"Unable to resolve argument {argument!r} in {resolver_name}")


class ModelBindingError(ResolverError):
    """Raised when ``model()`` is requested from a resolver not bound to a model."""


class NoActiveCall(ResolverError):
    """Raised when per-call state is read outside of ``Resolver.call``."""
