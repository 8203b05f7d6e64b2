"""The four ways a rule can transform the working resource set.

Each strategy takes ``(resolver, resource_set, rule, value)`` and returns the new
resource set. ``value`` has already passed the rule's gates and been mapped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, cast

from graphresolve.domain.errors import (
    UnknownAttribute,
    UnresolvableArgument,
    UnresolvableParameter,
)
from graphresolve.domain.ports import Dispatchable, Filterable
from graphresolve.domain.rules import StrategyKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphresolve.domain.resolver import Resolver
    from graphresolve.domain.rules import Rule

    type Strategy = Callable[[Resolver, object, Rule, object], object]

log = logging.getLogger(__name__)


def _responds_to(resource_set: object, name: str) -> bool:
    return isinstance(resource_set, Dispatchable) and resource_set.responds_to(name)


def apply_scope(resolver: Resolver, resource_set: object, rule: Rule, value: object) -> object:
    scope = rule.scope
    scope_name = scope(value) if callable(scope) else scope
    if scope_name is None:
        log.debug("Scope for %r resolved to nothing; leaving resource set as is", rule.argument)
        return resource_set
    if not isinstance(resource_set, Dispatchable) or not resource_set.responds_to(scope_name):
        raise UnresolvableArgument(rule.argument, type(resolver).__name__)
    if rule.with_value:
        return resource_set.invoke(scope_name, value)
    return resource_set.invoke(scope_name)


def apply_custom_method(
    resolver: Resolver,
    resource_set: object,
    rule: Rule,
    value: object,
) -> object:
    _ = resource_set
    method = getattr(resolver, cast("str", rule.method))
    return method(value)


def apply_methodic(resolver: Resolver, resource_set: object, rule: Rule, value: object) -> object:
    definition = rule.definition
    if callable(definition):
        return definition(value)
    if isinstance(definition, str):
        if resolver.responds_to(definition):
            return getattr(resolver, definition)(value)
        if _responds_to(resource_set, definition):
            return resource_set.invoke(definition, value)  # type: ignore[union-attr]
    raise UnresolvableParameter(definition, type(resolver).__name__)


def apply_fallback(resolver: Resolver, resource_set: object, rule: Rule, value: object) -> object:
    argument = rule.argument
    if resolver.is_argument_identifier_type(argument):
        value = resolver.resolve_identifier(value)

    if rule.where is None:
        if resolver.responds_to(argument):
            return getattr(resolver, argument)(value)
        if _responds_to(resource_set, argument):
            return resource_set.invoke(argument, value)  # type: ignore[union-attr]

    if isinstance(resource_set, Filterable):
        attribute = rule.where or argument
        if not resource_set.has_attribute(attribute):
            raise UnknownAttribute(attribute, type(resolver).__name__)
        return resource_set.filter_by_equality(attribute, value)

    raise UnresolvableArgument(argument, type(resolver).__name__)


STRATEGIES: Final[dict[StrategyKind, Strategy]] = {
    StrategyKind.SCOPE: apply_scope,
    StrategyKind.CUSTOM_METHOD: apply_custom_method,
    StrategyKind.METHODIC: apply_methodic,
    StrategyKind.FALLBACK: apply_fallback,
}


def apply_rule(resolver: Resolver, resource_set: object, rule: Rule, value: object) -> object:
    log.debug("Applying %s rule for %r", rule.kind, rule.argument)
    return STRATEGIES[rule.kind](resolver, resource_set, rule, value)
