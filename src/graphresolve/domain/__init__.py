"""Public domain surface: resolver definitions, rules and their collaborators."""

from __future__ import annotations

from graphresolve.domain.context import RequestContext
from graphresolve.domain.errors import (
    InvalidConfiguration,
    ModelBindingError,
    NoActiveCall,
    ResolverError,
    UnknownAttribute,
    UnresolvableArgument,
    UnresolvableParameter,
)
from graphresolve.domain.resolver import Resolver, shape_payload
from graphresolve.domain.rules import Rule, RuleSet, StrategyKind
from graphresolve.domain.types import ID, TypeDescriptor, TypeKind, is_identifier_type

__all__ = [  # noqa: RUF022
    # engine
    "Resolver",
    "RequestContext",
    "shape_payload",
    # rules
    "Rule",
    "RuleSet",
    "StrategyKind",
    # types
    "ID",
    "TypeDescriptor",
    "TypeKind",
    "is_identifier_type",
    # errors
    "ResolverError",
    "InvalidConfiguration",
    "ModelBindingError",
    "NoActiveCall",
    "UnknownAttribute",
    "UnresolvableArgument",
    "UnresolvableParameter",
]
