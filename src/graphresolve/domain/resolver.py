"""Resolver definitions: the class-level configuration surface and the evaluation engine.

A resolver is declared once, at import time::

    class PostResolver(Resolver, model=Post):
        pass

    PostResolver.register("status")
    PostResolver.register("active", scope="only_active")
    PostResolver.register("author", method="by_author", map_=str.lower)

and called per request with ``(parent, arguments, context)``. The call derives a base
resource set, optionally replaces it through identifier decoding, applies the rules of
every argument present in the bag in registration order and finally shapes the result
by the field's cardinality.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from graphresolve.config import get_identifier_field
from graphresolve.domain import identifiers
from graphresolve.domain.errors import InvalidConfiguration, ModelBindingError
from graphresolve.domain.frame import EvaluationFrame, activate, current_frame
from graphresolve.domain.naming import collection_accessor
from graphresolve.domain.ports import Materializable
from graphresolve.domain.rules import Rule, RuleSet, condition_met, map_value
from graphresolve.domain.strategies import apply_rule

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from graphresolve.domain.context import RequestContext
    from graphresolve.domain.rules import Callback, ScopeSpec

    type BaseProcedure = Callable[[object, Mapping[str, object], RequestContext], object]

log = logging.getLogger(__name__)


class Resolver:
    """Base class for argument-driven field resolvers."""

    rules: ClassVar[RuleSet] = RuleSet()

    _model: ClassVar[type | None] = None
    _accessor: ClassVar[str | None] = None
    _identifier_field: ClassVar[str | None] = None
    _base_procedure: ClassVar[BaseProcedure | None] = None

    def __init_subclass__(
        cls,
        *,
        model: type | None = None,
        accessor: str | None = None,
        identifier_field: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls.rules = cls.rules.derive()
        if model is not None:
            cls._model = model
        if accessor is not None:
            cls._accessor = accessor
        if identifier_field:
            cls._identifier_field = identifier_field

    def __init__(self, base: BaseProcedure | None = None) -> None:
        if base is not None and not callable(base):
            raise InvalidConfiguration(
                f"{type(self).__name__} requires a callable base procedure or None, "
                f"got {type(base).__name__}"
            )
        self._base = base

    # Configuration surface -----------------------------------------------------

    @classmethod
    def register(  # noqa: PLR0913
        cls,
        argument: str,
        definition: object = None,
        *,
        if_: Callback = None,
        unless: Callback = None,
        map_: Callback = None,
        scope: ScopeSpec = None,
        with_value: bool = False,
        method: str | None = None,
        where: str | None = None,
    ) -> Rule:
        """Append a rule for ``argument``; rules run in the order they are registered."""

        rule = Rule.build(
            argument,
            definition,
            if_=if_,
            unless=unless,
            map_=map_,
            scope=scope,
            with_value=with_value,
            method=method,
            where=where,
        )
        return cls.rules.register(rule)

    @classmethod
    def rules_for(cls, argument: str) -> tuple[Rule, ...]:
        return cls.rules.rules_for(argument)

    @classmethod
    def identifier_field(cls, name: str | None = None) -> str:
        """Return the identifier argument name, setting it first when ``name`` is given."""

        if name:
            cls._ensure_configurable()
            cls._identifier_field = name
        return cls._identifier_field or get_identifier_field()

    @classmethod
    def set_identifier_field_name(cls, name: str) -> None:
        cls.identifier_field(name)

    @classmethod
    def set_base_resolve_procedure(cls, procedure: BaseProcedure) -> None:
        if not callable(procedure):
            raise InvalidConfiguration(
                f"{cls.__name__} requires a callable base procedure, "
                f"got {type(procedure).__name__}"
            )
        cls._ensure_configurable()
        cls._base_procedure = procedure

    @classmethod
    def model(cls) -> type:
        if cls._model is None:
            raise ModelBindingError(f"{cls.__name__} is not bound to a model")
        return cls._model

    @classmethod
    def collection_accessor(cls) -> str:
        return cls._accessor or collection_accessor(cls.model())

    @classmethod
    def _ensure_configurable(cls) -> None:
        if cls.rules.frozen:
            raise InvalidConfiguration(f"{cls.__name__} cannot be reconfigured after use")

    # Deprecated aliases ----------------------------------------------------------

    @classmethod
    def resolve_where(cls, argument: str) -> Rule:
        _warn_deprecated("resolve_where", "register(argument)")
        return cls.register(argument)

    @classmethod
    def resolve_scope(
        cls,
        argument: str,
        test: Callback = None,
        scope_name: ScopeSpec = None,
        *,
        with_value: bool = False,
    ) -> Rule:
        _warn_deprecated("resolve_scope", "register(argument, scope=..., if_=...)")
        return cls.register(
            argument,
            if_=test,
            scope=scope_name if scope_name is not None else argument,
            with_value=with_value,
        )

    @classmethod
    def resolve_method(cls, argument: str) -> Rule:
        _warn_deprecated("resolve_method", "register(argument, method=...)")
        return cls.register(argument, method=argument)

    def has_id_field(self) -> bool:
        _warn_deprecated("has_id_field", "has_identifier_argument()")
        return self.has_identifier_argument()

    # Evaluation --------------------------------------------------------------------

    def __call__(
        self,
        parent: object,
        arguments: Mapping[str, object],
        context: RequestContext,
    ) -> object:
        return self.call(parent, arguments, context)

    def call(
        self,
        parent: object,
        arguments: Mapping[str, object],
        context: RequestContext,
    ) -> object:
        cls = type(self)
        if not cls.rules.frozen:
            # Pin the environment default for the lifetime of the class.
            cls._identifier_field = cls.identifier_field()
            cls.rules.freeze()
        frame = EvaluationFrame(owner=self, parent=parent, arguments=arguments, context=context)
        with activate(frame):
            frame.resource_set = self._resolve_base(parent, arguments, context)

            identifier_field = cls.identifier_field()
            if identifier_field in arguments and self.has_identifier_argument():
                log.debug("Resolving %s through identifier %r", cls.__name__, identifier_field)
                frame.resource_set = self._own_nodes(
                    self.resolve_identifier(arguments[identifier_field])
                )

            for argument, rules in cls.rules.items():
                if argument not in arguments:
                    continue
                value = arguments[argument]
                for rule in rules:
                    if not condition_met(self, rule, value):
                        log.debug("Skipping %s rule for %r", rule.kind, argument)
                        continue
                    frame.resource_set = apply_rule(
                        self, frame.resource_set, rule, map_value(self, rule, value)
                    )

            return self.payload()

    def payload(self) -> object:
        """Shape the current resource set by the cardinality of the field."""

        return shape_payload(self.resource_set, many=self.is_connection() or self.is_list())

    def _own_nodes(self, decoded: object) -> object:
        """Drop decoded nodes of another type than the bound model."""

        model = type(self)._model
        if model is None:
            return decoded
        if isinstance(decoded, list):
            kept = [node for node in decoded if isinstance(node, model)]
            if len(kept) != len(decoded):
                log.debug("Dropped %d identifiers of other types", len(decoded) - len(kept))
            return kept
        if decoded is not None and not isinstance(decoded, model):
            log.debug(
                "Ignoring %s identifier; expected %s", type(decoded).__name__, model.__name__
            )
            return None
        return decoded

    def _resolve_base(
        self,
        parent: object,
        arguments: Mapping[str, object],
        context: RequestContext,
    ) -> object:
        if self._base is not None:
            return self._base(parent, arguments, context)
        procedure = type(self)._base_procedure
        if procedure is not None:
            return procedure(parent, arguments, context)

        accessor = type(self).collection_accessor()
        if parent is not None and (hasattr(type(parent), accessor) or hasattr(parent, accessor)):
            return context.resource_sets.related(parent, accessor)
        return context.resource_sets.all_of(type(self).model())

    # Per-call state ------------------------------------------------------------------

    @property
    def parent(self) -> object:
        return current_frame(self).parent

    @property
    def arguments(self) -> Mapping[str, object]:
        return current_frame(self).arguments

    @property
    def context(self) -> RequestContext:
        return current_frame(self).context

    @property
    def resource_set(self) -> object:
        return current_frame(self).resource_set

    @property
    def field_name(self) -> str:
        return self.context.introspection.current_field_name()

    def is_connection(self) -> bool:
        return self.context.introspection.is_connection_field()

    def is_list(self) -> bool:
        return self.context.introspection.is_list_field()

    def has_identifier_argument(self) -> bool:
        return identifiers.has_identifier_argument(self.context.introspection, self.field_name)

    def is_argument_identifier_type(self, argument: str) -> bool:
        return identifiers.is_argument_identifier_type(
            self.context.introspection, self.field_name, argument
        )

    def resolve_identifier(self, value: object) -> object:
        return identifiers.resolve_identifier(value, self.context)

    def responds_to(self, name: str) -> bool:
        """True when a subclass defines a public callable called ``name``.

        Names belonging to the ``Resolver`` surface itself never count, so arguments
        such as ``context`` or ``call`` are not dispatched into the engine.
        """

        if name.startswith("_") or hasattr(Resolver, name):
            return False
        return callable(getattr(self, name, None))


def shape_payload(result: object, *, many: bool) -> object:
    """Return every item of ``result`` for list-like fields, else only the first one."""

    if isinstance(result, Materializable):
        return list(result.materialize_all()) if many else result.first()
    if result is None:
        return [] if many else None
    if isinstance(result, Sequence) and not isinstance(result, str | bytes):
        if many:
            return list(result)
        return result[0] if result else None
    return [result] if many else result


def _warn_deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"Resolver.{name} is deprecated; use Resolver.{replacement} instead",
        DeprecationWarning,
        stacklevel=3,
    )
