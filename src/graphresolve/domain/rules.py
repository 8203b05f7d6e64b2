"""Rule values and the per-resolver rule registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from graphresolve.domain.errors import InvalidConfiguration

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)

# A callable taking the argument value, the name of a resolver method, or nothing.
type Callback = Callable[[object], object] | str | None
type ScopeSpec = Callable[[object], str | None] | str | None


class StrategyKind(StrEnum):
    SCOPE = "scope"
    CUSTOM_METHOD = "custom_method"
    METHODIC = "methodic"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True, kw_only=True)
class Rule:
    """One resolution instruction bound to an argument name."""

    argument: str
    kind: StrategyKind
    definition: object = None
    scope: ScopeSpec = None
    with_value: bool = False
    method: str | None = None
    where: str | None = None
    if_: Callback = None
    unless: Callback = None
    map_: Callback = None

    @classmethod
    def build(  # noqa: PLR0913
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
        """Create a rule, choosing its strategy from the options that are present."""

        present = [
            name
            for name, option in (("scope", scope), ("method", method), ("definition", definition))
            if option is not None
        ]
        if len(present) > 1:
            log.warning(
                "Rule for %r sets %s; only %r takes effect",
                argument,
                ", ".join(present),
                present[0],
            )

        if scope is not None:
            kind = StrategyKind.SCOPE
        elif method is not None:
            kind = StrategyKind.CUSTOM_METHOD
        elif definition is not None:
            kind = StrategyKind.METHODIC
        else:
            kind = StrategyKind.FALLBACK

        return cls(
            argument=argument,
            kind=kind,
            definition=definition,
            scope=scope,
            with_value=with_value,
            method=method,
            where=where,
            if_=if_,
            unless=unless,
            map_=map_,
        )


class RuleSet:
    """Ordered mapping of argument name to the rules registered for it.

    Populated while a resolver class is being defined and frozen once the first call
    is evaluated. Both argument order and per-argument rule order follow registration.
    """

    def __init__(self, rules: dict[str, list[Rule]] | None = None) -> None:
        self._rules: dict[str, list[Rule]] = {
            argument: list(entries) for argument, entries in (rules or {}).items()
        }
        self._frozen = False

    def register(self, rule: Rule) -> Rule:
        if self._frozen:
            raise InvalidConfiguration(
                f"Cannot register a rule for {rule.argument!r} after resolution has started"
            )
        self._rules.setdefault(rule.argument, []).append(rule)
        return rule

    def rules_for(self, argument: str) -> tuple[Rule, ...]:
        return tuple(self._rules.get(argument, ()))

    def items(self) -> Iterator[tuple[str, tuple[Rule, ...]]]:
        for argument, entries in self._rules.items():
            yield argument, tuple(entries)

    def derive(self) -> RuleSet:
        """Return an unfrozen copy, used when a resolver class is subclassed."""

        return RuleSet(self._rules)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def arguments(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def __contains__(self, argument: object) -> bool:
        return argument in self._rules

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._rules.values())

    def __repr__(self) -> str:
        return f"RuleSet(arguments={list(self._rules)!r}, frozen={self._frozen})"


def invoke_callback(target: object, callback: Callback, value: object) -> object:
    """Run a callable or a method of ``target`` named by ``callback`` with ``value``."""

    if callable(callback):
        return callback(value)
    if isinstance(callback, str):
        return getattr(target, callback)(value)
    raise InvalidConfiguration(f"Unsupported callback of type {type(callback).__name__}")


def condition_met(target: object, rule: Rule, value: object) -> bool:
    """Evaluate the ``if_`` / ``unless`` gates of ``rule`` against the raw value."""

    if rule.if_ is not None and not invoke_callback(target, rule.if_, value):
        return False
    return not (rule.unless is not None and invoke_callback(target, rule.unless, value))


def map_value(target: object, rule: Rule, value: object) -> object:
    if rule.map_ is None:
        return value
    return invoke_callback(target, rule.map_, value)
