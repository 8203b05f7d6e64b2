"""Per-call evaluation state.

A resolver instance is shared between requests, so everything that changes during a
call lives on an ``EvaluationFrame`` bound to a context variable. Threads and asyncio
tasks each see their own frame, and nested calls restore the outer frame on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphresolve.domain.errors import NoActiveCall

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from graphresolve.domain.context import RequestContext


@dataclass(slots=True, kw_only=True)
class EvaluationFrame:
    owner: object
    parent: object
    arguments: Mapping[str, object]
    context: RequestContext
    resource_set: object = None


_current_frame: ContextVar[EvaluationFrame | None] = ContextVar(
    "graphresolve_evaluation_frame", default=None
)


@contextmanager
def activate(frame: EvaluationFrame) -> Iterator[EvaluationFrame]:
    token = _current_frame.set(frame)
    try:
        yield frame
    finally:
        _current_frame.reset(token)


def current_frame(owner: object | None = None) -> EvaluationFrame:
    """Return the active frame, optionally requiring it to belong to ``owner``."""

    frame = _current_frame.get()
    if frame is None or (owner is not None and frame.owner is not owner):
        raise NoActiveCall("No resolver call is in progress")
    return frame
