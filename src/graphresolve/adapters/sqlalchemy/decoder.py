"""Relay global identifier decoding against SQLAlchemy-mapped models."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import inspect as sa_inspect
from strawberry.relay import GlobalID

from graphresolve.domain.errors import InvalidConfiguration

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy.orm import Session

    from graphresolve.domain.context import RequestContext

log = logging.getLogger(__name__)


class SqlAlchemyNodeDecoder:
    """Load the row a relay global id points at.

    ``models`` maps GraphQL type names to mapped classes. Identifiers that are not
    global ids are looked up as plain primary keys of ``local_model`` when one is
    configured.
    """

    def __init__(
        self,
        session: Session,
        models: Mapping[str, type],
        *,
        local_model: type | None = None,
    ) -> None:
        self.session = session
        self.models = dict(models)
        self.local_model = local_model

    def decode(self, opaque_id: object, context: RequestContext) -> object | None:
        _ = context
        try:
            global_id = GlobalID.from_id(opaque_id) if isinstance(opaque_id, str) else None
        except ValueError:
            global_id = None

        if global_id is None:
            if self.local_model is None:
                log.debug("Ignoring identifier %r: not a global id", opaque_id)
                return None
            return self._load(self.local_model, opaque_id)

        model = self.models.get(global_id.type_name)
        if model is None:
            log.debug("Ignoring global id for unknown type %s", global_id.type_name)
            return None
        return self._load(model, global_id.node_id)

    def _load(self, model: type, node_id: object) -> object | None:
        primary_key = sa_inspect(model).primary_key
        if len(primary_key) != 1:
            raise InvalidConfiguration(
                f"{model.__name__} has a composite primary key and cannot be loaded by id"
            )
        try:
            python_type = primary_key[0].type.python_type
        except NotImplementedError:
            key = node_id
        else:
            try:
                key = node_id if isinstance(node_id, python_type) else python_type(node_id)
            except (TypeError, ValueError):
                log.debug("Identifier %r is not a valid %s key", node_id, model.__name__)
                return None
        return self.session.get(model, key)
