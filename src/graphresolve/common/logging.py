"""Shared logging helpers for graphresolve."""

from __future__ import annotations

import logging

from graphresolve.config import get_resolver_settings


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Point the root logger at stderr using the level from ``ResolverSettings``.

    An explicit ``level`` wins over ``GRAPHRESOLVE_LOG_LEVEL``; the environment is only
    consulted when no level is passed. ``force`` replaces handlers installed earlier.
    """

    logging.basicConfig(
        level=get_resolver_settings().log_level if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
