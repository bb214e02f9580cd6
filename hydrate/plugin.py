"""Middleware entry points for the surrounding bot framework.

Either one is registered as a middleware ``(ctx, next_)``::

    middlewares = [hydrate()]

``hydrate()`` hydrates the incoming update and the results of every call
made through ``ctx.api``.  ``hydrate_context()`` only hydrates the update;
combine it with ``client.use(hydrate_api())`` to hydrate results as well.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol

from hydrate.interceptor import hydrate_api
from hydrate.update import hydrate_update
from sdk.client import BotApiClient
from sdk.models import Update

NextFn = Callable[[], Awaitable[None]]


class HydratableContext(Protocol):
    """What the middlewares need from a per-update context."""

    update: Update
    api: BotApiClient


Middleware = Callable[[Any, NextFn], Awaitable[None]]


def hydrate_context() -> Middleware:
    """Middleware that installs bound operations on the update's entity."""

    async def middleware(ctx: HydratableContext, next_: NextFn) -> None:
        hydrate_update(ctx.api.call_api, ctx.update)
        await next_()

    return middleware


def hydrate() -> Middleware:
    """Middleware hydrating the update and all call results.

    The transformer is installed on the context's client the first time the
    middleware sees that client.
    """
    transformer = hydrate_api()

    async def middleware(ctx: HydratableContext, next_: NextFn) -> None:
        if transformer not in ctx.api.installed_transformers():
            ctx.api.use(transformer)
        hydrate_update(ctx.api.call_api, ctx.update)
        await next_()

    return middleware
