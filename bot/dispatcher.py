"""Update dispatcher and main polling loop.

Each raw update is parsed into the SDK :class:`~sdk.models.Update` model,
wrapped in a :class:`~bot.context.Context` and passed through the middleware
chain to the handler.  The loop uses ``asyncio`` to process updates in
parallel, so a slow handler never blocks the bot from receiving new ones.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Sequence

from pydantic import ValidationError

from bot.context import Context
from core.logger import HydrateLogger
from sdk.client import BotApiClient
from sdk.exceptions import HttpError
from sdk.models import Update

logger = HydrateLogger.get_logger()

Handler = Callable[[Context], Awaitable[None]]
NextFn = Callable[[], Awaitable[None]]
Middleware = Callable[[Context, NextFn], Awaitable[None]]

_POLL_TIMEOUT = 30
_RETRY_DELAY = 5


async def run_middlewares(ctx: Context, middlewares: Sequence[Middleware], handler: Handler) -> None:
    """Run *middlewares* in order, then *handler*.

    A middleware continues the chain by awaiting ``next_()``; returning
    without doing so stops the update there.
    """

    async def call(index: int) -> None:
        if index == len(middlewares):
            await handler(ctx)
            return
        await middlewares[index](ctx, lambda: call(index + 1))

    await call(0)


async def process_update(
    client: BotApiClient,
    update: dict[str, Any],
    handler: Handler,
    middlewares: Sequence[Middleware] = (),
) -> None:
    """Dispatch a single raw Telegram update.

    Updates that fail validation are skipped.  Exceptions raised by the
    middlewares or the handler are logged and do not propagate, so one
    failing update cannot stop the polling loop.
    """
    update_id = update.get("update_id")

    try:
        sdk_update = Update.model_validate(update)
    except ValidationError as exc:
        logger.warning("Failed to parse update into SDK model", extra={"update_id": update_id, "error": str(exc)})
        return

    ctx = Context(update=sdk_update, api=client)
    logger.debug("Processing update", extra={"update_id": update_id})
    try:
        await run_middlewares(ctx, middlewares, handler)
    except Exception as exc:  # noqa: BLE001 -- the loop boundary
        logger.exception("Update handler failed", extra={"update_id": update_id, "error": str(exc)})


async def run(client: BotApiClient, handler: Handler, middlewares: Sequence[Middleware] = ()) -> None:
    """Start the async long-polling loop.

    Each update is spawned as an independent :func:`asyncio.create_task` so
    the loop immediately proceeds to fetch the next batch.  ``getUpdates``
    goes through :meth:`BotApiClient.call`, bypassing the transformers.
    """
    offset: int | None = None
    pending: set[asyncio.Task] = set()

    logger.info("Bot is running. Polling for updates (async)...")
    while True:
        payload: dict[str, Any] = {"timeout": _POLL_TIMEOUT}
        if offset is not None:
            payload["offset"] = offset

        try:
            response = await client.call("getUpdates", payload)
        except HttpError as exc:
            logger.error("getUpdates request error", extra={"api_method": "getUpdates", "error": str(exc)})
            await asyncio.sleep(_RETRY_DELAY)
            continue

        if not response.ok:
            logger.warning(
                f"getUpdates returned ok=false, retrying in {_RETRY_DELAY} s",
                extra={"api_method": "getUpdates", "error": response.description},
            )
            await asyncio.sleep(_RETRY_DELAY)
            continue

        updates = response.result or []
        if updates:
            logger.debug("Received updates", extra={"count": len(updates)})
        for update in updates:
            task = asyncio.create_task(process_update(client, update, handler, middlewares))
            pending.add(task)
            task.add_done_callback(pending.discard)
            offset = update["update_id"] + 1
