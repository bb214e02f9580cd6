"""Tests for the hydrate middlewares."""

import sys
import os
from unittest.mock import patch, AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bot.context import Context
from hydrate.message import MessageActions
from hydrate.plugin import hydrate, hydrate_context
from sdk.client import BotApiClient
from sdk.models import ApiResponse, Message, Update

_MESSAGE = {"message_id": 9, "date": 0, "chat": {"id": 5, "type": "private"}, "text": "hi"}


def _make_ctx(client: BotApiClient, update_id: int = 1) -> Context:
    return Context(update=Update.model_validate({"update_id": update_id, "message": _MESSAGE}), api=client)


class TestHydrateContext:
    @pytest.mark.asyncio
    async def test_hydrates_update_only(self) -> None:
        client = BotApiClient("https://api.example.com")
        ctx = _make_ctx(client)
        next_ = AsyncMock()

        await hydrate_context()(ctx, next_)

        next_.assert_awaited_once()
        assert isinstance(ctx.message.actions, MessageActions)
        assert client.installed_transformers() == []

    @pytest.mark.asyncio
    async def test_update_handles_call_through_client(self) -> None:
        client = BotApiClient("https://api.example.com")
        ctx = _make_ctx(client)
        mock_call = AsyncMock(return_value=ApiResponse(ok=True, result=True))

        await hydrate_context()(ctx, AsyncMock())
        with patch.object(client, "call", mock_call):
            await ctx.message.actions.react("👍")

        mock_call.assert_awaited_once_with(
            "setMessageReaction",
            {"chat_id": 5, "message_id": 9, "reaction": [{"type": "emoji", "emoji": "👍"}]},
            None,
        )


class TestHydrate:
    @pytest.mark.asyncio
    async def test_hydrates_update_and_results(self) -> None:
        client = BotApiClient("https://api.example.com")
        ctx = _make_ctx(client)
        next_ = AsyncMock()

        await hydrate()(ctx, next_)

        next_.assert_awaited_once()
        assert ctx.message.is_hydrated
        with patch.object(client, "call", AsyncMock(return_value=ApiResponse(ok=True, result=_MESSAGE))):
            sent = await ctx.api.raw.send_message({"chat_id": 5, "text": "hi"})
        assert isinstance(sent, Message)
        assert isinstance(sent.actions, MessageActions)

    @pytest.mark.asyncio
    async def test_transformer_installed_once_per_client(self) -> None:
        client = BotApiClient("https://api.example.com")
        middleware = hydrate()

        await middleware(_make_ctx(client, 1), AsyncMock())
        await middleware(_make_ctx(client, 2), AsyncMock())

        assert len(client.installed_transformers()) == 1

    @pytest.mark.asyncio
    async def test_each_client_gets_the_transformer(self) -> None:
        first, second = BotApiClient("https://a.example.com"), BotApiClient("https://b.example.com")
        middleware = hydrate()

        await middleware(_make_ctx(first), AsyncMock())
        await middleware(_make_ctx(second), AsyncMock())

        assert len(first.installed_transformers()) == 1
        assert len(second.installed_transformers()) == 1

    @pytest.mark.asyncio
    async def test_next_error_propagates(self) -> None:
        client = BotApiClient("https://api.example.com")
        next_ = AsyncMock(side_effect=RuntimeError("handler failed"))
        with pytest.raises(RuntimeError):
            await hydrate()(_make_ctx(client), next_)
