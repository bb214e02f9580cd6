"""Tests for the bound-call adapter and the capability fragments."""

import asyncio
import sys
import os
from types import MappingProxyType
from unittest.mock import AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hydrate.adapter import bind_method
from hydrate.fragments import INLINE_EDITABLE_OPERATIONS, BoundActions, InlineEditable
from sdk.exceptions import BotApiError
from sdk.models import ApiResponse


def _ok_call(result=True) -> AsyncMock:
    return AsyncMock(return_value=ApiResponse(ok=True, result=result))


class _SampleHandle(BoundActions):
    async def poke(self, *, signal=None, **other):
        return await self._invoke("pokeThing", self.bound, other, signal)

    async def poke_with_default(self, *, signal=None, **other):
        return await self._invoke("pokeThing", {}, other, signal, defaults={"mode": self.bound["mode"]})

    def not_an_operation(self) -> None:
        pass


class _Editable(InlineEditable):
    def __init__(self, call, inline_message_id: str) -> None:
        super().__init__(call, inline_message_id=inline_message_id)
        self._edit_target = {"inline_message_id": inline_message_id}


# ── Adapter ──────────────────────────────────────────────────────────────────


class TestBindMethod:
    @pytest.mark.asyncio
    async def test_returns_result(self) -> None:
        call = _ok_call({"id": 1})
        invoke = bind_method(call, "getChat")
        assert await invoke({"chat_id": 1}) == {"id": 1}
        call.assert_awaited_once_with("getChat", {"chat_id": 1}, None)

    @pytest.mark.asyncio
    async def test_accepts_attribute_names(self) -> None:
        call = _ok_call()
        await bind_method(call, "delete_message")({"chat_id": 1, "message_id": 2})
        assert call.await_args.args[0] == "deleteMessage"

    @pytest.mark.asyncio
    async def test_failure_raises(self) -> None:
        call = AsyncMock(return_value=ApiResponse(ok=False, error_code=400, description="Bad Request"))
        with pytest.raises(BotApiError) as exc_info:
            await bind_method(call, "getChat")({"chat_id": 1})
        assert exc_info.value.method == "getChat"
        assert exc_info.value.payload == {"chat_id": 1}

    @pytest.mark.asyncio
    async def test_forwards_signal(self) -> None:
        call = _ok_call()
        signal = asyncio.Event()
        await bind_method(call, "getMe")(None, signal)
        call.assert_awaited_once_with("getMe", {}, signal)


# ── BoundActions ─────────────────────────────────────────────────────────────


class TestBoundActions:
    def test_bound_is_read_only(self) -> None:
        handle = _SampleHandle(_ok_call(), chat_id=1)
        assert isinstance(handle.bound, MappingProxyType)
        with pytest.raises(TypeError):
            handle.bound["chat_id"] = 2

    def test_identifiers_are_copied(self) -> None:
        identifiers = {"chat_id": 1}
        handle = _SampleHandle(_ok_call(), **identifiers)
        identifiers["chat_id"] = 2
        assert handle.bound["chat_id"] == 1

    def test_operations(self) -> None:
        assert _SampleHandle.operations() == frozenset({"poke", "poke_with_default"})

    def test_repr(self) -> None:
        assert repr(_SampleHandle(_ok_call(), chat_id=1)) == "_SampleHandle({'chat_id': 1})"

    @pytest.mark.asyncio
    async def test_payload_merges_bound_and_other(self) -> None:
        call = _ok_call()
        await _SampleHandle(call, chat_id=1).poke(text="hi")
        call.assert_awaited_once_with("pokeThing", {"chat_id": 1, "text": "hi"}, None)

    @pytest.mark.asyncio
    async def test_overriding_bound_identifier_raises(self) -> None:
        call = _ok_call()
        with pytest.raises(TypeError, match="chat_id"):
            await _SampleHandle(call, chat_id=1).poke(chat_id=2)
        call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_none_identifiers_are_omitted(self) -> None:
        call = _ok_call()
        await _SampleHandle(call, chat_id=1, business_connection_id=None).poke()
        call.assert_awaited_once_with("pokeThing", {"chat_id": 1}, None)

    @pytest.mark.asyncio
    async def test_defaults_can_be_overridden(self) -> None:
        call = _ok_call()
        handle = _SampleHandle(call, mode="quiet")
        await handle.poke_with_default()
        await handle.poke_with_default(mode="loud")
        assert call.await_args_list[0].args[1] == {"mode": "quiet"}
        assert call.await_args_list[1].args[1] == {"mode": "loud"}

    @pytest.mark.asyncio
    async def test_signal_forwarded_unchanged(self) -> None:
        call = _ok_call()
        signal = asyncio.Event()
        await _SampleHandle(call, chat_id=1).poke(signal=signal)
        assert call.await_args.args[2] is signal


# ── InlineEditable ───────────────────────────────────────────────────────────


class TestInlineEditable:
    def test_operation_set(self) -> None:
        assert INLINE_EDITABLE_OPERATIONS == frozenset(
            {
                "edit_text",
                "edit_caption",
                "edit_media",
                "edit_reply_markup",
                "edit_live_location",
                "stop_live_location",
            }
        )

    @pytest.mark.asyncio
    async def test_edit_text(self) -> None:
        call = _ok_call()
        assert await _Editable(call, "im1").edit_text("new", parse_mode="HTML") is True
        call.assert_awaited_once_with(
            "editMessageText", {"inline_message_id": "im1", "text": "new", "parse_mode": "HTML"}, None
        )

    @pytest.mark.asyncio
    async def test_edit_caption_without_caption_removes_it(self) -> None:
        call = _ok_call()
        await _Editable(call, "im1").edit_caption()
        call.assert_awaited_once_with("editMessageCaption", {"inline_message_id": "im1"}, None)

    @pytest.mark.asyncio
    async def test_edit_media(self) -> None:
        call = _ok_call()
        media = {"type": "photo", "media": "file-id"}
        await _Editable(call, "im1").edit_media(media)
        call.assert_awaited_once_with("editMessageMedia", {"inline_message_id": "im1", "media": media}, None)

    @pytest.mark.asyncio
    async def test_edit_reply_markup(self) -> None:
        call = _ok_call()
        markup = {"inline_keyboard": []}
        await _Editable(call, "im1").edit_reply_markup(markup)
        call.assert_awaited_once_with(
            "editMessageReplyMarkup", {"inline_message_id": "im1", "reply_markup": markup}, None
        )

    @pytest.mark.asyncio
    async def test_live_location(self) -> None:
        call = _ok_call()
        editable = _Editable(call, "im1")
        await editable.edit_live_location(52.5, 13.4, heading=90)
        await editable.stop_live_location()
        assert call.await_args_list[0].args == (
            "editMessageLiveLocation",
            {"inline_message_id": "im1", "latitude": 52.5, "longitude": 13.4, "heading": 90},
            None,
        )
        assert call.await_args_list[1].args == ("stopMessageLiveLocation", {"inline_message_id": "im1"}, None)

    @pytest.mark.asyncio
    async def test_edit_target_cannot_be_overridden(self) -> None:
        with pytest.raises(TypeError):
            await _Editable(_ok_call(), "im1").edit_text("x", inline_message_id="other")
