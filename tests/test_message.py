"""Tests for the message and inline message augmenters."""

import asyncio
import sys
import os
from unittest.mock import AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hydrate.fragments import INLINE_EDITABLE_OPERATIONS
from hydrate.message import (
    InlineMessageActions,
    MessageActions,
    install_inline_message_methods,
    install_message_methods,
    normalize_reaction,
)
from sdk.exceptions import BotApiError
from sdk.models import (
    ApiResponse,
    Chat,
    InlineMessage,
    Message,
    MessageEntity,
    ReactionTypeCustomEmoji,
    ReactionTypePaid,
)


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _ok_call(result=True) -> AsyncMock:
    return AsyncMock(return_value=ApiResponse(ok=True, result=result))


def _make_message(chat_id: int = 5, message_id: int = 9, **fields) -> Message:
    """Build a minimal SDK Message model."""
    return Message(message_id=message_id, date=0, chat=Chat(id=chat_id, type="private"), **fields)


def _custom_emoji(emoji_id: str, offset: int = 0) -> MessageEntity:
    return MessageEntity(type="custom_emoji", offset=offset, length=2, custom_emoji_id=emoji_id)


# ── normalize_reaction ───────────────────────────────────────────────────────


class TestNormalizeReaction:
    def test_emoji_string(self) -> None:
        assert normalize_reaction("👍") == [{"type": "emoji", "emoji": "👍"}]

    def test_model(self) -> None:
        assert normalize_reaction(ReactionTypePaid()) == [{"type": "paid"}]

    def test_dict(self) -> None:
        reaction = {"type": "custom_emoji", "custom_emoji_id": "77"}
        assert normalize_reaction(reaction) == [reaction]

    def test_mixed_list(self) -> None:
        assert normalize_reaction(["🔥", ReactionTypeCustomEmoji(custom_emoji_id="77")]) == [
            {"type": "emoji", "emoji": "🔥"},
            {"type": "custom_emoji", "custom_emoji_id": "77"},
        ]

    def test_empty_list_clears(self) -> None:
        assert normalize_reaction([]) == []


# ── install_message_methods ──────────────────────────────────────────────────


class TestInstallMessageMethods:
    def test_installs_handle(self) -> None:
        message = _make_message()
        install_message_methods(_ok_call(), message)
        assert isinstance(message.actions, MessageActions)
        assert message.actions.bound["chat_id"] == 5
        assert message.actions.bound["message_id"] == 9

    def test_operation_set(self) -> None:
        expected = INLINE_EDITABLE_OPERATIONS | {
            "forward",
            "copy",
            "pin",
            "unpin",
            "delete",
            "react",
            "get_custom_emoji_stickers",
        }
        assert MessageActions.operations() == expected

    def test_wire_fields_unchanged(self) -> None:
        message = _make_message(text="hi")
        before = message.model_dump()
        install_message_methods(_ok_call(), message)
        assert message.model_dump() == before


class TestMessageActions:
    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        assert await message.actions.delete() is True
        call.assert_awaited_once_with("deleteMessage", {"chat_id": 5, "message_id": 9}, None)

    @pytest.mark.asyncio
    async def test_identifiers_captured_at_install(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        message.message_id = 100
        await message.actions.delete()
        assert call.await_args.args[1] == {"chat_id": 5, "message_id": 9}

    @pytest.mark.asyncio
    async def test_forward(self) -> None:
        call = _ok_call({"message_id": 1, "date": 0, "chat": {"id": 7, "type": "private"}})
        message = _make_message()
        install_message_methods(call, message)
        await message.actions.forward(7, disable_notification=True)
        call.assert_awaited_once_with(
            "forwardMessage",
            {"from_chat_id": 5, "message_id": 9, "chat_id": 7, "disable_notification": True},
            None,
        )

    @pytest.mark.asyncio
    async def test_copy(self) -> None:
        call = _ok_call({"message_id": 33})
        message = _make_message()
        install_message_methods(call, message)
        copied = await message.actions.copy("@channel")
        assert type(copied) is dict
        assert copied == {"message_id": 33}
        call.assert_awaited_once_with("copyMessage", {"from_chat_id": 5, "message_id": 9, "chat_id": "@channel"}, None)

    @pytest.mark.asyncio
    async def test_forward_cannot_override_source(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        with pytest.raises(TypeError):
            await message.actions.forward(7, message_id=1)
        call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pin_without_business_connection(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        await message.actions.pin(disable_notification=True)
        call.assert_awaited_once_with(
            "pinChatMessage", {"chat_id": 5, "message_id": 9, "disable_notification": True}, None
        )

    @pytest.mark.asyncio
    async def test_pin_binds_business_connection(self) -> None:
        call = _ok_call()
        message = _make_message(business_connection_id="bc1")
        install_message_methods(call, message)
        await message.actions.pin()
        await message.actions.unpin(business_connection_id="bc2")
        assert call.await_args_list[0].args == (
            "pinChatMessage", {"chat_id": 5, "message_id": 9, "business_connection_id": "bc1"}, None,
        )
        assert call.await_args_list[1].args == (
            "unpinChatMessage", {"chat_id": 5, "message_id": 9, "business_connection_id": "bc2"}, None,
        )

    @pytest.mark.asyncio
    async def test_react(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        await message.actions.react("👍", is_big=True)
        call.assert_awaited_once_with(
            "setMessageReaction",
            {"chat_id": 5, "message_id": 9, "reaction": [{"type": "emoji", "emoji": "👍"}], "is_big": True},
            None,
        )

    @pytest.mark.asyncio
    async def test_edit_text_is_bound_to_message(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        await message.actions.edit_text("new")
        call.assert_awaited_once_with("editMessageText", {"chat_id": 5, "message_id": 9, "text": "new"}, None)

    @pytest.mark.asyncio
    async def test_failure_raises_bot_api_error(self) -> None:
        call = AsyncMock(
            return_value=ApiResponse(ok=False, error_code=400, description="Bad Request: message can't be deleted")
        )
        message = _make_message()
        install_message_methods(call, message)
        with pytest.raises(BotApiError) as exc_info:
            await message.actions.delete()
        exc = exc_info.value
        assert exc.method == "deleteMessage"
        assert exc.payload == {"chat_id": 5, "message_id": 9}
        assert exc.error_code == 400

    @pytest.mark.asyncio
    async def test_signal_forwarded(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        signal = asyncio.Event()
        await message.actions.delete(signal=signal)
        call.assert_awaited_once_with("deleteMessage", {"chat_id": 5, "message_id": 9}, signal)

    @pytest.mark.asyncio
    async def test_concurrent_operations_are_independent(self) -> None:
        call = _ok_call()
        message = _make_message()
        install_message_methods(call, message)
        await asyncio.gather(message.actions.pin(), message.actions.react("🔥"))
        methods = sorted(c.args[0] for c in call.await_args_list)
        assert methods == ["pinChatMessage", "setMessageReaction"]


class TestCustomEmojiStickers:
    @pytest.mark.asyncio
    async def test_no_entities_skips_call(self) -> None:
        call = _ok_call()
        message = _make_message(text="plain")
        install_message_methods(call, message)
        assert await message.actions.get_custom_emoji_stickers() == []
        call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_custom_emoji_skips_call(self) -> None:
        call = _ok_call()
        message = _make_message(text="#tag", entities=[MessageEntity(type="hashtag", offset=0, length=4)])
        install_message_methods(call, message)
        assert await message.actions.get_custom_emoji_stickers() == []
        call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_text_entities(self) -> None:
        stickers = [{"file_id": "s1"}, {"file_id": "s2"}]
        call = _ok_call(stickers)
        message = _make_message(text="⭐ ⭐", entities=[_custom_emoji("a"), _custom_emoji("b", offset=3)])
        install_message_methods(call, message)
        assert await message.actions.get_custom_emoji_stickers() == stickers
        call.assert_awaited_once_with("getCustomEmojiStickers", {"custom_emoji_ids": ["a", "b"]}, None)

    @pytest.mark.asyncio
    async def test_caption_entities_fallback(self) -> None:
        call = _ok_call([])
        message = _make_message(caption="⭐", caption_entities=[_custom_emoji("c")])
        install_message_methods(call, message)
        await message.actions.get_custom_emoji_stickers()
        call.assert_awaited_once_with("getCustomEmojiStickers", {"custom_emoji_ids": ["c"]}, None)


# ── Inline messages ──────────────────────────────────────────────────────────


class TestInlineMessageActions:
    def test_only_edit_operations(self) -> None:
        assert InlineMessageActions.operations() == INLINE_EDITABLE_OPERATIONS

    @pytest.mark.asyncio
    async def test_edit_text(self) -> None:
        call = _ok_call()
        message = InlineMessage(inline_message_id="im1")
        install_inline_message_methods(call, message)
        assert isinstance(message.actions, InlineMessageActions)
        await message.actions.edit_text("updated")
        call.assert_awaited_once_with("editMessageText", {"inline_message_id": "im1", "text": "updated"}, None)
