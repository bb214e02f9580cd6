"""Augmenters for messages and inline message stubs."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel

from hydrate.fragments import InlineEditable
from sdk.client import AbortSignal, ApiCallFn
from sdk.models import InlineMessage, Message, ReactionType

ReactionInput = Union[str, ReactionType, Dict[str, Any], Sequence[Union[str, ReactionType, Dict[str, Any]]]]


def normalize_reaction(reaction: ReactionInput) -> List[Dict[str, Any]]:
    """Turn an emoji, a reaction object or a list of either into wire form.

    ``"👍"`` → ``[{"type": "emoji", "emoji": "👍"}]``.
    """
    if isinstance(reaction, (str, dict, BaseModel)):
        items: Sequence[Any] = [reaction]
    else:
        items = reaction
    normalized: List[Dict[str, Any]] = []
    for item in items:
        if isinstance(item, str):
            normalized.append({"type": "emoji", "emoji": item})
        elif isinstance(item, BaseModel):
            normalized.append(item.model_dump(exclude_none=True))
        else:
            normalized.append(dict(item))
    return normalized


class InlineMessageActions(InlineEditable):
    """Handle of an inline message: only the edit fragment applies."""

    def __init__(self, call: ApiCallFn, inline_message_id: str) -> None:
        super().__init__(call, inline_message_id=inline_message_id)
        self._edit_target = {"inline_message_id": inline_message_id}


class MessageActions(InlineEditable):
    """Handle of a full message, addressed by chat and message identifier."""

    def __init__(self, call: ApiCallFn, message: Message) -> None:
        super().__init__(
            call,
            chat_id=message.chat.id,
            message_id=message.message_id,
            business_connection_id=message.business_connection_id,
        )
        self._edit_target = {"chat_id": message.chat.id, "message_id": message.message_id}
        # Copied up front so later edits to the model don't leak into the handle.
        self._entities = list(message.entities if message.entities is not None else message.caption_entities or [])

    async def forward(self, chat_id: Union[int, str], *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``forwardMessage``.  Returns the sent Message."""
        source = {"from_chat_id": self.bound["chat_id"], "message_id": self.bound["message_id"]}
        return await self._invoke("forwardMessage", source, other, signal, chat_id=chat_id)

    async def copy(self, chat_id: Union[int, str], *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``copyMessage``.  Returns ``{"message_id": ...}`` of the copy."""
        source = {"from_chat_id": self.bound["chat_id"], "message_id": self.bound["message_id"]}
        return await self._invoke("copyMessage", source, other, signal, chat_id=chat_id)

    async def pin(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``pinChatMessage``."""
        return await self._invoke(
            "pinChatMessage", self._edit_target, other, signal,
            defaults={"business_connection_id": self.bound["business_connection_id"]},
        )

    async def unpin(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``unpinChatMessage``."""
        return await self._invoke(
            "unpinChatMessage", self._edit_target, other, signal,
            defaults={"business_connection_id": self.bound["business_connection_id"]},
        )

    async def delete(self, *, signal: Optional[AbortSignal] = None) -> Any:
        """Message-aware alias for ``deleteMessage``.

        A message can only be deleted if it was sent less than 48 hours ago.
        """
        return await self._invoke("deleteMessage", self._edit_target, {}, signal)

    async def react(self, reaction: ReactionInput, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``setMessageReaction``.

        *reaction* may be an emoji string, a reaction object, or a list of
        either; see :func:`normalize_reaction`.
        """
        return await self._invoke(
            "setMessageReaction", self._edit_target, other, signal,
            reaction=normalize_reaction(reaction),
        )

    async def get_custom_emoji_stickers(self, *, signal: Optional[AbortSignal] = None) -> Any:
        """Message-aware alias for ``getCustomEmojiStickers``.

        Looks up the custom emoji of the message text (or caption).  Returns
        ``[]`` without calling the API when there are none.
        """
        identifiers = [
            entity.custom_emoji_id
            for entity in self._entities
            if entity.type == "custom_emoji" and entity.custom_emoji_id
        ]
        if not identifiers:
            return []
        return await self._invoke("getCustomEmojiStickers", {}, {}, signal, custom_emoji_ids=identifiers)


def install_message_methods(call: ApiCallFn, message: Message) -> None:
    """Install a :class:`MessageActions` handle on *message*."""
    message.install_actions(MessageActions(call, message))


def install_inline_message_methods(call: ApiCallFn, message: InlineMessage) -> None:
    """Install an :class:`InlineMessageActions` handle on *message*."""
    message.install_actions(InlineMessageActions(call, message.inline_message_id))
