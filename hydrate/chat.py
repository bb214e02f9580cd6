"""Augmenters for chats and users.

A user only gets chat-scoped moderation operations (ban, restrict, promote,
...) when the augmenter is given the chat they belong to, as for the user of
a ``getChatMember`` result.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from hydrate.fragments import BoundActions
from sdk.client import AbortSignal, ApiCallFn
from sdk.models import Chat, User

ChatId = Union[int, str]


class ChatActions(BoundActions):
    """Handle of a chat.  Every operation is bound to the chat identifier."""

    def __init__(self, call: ApiCallFn, chat: Chat) -> None:
        super().__init__(call, chat_id=chat.id)

    async def _chat_call(self, method: str, other: Any, signal: Optional[AbortSignal], **params: Any) -> Any:
        return await self._invoke(method, self.bound, other, signal, **params)

    # ── Members ──────────────────────────────────────────────────────────

    async def set_permissions(self, permissions: Any, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatPermissions``."""
        return await self._chat_call("setChatPermissions", other, signal, permissions=permissions)

    async def get_member(self, user_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``getChatMember``."""
        return await self._chat_call("getChatMember", other, signal, user_id=user_id)

    async def get_member_count(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``getChatMemberCount``."""
        return await self._chat_call("getChatMemberCount", other, signal)

    async def get_admins(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``getChatAdministrators``."""
        return await self._chat_call("getChatAdministrators", other, signal)

    async def ban_member(self, user_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``banChatMember``."""
        return await self._chat_call("banChatMember", other, signal, user_id=user_id)

    async def unban_member(self, user_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``unbanChatMember``."""
        return await self._chat_call("unbanChatMember", other, signal, user_id=user_id)

    async def ban_sender_chat(self, sender_chat_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``banChatSenderChat``."""
        return await self._chat_call("banChatSenderChat", other, signal, sender_chat_id=sender_chat_id)

    async def unban_sender_chat(self, sender_chat_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``unbanChatSenderChat``."""
        return await self._chat_call("unbanChatSenderChat", other, signal, sender_chat_id=sender_chat_id)

    # ── Stickers ─────────────────────────────────────────────────────────

    async def set_sticker_set(self, sticker_set_name: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatStickerSet``."""
        return await self._chat_call("setChatStickerSet", other, signal, sticker_set_name=sticker_set_name)

    async def delete_sticker_set(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``deleteChatStickerSet``."""
        return await self._chat_call("deleteChatStickerSet", other, signal)

    # ── Forum topics ─────────────────────────────────────────────────────

    async def create_forum_topic(self, name: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``createForumTopic``."""
        return await self._chat_call("createForumTopic", other, signal, name=name)

    async def edit_forum_topic(self, message_thread_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``editForumTopic``."""
        return await self._chat_call("editForumTopic", other, signal, message_thread_id=message_thread_id)

    async def close_forum_topic(self, message_thread_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``closeForumTopic``."""
        return await self._chat_call("closeForumTopic", other, signal, message_thread_id=message_thread_id)

    async def reopen_forum_topic(self, message_thread_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``reopenForumTopic``."""
        return await self._chat_call("reopenForumTopic", other, signal, message_thread_id=message_thread_id)

    async def delete_forum_topic(self, message_thread_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``deleteForumTopic``."""
        return await self._chat_call("deleteForumTopic", other, signal, message_thread_id=message_thread_id)

    async def unpin_all_forum_topic_messages(self, message_thread_id: int, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``unpinAllForumTopicMessages``."""
        return await self._chat_call("unpinAllForumTopicMessages", other, signal, message_thread_id=message_thread_id)

    async def edit_general_forum_topic(self, name: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``editGeneralForumTopic``."""
        return await self._chat_call("editGeneralForumTopic", other, signal, name=name)

    async def close_general_forum_topic(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``closeGeneralForumTopic``."""
        return await self._chat_call("closeGeneralForumTopic", other, signal)

    async def reopen_general_forum_topic(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``reopenGeneralForumTopic``."""
        return await self._chat_call("reopenGeneralForumTopic", other, signal)

    async def hide_general_forum_topic(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``hideGeneralForumTopic``."""
        return await self._chat_call("hideGeneralForumTopic", other, signal)

    async def unhide_general_forum_topic(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``unhideGeneralForumTopic``."""
        return await self._chat_call("unhideGeneralForumTopic", other, signal)

    # ── Chat settings ────────────────────────────────────────────────────

    async def set_menu_button(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatMenuButton``."""
        return await self._chat_call("setChatMenuButton", other, signal)

    async def get_menu_button(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``getChatMenuButton``."""
        return await self._chat_call("getChatMenuButton", other, signal)

    async def leave(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``leaveChat``."""
        return await self._chat_call("leaveChat", other, signal)

    async def set_photo(self, photo: Any, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatPhoto``."""
        return await self._chat_call("setChatPhoto", other, signal, photo=photo)

    async def delete_photo(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``deleteChatPhoto``."""
        return await self._chat_call("deleteChatPhoto", other, signal)

    async def set_title(self, title: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatTitle``."""
        return await self._chat_call("setChatTitle", other, signal, title=title)

    async def set_description(self, description: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``setChatDescription``."""
        return await self._chat_call("setChatDescription", other, signal, description=description)

    async def unpin_all_messages(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``unpinAllChatMessages``."""
        return await self._chat_call("unpinAllChatMessages", other, signal)

    # ── Invite links ─────────────────────────────────────────────────────

    async def create_invite_link(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``createChatInviteLink``."""
        return await self._chat_call("createChatInviteLink", other, signal)

    async def edit_invite_link(self, invite_link: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``editChatInviteLink``."""
        return await self._chat_call("editChatInviteLink", other, signal, invite_link=invite_link)

    async def revoke_invite_link(self, invite_link: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``revokeChatInviteLink``."""
        return await self._chat_call("revokeChatInviteLink", other, signal, invite_link=invite_link)

    async def export_invite_link(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Chat-aware alias for ``exportChatInviteLink``."""
        return await self._chat_call("exportChatInviteLink", other, signal)


class UserActions(BoundActions):
    """Handle of a user seen outside of any chat."""

    def __init__(self, call: ApiCallFn, user: User, **identifiers: Any) -> None:
        super().__init__(call, user_id=user.id, **identifiers)

    async def get_profile_photos(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """User-aware alias for ``getUserProfilePhotos``."""
        return await self._invoke("getUserProfilePhotos", {"user_id": self.bound["user_id"]}, other, signal)


class ChatMemberActions(UserActions):
    """Handle of a user as a member of a specific chat."""

    def __init__(self, call: ApiCallFn, user: User, chat_id: ChatId) -> None:
        super().__init__(call, user, chat_id=chat_id)

    async def ban(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Member-aware alias for ``banChatMember``."""
        return await self._invoke("banChatMember", self.bound, other, signal)

    async def unban(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Member-aware alias for ``unbanChatMember``."""
        return await self._invoke("unbanChatMember", self.bound, other, signal)

    async def restrict(self, permissions: Any, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Member-aware alias for ``restrictChatMember``."""
        return await self._invoke("restrictChatMember", self.bound, other, signal, permissions=permissions)

    async def promote(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Member-aware alias for ``promoteChatMember``.  Pass the rights as keywords."""
        return await self._invoke("promoteChatMember", self.bound, other, signal)

    async def set_custom_title(self, title: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Member-aware alias for ``setChatAdministratorCustomTitle``."""
        return await self._invoke("setChatAdministratorCustomTitle", self.bound, other, signal, custom_title=title)


def install_chat_methods(call: ApiCallFn, chat: Chat) -> None:
    """Install a :class:`ChatActions` handle on *chat*."""
    chat.install_actions(ChatActions(call, chat))


def install_user_methods(call: ApiCallFn, user: User, chat_id: Optional[ChatId] = None) -> None:
    """Install a user handle; moderation operations need *chat_id*."""
    if chat_id is None:
        user.install_actions(UserActions(call, user))
    else:
        user.install_actions(ChatMemberActions(call, user, chat_id))
