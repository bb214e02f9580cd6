"""Per-update context handed to middlewares and handlers."""

from __future__ import annotations

import dataclasses
from typing import Optional

from sdk.client import BotApiClient
from sdk.models import (
    CallbackQuery,
    Chat,
    ChatJoinRequest,
    ChosenInlineResult,
    InlineQuery,
    Message,
    PreCheckoutQuery,
    ShippingQuery,
    Update,
    User,
)


@dataclasses.dataclass(slots=True)
class Context:
    """An incoming update together with the client to answer it with.

    The shortcut properties return the update's fields; with the hydrate
    middleware installed they carry bound operations::

        await ctx.message.actions.react("👍")
    """
    update: Update
    api: BotApiClient

    @property
    def message(self) -> Optional[Message]:
        return self.update.message

    @property
    def edited_message(self) -> Optional[Message]:
        return self.update.edited_message

    @property
    def channel_post(self) -> Optional[Message]:
        return self.update.channel_post

    @property
    def edited_channel_post(self) -> Optional[Message]:
        return self.update.edited_channel_post

    @property
    def callback_query(self) -> Optional[CallbackQuery]:
        return self.update.callback_query

    @property
    def inline_query(self) -> Optional[InlineQuery]:
        return self.update.inline_query

    @property
    def chosen_inline_result(self) -> Optional[ChosenInlineResult]:
        return self.update.chosen_inline_result

    @property
    def shipping_query(self) -> Optional[ShippingQuery]:
        return self.update.shipping_query

    @property
    def pre_checkout_query(self) -> Optional[PreCheckoutQuery]:
        return self.update.pre_checkout_query

    @property
    def chat_join_request(self) -> Optional[ChatJoinRequest]:
        return self.update.chat_join_request

    @property
    def msg(self) -> Optional[Message]:
        """Whichever message the update carries, including a callback query's."""
        callback_message = self.update.callback_query.message if self.update.callback_query else None
        return (
            self.update.message
            or self.update.edited_message
            or self.update.channel_post
            or self.update.edited_channel_post
            or callback_message
        )

    @property
    def chat(self) -> Optional[Chat]:
        message = self.msg
        if message is not None:
            return message.chat
        if self.update.chat_join_request is not None:
            return self.update.chat_join_request.chat
        return None

    @property
    def from_user(self) -> Optional[User]:
        """The user who caused the update, when Telegram reports one."""
        for entity in (
            self.update.callback_query,
            self.update.inline_query,
            self.update.chosen_inline_result,
            self.update.shipping_query,
            self.update.pre_checkout_query,
            self.update.chat_join_request,
            self.msg,
        ):
            if entity is not None:
                return entity.from_field
        return None
