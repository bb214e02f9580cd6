"""Augmenters for queries and join requests: the updates a bot answers."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from hydrate.chat import install_user_methods
from hydrate.fragments import BoundActions, InlineEditable
from hydrate.message import InlineMessageActions, install_message_methods
from sdk.client import AbortSignal, ApiCallFn
from sdk.models import (
    CallbackQuery,
    ChatJoinRequest,
    ChosenInlineResult,
    InlineQuery,
    PreCheckoutQuery,
    ShippingQuery,
)


class CallbackQueryActions(BoundActions):
    """Handle of a callback query."""

    def __init__(self, call: ApiCallFn, callback_query: CallbackQuery) -> None:
        super().__init__(call, callback_query_id=callback_query.id)

    async def answer(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Callback query-aware alias for ``answerCallbackQuery``.

        Pass ``text`` and ``show_alert`` to show a notification or alert.
        """
        return await self._invoke("answerCallbackQuery", self.bound, other, signal)


class InlineCallbackQueryActions(CallbackQueryActions, InlineEditable):
    """Callback query from an inline message: it can also edit that message."""

    def __init__(self, call: ApiCallFn, callback_query: CallbackQuery) -> None:
        super().__init__(call, callback_query)
        self._edit_target = {"inline_message_id": callback_query.inline_message_id}


class InlineQueryActions(BoundActions):
    def __init__(self, call: ApiCallFn, inline_query: InlineQuery) -> None:
        super().__init__(call, inline_query_id=inline_query.id)

    async def answer(self, results: Sequence[Any], *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Inline query-aware alias for ``answerInlineQuery``.  At most 50 results."""
        return await self._invoke("answerInlineQuery", self.bound, other, signal, results=list(results))


class ShippingQueryActions(BoundActions):
    def __init__(self, call: ApiCallFn, shipping_query: ShippingQuery) -> None:
        super().__init__(call, shipping_query_id=shipping_query.id)

    async def answer(self, ok: bool, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Shipping query-aware alias for ``answerShippingQuery``.

        Pass ``shipping_options`` when *ok* is true, ``error_message`` otherwise.
        """
        return await self._invoke("answerShippingQuery", self.bound, other, signal, ok=ok)


class PreCheckoutQueryActions(BoundActions):
    def __init__(self, call: ApiCallFn, pre_checkout_query: PreCheckoutQuery) -> None:
        super().__init__(call, pre_checkout_query_id=pre_checkout_query.id)

    async def answer(self, ok: bool, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Pre-checkout query-aware alias for ``answerPreCheckoutQuery``.

        Telegram must receive the answer within 10 seconds.
        """
        return await self._invoke("answerPreCheckoutQuery", self.bound, other, signal, ok=ok)


class ChatJoinRequestActions(BoundActions):
    def __init__(self, call: ApiCallFn, chat_join_request: ChatJoinRequest) -> None:
        super().__init__(call, chat_id=chat_join_request.chat.id, user_id=chat_join_request.from_field.id)

    async def approve(self, *, signal: Optional[AbortSignal] = None) -> Any:
        """Join request-aware alias for ``approveChatJoinRequest``."""
        return await self._invoke("approveChatJoinRequest", self.bound, {}, signal)

    async def decline(self, *, signal: Optional[AbortSignal] = None) -> Any:
        """Join request-aware alias for ``declineChatJoinRequest``."""
        return await self._invoke("declineChatJoinRequest", self.bound, {}, signal)


def install_callback_query_methods(call: ApiCallFn, callback_query: CallbackQuery) -> None:
    """Install the query handle and hydrate the message it came from.

    A full embedded message gets its own handle; for an inline message the
    edit operations go on the query handle instead.
    """
    if callback_query.message is not None:
        install_message_methods(call, callback_query.message)
        callback_query.install_actions(CallbackQueryActions(call, callback_query))
    elif callback_query.inline_message_id is not None:
        callback_query.install_actions(InlineCallbackQueryActions(call, callback_query))
    else:
        callback_query.install_actions(CallbackQueryActions(call, callback_query))


def install_inline_query_methods(call: ApiCallFn, inline_query: InlineQuery) -> None:
    inline_query.install_actions(InlineQueryActions(call, inline_query))


def install_chosen_inline_result_methods(call: ApiCallFn, chosen_inline_result: ChosenInlineResult) -> None:
    """Hydrate the sender and, when there is one, the sent inline message."""
    install_user_methods(call, chosen_inline_result.from_field)
    if chosen_inline_result.inline_message_id is not None:
        chosen_inline_result.install_actions(
            InlineMessageActions(call, chosen_inline_result.inline_message_id)
        )


def install_shipping_query_methods(call: ApiCallFn, shipping_query: ShippingQuery) -> None:
    shipping_query.install_actions(ShippingQueryActions(call, shipping_query))


def install_pre_checkout_query_methods(call: ApiCallFn, pre_checkout_query: PreCheckoutQuery) -> None:
    pre_checkout_query.install_actions(PreCheckoutQueryActions(call, pre_checkout_query))


def install_chat_join_request_methods(call: ApiCallFn, chat_join_request: ChatJoinRequest) -> None:
    chat_join_request.install_actions(ChatJoinRequestActions(call, chat_join_request))
