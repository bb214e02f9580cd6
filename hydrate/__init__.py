"""Hydration layer -- bound convenience operations for Telegram entities.

Re-exports the entry points so callers can write::

    from hydrate import hydrate, hydrate_api, hydrate_update
"""

from hydrate.adapter import bind_method, method_name
from hydrate.chat import ChatActions, ChatMemberActions, UserActions, install_chat_methods, install_user_methods
from hydrate.fragments import INLINE_EDITABLE_OPERATIONS, BoundActions, InlineEditable
from hydrate.interceptor import RESULT_SHAPES, classify_result, hydrate_api, hydrate_result
from hydrate.message import InlineMessageActions, MessageActions, normalize_reaction
from hydrate.plugin import hydrate, hydrate_context
from hydrate.queries import (
    CallbackQueryActions,
    ChatJoinRequestActions,
    InlineCallbackQueryActions,
    InlineQueryActions,
    PreCheckoutQueryActions,
    ShippingQueryActions,
)
from hydrate.update import UPDATE_VARIANTS, hydrate_update, update_kind

__all__ = [
    "bind_method",
    "method_name",
    "BoundActions",
    "InlineEditable",
    "INLINE_EDITABLE_OPERATIONS",
    "MessageActions",
    "InlineMessageActions",
    "normalize_reaction",
    "ChatActions",
    "UserActions",
    "ChatMemberActions",
    "install_chat_methods",
    "install_user_methods",
    "CallbackQueryActions",
    "InlineCallbackQueryActions",
    "InlineQueryActions",
    "ShippingQueryActions",
    "PreCheckoutQueryActions",
    "ChatJoinRequestActions",
    "UPDATE_VARIANTS",
    "update_kind",
    "hydrate_update",
    "RESULT_SHAPES",
    "classify_result",
    "hydrate_result",
    "hydrate_api",
    "hydrate",
    "hydrate_context",
]
