"""Pydantic data models for the Telegram Bot API objects the SDK works with.

Every class corresponds to an object of the Bot API reference.  Entities that
the hydration layer can augment derive from :class:`HydratableModel`: they keep
unknown wire fields (``extra="allow"``) so that converting a decoded result
into a model never drops data, and they carry a private slot for the handle of
bound operations exposed as ``entity.actions``.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr


class HydratableModel(BaseModel):
    """Base for entities that can carry a handle of bound operations.

    The handle is stored in a private attribute, so it never shows up in
    :meth:`model_dump` and is not part of the wire representation.
    """

    _actions: Optional[Any] = PrivateAttr(default=None)

    model_config = {"populate_by_name": True, "extra": "allow"}

    @property
    def actions(self) -> Optional[Any]:
        """Bound operations installed by the hydration layer, or ``None``."""
        return self._actions

    @property
    def is_hydrated(self) -> bool:
        return self._actions is not None

    def install_actions(self, actions: Any) -> None:
        """Attach *actions*, replacing any previously installed handle."""
        self._actions = actions


# ── Envelope ─────────────────────────────────────────────────────────────────


class ResponseParameters(BaseModel):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = {"populate_by_name": True}


class ApiResponse(BaseModel):
    """Envelope of every Bot API response.

    On success ``ok`` is ``True`` and ``result`` holds the decoded result.
    On failure ``ok`` is ``False`` and ``error_code``/``description``
    (and optionally ``parameters``) describe the error.
    """

    ok: bool
    result: Any = None
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional["ResponseParameters"] = None

    model_config = {"populate_by_name": True}


# ── Users and chats ──────────────────────────────────────────────────────────


class User(HydratableModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ChatPhoto(BaseModel):
    """This object represents a chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str

    model_config = {"populate_by_name": True}


class ChatPermissions(BaseModel):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_audios: Optional[bool] = None
    can_send_documents: Optional[bool] = None
    can_send_photos: Optional[bool] = None
    can_send_videos: Optional[bool] = None
    can_send_video_notes: Optional[bool] = None
    can_send_voice_notes: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Chat(HydratableModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None
    photo: Optional["ChatPhoto"] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional["ChatPermissions"] = None
    slow_mode_delay: Optional[int] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None

    model_config = {"populate_by_name": True}


class ChatMember(BaseModel):
    """This object contains information about one member of a chat.

    The Bot API has one variant per ``status``; the variant-specific fields
    are kept as extra attributes.
    """

    status: str
    user: "User"
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    until_date: Optional[int] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class ChatInviteLink(BaseModel):
    """Represents an invite link for a chat."""

    invite_link: str
    creator: "User"
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None

    model_config = {"populate_by_name": True}


class ChatMemberUpdated(BaseModel):
    """This object represents changes in the status of a chat member."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    date: int
    old_chat_member: "ChatMember"
    new_chat_member: "ChatMember"
    invite_link: Optional["ChatInviteLink"] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class ChatJoinRequest(HydratableModel):
    """Represents a join request sent to a chat."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    user_chat_id: int
    date: int
    bio: Optional[str] = None
    invite_link: Optional["ChatInviteLink"] = None

    model_config = {"populate_by_name": True}


# ── Messages ─────────────────────────────────────────────────────────────────


class MessageEntity(BaseModel):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class PhotoSize(BaseModel):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Location(BaseModel):
    """This object represents a point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardButton(BaseModel):
    """This object represents one button of an inline keyboard. You **must** use exactly one of the optional fields."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class InlineKeyboardMarkup(BaseModel):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]

    model_config = {"populate_by_name": True}


class Message(HydratableModel):
    """This object represents a message.

    Only the fields the SDK reads are declared; every other field of the
    wire object is preserved as an extra attribute.
    """

    message_id: int
    date: int
    chat: "Chat"
    message_thread_id: Optional[int] = None
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    business_connection_id: Optional[str] = None
    is_topic_message: Optional[bool] = None
    reply_to_message: Optional["Message"] = None
    via_bot: Optional["User"] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    photo: Optional[List["PhotoSize"]] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    pinned_message: Optional["Message"] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None

    model_config = {"populate_by_name": True}


class InlineMessage(HydratableModel):
    """A message sent via the bot in inline mode, known only by its identifier.

    This is the shape of ``SentWebAppMessage`` and the stub behind the
    ``inline_message_id`` of callback queries and chosen inline results.
    """

    inline_message_id: str

    model_config = {"populate_by_name": True}


# ── Reactions ────────────────────────────────────────────────────────────────


class ReactionTypeEmoji(BaseModel):
    """The reaction is based on an emoji."""

    type: Literal["emoji"] = "emoji"
    emoji: str

    model_config = {"populate_by_name": True}


class ReactionTypeCustomEmoji(BaseModel):
    """The reaction is based on a custom emoji."""

    type: Literal["custom_emoji"] = "custom_emoji"
    custom_emoji_id: str

    model_config = {"populate_by_name": True}


class ReactionTypePaid(BaseModel):
    """The reaction is paid."""

    type: Literal["paid"] = "paid"

    model_config = {"populate_by_name": True}


ReactionType = Union[ReactionTypeEmoji, ReactionTypeCustomEmoji, ReactionTypePaid]


# ── Polls ────────────────────────────────────────────────────────────────────


class PollOption(BaseModel):
    """This object contains information about one answer option in a poll."""

    text: str
    voter_count: int

    model_config = {"populate_by_name": True}


class Poll(BaseModel):
    """This object contains information about a poll."""

    id: str
    question: str
    options: List["PollOption"]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool

    model_config = {"populate_by_name": True, "extra": "allow"}


class PollAnswer(BaseModel):
    """This object represents an answer of a user in a non-anonymous poll."""

    poll_id: str
    option_ids: List[int]
    user: Optional["User"] = None
    voter_chat: Optional["Chat"] = None

    model_config = {"populate_by_name": True}


# ── Queries ──────────────────────────────────────────────────────────────────


class CallbackQuery(HydratableModel):
    """This object represents an incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: "User" = Field(..., alias="from")
    chat_instance: str
    message: Optional["Message"] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class InlineQuery(HydratableModel):
    """This object represents an incoming inline query. When the user sends an empty query, your bot could return some default or trending results."""

    id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional["Location"] = None

    model_config = {"populate_by_name": True}


class ChosenInlineResult(HydratableModel):
    """Represents a result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    location: Optional["Location"] = None
    inline_message_id: Optional[str] = None

    model_config = {"populate_by_name": True}


class ShippingAddress(BaseModel):
    """This object represents a shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str

    model_config = {"populate_by_name": True}


class OrderInfo(BaseModel):
    """This object represents information about an order."""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional["ShippingAddress"] = None

    model_config = {"populate_by_name": True}


class ShippingQuery(HydratableModel):
    """This object contains information about an incoming shipping query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    invoice_payload: str
    shipping_address: "ShippingAddress"

    model_config = {"populate_by_name": True}


class PreCheckoutQuery(HydratableModel):
    """This object contains information about an incoming pre-checkout query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None

    model_config = {"populate_by_name": True}


# ── Update ───────────────────────────────────────────────────────────────────


class Update(BaseModel):
    """This object represents an incoming update. At most **one** of the optional parameters can be present in any given update."""

    update_id: int
    message: Optional["Message"] = None
    edited_message: Optional["Message"] = None
    channel_post: Optional["Message"] = None
    edited_channel_post: Optional["Message"] = None
    inline_query: Optional["InlineQuery"] = None
    chosen_inline_result: Optional["ChosenInlineResult"] = None
    callback_query: Optional["CallbackQuery"] = None
    shipping_query: Optional["ShippingQuery"] = None
    pre_checkout_query: Optional["PreCheckoutQuery"] = None
    poll: Optional["Poll"] = None
    poll_answer: Optional["PollAnswer"] = None
    my_chat_member: Optional["ChatMemberUpdated"] = None
    chat_member: Optional["ChatMemberUpdated"] = None
    chat_join_request: Optional["ChatJoinRequest"] = None

    model_config = {"populate_by_name": True, "extra": "allow"}
