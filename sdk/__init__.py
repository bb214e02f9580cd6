"""Telegram Bot API SDK: Pydantic models, transport client, and exceptions.

:class:`BotApiClient` performs Bot API calls and runs them through a chain of
transformers; :class:`RawApi` is the unwrapping, attribute-style surface over
any call function.

Usage::

    from sdk import BotApiClient, BotApiError
    from sdk.models import Message, Update

    client = BotApiClient("https://api.telegram.org/bot<token>")
    me = await client.raw.get_me()
"""

from sdk.client import BotApiClient, RawApi, default_client
from sdk.exceptions import BotApiError, HttpError, TelegramError

__all__ = [
    "BotApiClient",
    "RawApi",
    "default_client",
    "BotApiError",
    "HttpError",
    "TelegramError",
]
