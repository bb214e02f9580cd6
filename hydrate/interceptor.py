"""Call-result classifier and the hydrating transformer.

Results of outbound calls are plain decoded JSON.  :data:`RESULT_SHAPES`
recognises the entities worth augmenting by shape; the first matching shape
converts the mapping into its model and installs the handle.  Anything else
is returned unchanged.

Shapes, in order:

1. ``message`` -- has ``message_id`` and ``chat``.
2. ``inline_message`` -- has ``inline_message_id``.
3. ``chat_member`` -- has ``status`` and ``user``, and the call was made
   with a ``chat_id``; the member's user is bound to that chat.
4. ``chat`` -- has ``id`` and a ``type`` naming a chat type.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from core.logger import HydrateLogger
from hydrate.chat import install_chat_methods, install_user_methods
from hydrate.message import install_inline_message_methods, install_message_methods
from sdk.client import AbortSignal, ApiCallFn, Payload, Transformer
from sdk.models import ApiResponse, Chat, ChatMember, InlineMessage, Message

logger = HydrateLogger.get_logger()

CHAT_TYPES: frozenset[str] = frozenset({"private", "group", "supergroup", "channel"})


# ── Shape table ──────────────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True, slots=True)
class ResultShape:
    """A recognisable result shape and how to hydrate it."""
    name: str
    matches: Callable[[Mapping[str, Any], Payload], bool]
    hydrate: Callable[[ApiCallFn, Mapping[str, Any], Payload], Any]


def _hydrate_message(call: ApiCallFn, result: Mapping[str, Any], payload: Payload) -> Message:
    message = Message.model_validate(result)
    install_message_methods(call, message)
    return message


def _hydrate_inline_message(call: ApiCallFn, result: Mapping[str, Any], payload: Payload) -> InlineMessage:
    message = InlineMessage.model_validate(result)
    install_inline_message_methods(call, message)
    return message


def _hydrate_chat_member(call: ApiCallFn, result: Mapping[str, Any], payload: Payload) -> ChatMember:
    member = ChatMember.model_validate(result)
    install_user_methods(call, member.user, payload["chat_id"])
    return member


def _hydrate_chat(call: ApiCallFn, result: Mapping[str, Any], payload: Payload) -> Chat:
    chat = Chat.model_validate(result)
    install_chat_methods(call, chat)
    return chat


RESULT_SHAPES: tuple[ResultShape, ...] = (
    ResultShape(
        "message",
        lambda result, payload: "message_id" in result and "chat" in result,
        _hydrate_message,
    ),
    ResultShape(
        "inline_message",
        lambda result, payload: "inline_message_id" in result,
        _hydrate_inline_message,
    ),
    ResultShape(
        "chat_member",
        lambda result, payload: "status" in result and "user" in result and payload.get("chat_id") is not None,
        _hydrate_chat_member,
    ),
    ResultShape(
        "chat",
        lambda result, payload: "id" in result and isinstance(result.get("type"), str) and result["type"] in CHAT_TYPES,
        _hydrate_chat,
    ),
)


# ── Classification ───────────────────────────────────────────────────────────


def _match(result: Any, payload: Payload) -> Optional[ResultShape]:
    if not isinstance(result, Mapping):
        return None
    for shape in RESULT_SHAPES:
        if shape.matches(result, payload):
            return shape
    return None


def classify_result(result: Any, payload: Optional[Payload] = None) -> Optional[str]:
    """Return the name of the first shape *result* matches, or ``None``."""
    shape = _match(result, payload or {})
    return shape.name if shape else None


def hydrate_result(call: ApiCallFn, result: Any, payload: Optional[Payload] = None) -> Any:
    """Return *result* with every recognised entity converted and hydrated.

    Lists are hydrated element by element.  A mapping that looks like an
    entity but does not validate as one is returned unchanged.
    """
    payload = payload or {}
    if isinstance(result, list):
        return [hydrate_result(call, item, payload) for item in result]

    shape = _match(result, payload)
    if shape is None:
        return result
    try:
        hydrated = shape.hydrate(call, result, payload)
    except ValidationError as exc:
        logger.debug("Result matched a shape but failed validation", extra={"shape": shape.name, "error": str(exc)})
        return result
    logger.debug("Hydrated call result", extra={"shape": shape.name})
    return hydrated


# ── Transformer ──────────────────────────────────────────────────────────────


def hydrate_api() -> Transformer:
    """Return a transformer that hydrates the results of successful calls.

    Handles on hydrated results call back through the transformer's
    predecessor.  Failed responses are passed through untouched.
    """

    async def hydrate_transformer(
        prev: ApiCallFn,
        method: str,
        payload: Payload,
        signal: Optional[AbortSignal] = None,
    ) -> ApiResponse:
        response = await prev(method, payload, signal)
        if not response.ok:
            return response
        return response.model_copy(update={"result": hydrate_result(prev, response.result, payload)})

    return hydrate_transformer
