"""Capability fragments shared by the entity handles.

:class:`BoundActions` is the base of every handle installed on an entity.  It
captures the identifying fields of the entity at construction time and
builds each call's payload from them.

:class:`InlineEditable` is the edit fragment shared by full messages, inline
message stubs and inline callback queries.  It only needs the handle to
provide an *edit target*: either ``{"inline_message_id": ...}`` or
``{"chat_id": ..., "message_id": ...}``.
"""

from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional

from hydrate.adapter import bind_method
from sdk.client import AbortSignal, ApiCallFn


class BoundActions:
    """Base class for a handle of bound operations.

    Args:
        call: The call mechanism the operations are issued through.
        **identifiers: Identifying fields of the entity.  They are frozen
            for the lifetime of the handle and exposed as :attr:`bound`.
    """

    def __init__(self, call: ApiCallFn, **identifiers: Any) -> None:
        self._call = call
        self._identifiers: Mapping[str, Any] = MappingProxyType(dict(identifiers))

    @property
    def bound(self) -> Mapping[str, Any]:
        """Read-only view of the captured identifiers."""
        return self._identifiers

    @classmethod
    def operations(cls) -> FrozenSet[str]:
        """Names of the bound operations this handle offers."""
        return frozenset(
            name
            for name, member in inspect.getmembers(cls, inspect.iscoroutinefunction)
            if not name.startswith("_")
        )

    async def _invoke(
        self,
        method: str,
        bound: Mapping[str, Any],
        other: Mapping[str, Any],
        signal: Optional[AbortSignal] = None,
        /,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        **params: Any,
    ) -> Any:
        """Call *method* with the merged payload.

        Precedence, lowest first: *defaults* (bound values the caller may
        override), *other*, then *bound* and *params* which cannot be
        overridden.  ``None`` identifiers are left out of the payload.
        """
        clash = sorted(set(other) & set(bound))
        if clash:
            raise TypeError(
                f"{method}() got parameter(s) already bound by the entity: {', '.join(clash)}"
            )
        payload = {key: value for key, value in (defaults or {}).items() if value is not None}
        payload.update(other)
        payload.update((key, value) for key, value in bound.items() if value is not None)
        payload.update(params)
        return await bind_method(self._call, method)(payload, signal)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._identifiers)!r})"


class InlineEditable(BoundActions):
    """Edit operations available on any message the bot can address.

    Subclasses set ``_edit_target`` to the identifiers that address the
    message in the edit methods.
    """

    _edit_target: Mapping[str, Any]

    async def edit_text(self, text: str, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``editMessageText``.

        Returns the edited Message, or ``True`` for inline messages.
        """
        return await self._invoke("editMessageText", self._edit_target, other, signal, text=text)

    async def edit_caption(self, caption: Optional[str] = None, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``editMessageCaption``.  Omitting *caption* removes it."""
        params = {} if caption is None else {"caption": caption}
        return await self._invoke("editMessageCaption", self._edit_target, other, signal, **params)

    async def edit_media(self, media: Any, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``editMessageMedia``.

        *media* is an ``InputMedia`` object.  Inline messages cannot receive
        new uploads; use a ``file_id`` or a URL.
        """
        return await self._invoke("editMessageMedia", self._edit_target, other, signal, media=media)

    async def edit_reply_markup(self, reply_markup: Any = None, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``editMessageReplyMarkup``.  Omitting *reply_markup* removes it."""
        params = {} if reply_markup is None else {"reply_markup": reply_markup}
        return await self._invoke("editMessageReplyMarkup", self._edit_target, other, signal, **params)

    async def edit_live_location(
        self,
        latitude: float,
        longitude: float,
        *,
        signal: Optional[AbortSignal] = None,
        **other: Any,
    ) -> Any:
        """Message-aware alias for ``editMessageLiveLocation``."""
        return await self._invoke(
            "editMessageLiveLocation", self._edit_target, other, signal,
            latitude=latitude, longitude=longitude,
        )

    async def stop_live_location(self, *, signal: Optional[AbortSignal] = None, **other: Any) -> Any:
        """Message-aware alias for ``stopMessageLiveLocation``."""
        return await self._invoke("stopMessageLiveLocation", self._edit_target, other, signal)


INLINE_EDITABLE_OPERATIONS: FrozenSet[str] = InlineEditable.operations()
