"""Bound-call adapter.

Turns the raw call mechanism (a function returning the response envelope)
into single-method invokers that return the result or raise
:class:`~sdk.exceptions.BotApiError`, so that bound operations never branch
on the outcome shape themselves.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from sdk.client import AbortSignal, ApiCallFn, Payload, method_name, unwrap

Invoker = Callable[..., Awaitable[Any]]

__all__ = ["Invoker", "bind_method", "method_name"]


def bind_method(call: ApiCallFn, method: str) -> Invoker:
    """Return ``invoke(payload, signal=None)`` calling *method* through *call*.

    *method* may be given as a Bot API name (``deleteMessage``) or as a
    Python attribute name (``delete_message``).
    """
    method = method_name(method)

    async def invoke(payload: Optional[Payload] = None, signal: Optional[AbortSignal] = None) -> Any:
        payload = dict(payload or {})
        response = await call(method, payload, signal)
        return unwrap(method, payload, response)

    invoke.__qualname__ = f"bind_method.<{method}>"
    return invoke
