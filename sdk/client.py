"""BotApiClient -- transport layer for the Telegram Bot API.

The client exposes one call primitive, :meth:`BotApiClient.call`, which takes
a method name, a parameter dict and an optional abort signal and returns the
decoded :class:`~sdk.models.ApiResponse` envelope (success or failure).
HTTP calls use the ``requests`` library; blocking I/O is offloaded via
:func:`asyncio.to_thread` so the event loop is never blocked.

Transformers wrap the call primitive.  Each one receives the previous call
function plus the method, payload and signal, and returns the (possibly
modified) response::

    async def log_calls(prev, method, payload, signal=None):
        response = await prev(method, payload, signal)
        ...
        return response

    client.use(log_calls)
    await client.raw.send_message({"chat_id": 42, "text": "hi"})

:class:`RawApi` is the caller-facing surface: attribute names are converted
to Bot API method names (``send_message`` → ``sendMessage``), results are
unwrapped and failures are raised as :class:`~sdk.exceptions.BotApiError`.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import requests
from pydantic import BaseModel, ValidationError

from sdk.exceptions import BotApiError, HttpError
from sdk.models import ApiResponse

# An ``asyncio.Event`` used as abort signal: setting it cancels the request.
AbortSignal = asyncio.Event
Payload = Dict[str, Any]
ApiCallFn = Callable[[str, Payload, Optional[AbortSignal]], Awaitable[ApiResponse]]
Transformer = Callable[[ApiCallFn, str, Payload, Optional[AbortSignal]], Awaitable[ApiResponse]]

_sdk_logger = logging.getLogger("hydrate.sdk")


# ── Wire helpers ─────────────────────────────────────────────────────────────


def method_name(attribute: str) -> str:
    """Convert a Python attribute name to a Bot API method name.

    ``"delete_message"`` → ``"deleteMessage"``.  Names that are already in
    camelCase are returned unchanged.
    """
    head, *rest = attribute.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_wire(value: Any) -> Any:
    """Prepare a payload value for JSON encoding.

    Pydantic models are dumped by alias, and ``None`` values are dropped
    from mappings so optional parameters are simply omitted.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


def unwrap(method: str, payload: Payload, response: ApiResponse) -> Any:
    """Return the result of a successful *response* or raise :class:`BotApiError`."""
    if response.ok:
        return response.result
    raise BotApiError.from_response(method, payload, response)


# ── Client ───────────────────────────────────────────────────────────────────


class BotApiClient:
    """Client-side transport for the Telegram Bot API.

    Owns the HTTP settings and the chain of installed transformers.  The
    client performs exactly one HTTP request per call: it does not retry,
    cache or rate-limit.
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, base_url: str, timeout: int = _DEFAULT_TIMEOUT, bot_token: str | None = None) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Default request timeout in seconds.
            bot_token: Raw bot token, used for file-download URLs.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._bot_token = bot_token
        self._transformers: List[Transformer] = []

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(self, method: str, payload: Payload) -> Dict[str, Any]:
        """Send a POST request and return the parsed JSON body.

        Telegram answers failures with a JSON envelope as well, so non-2xx
        responses are returned like successful ones.

        Raises:
            HttpError: On transport-level failures or a non-JSON body.
        """
        url = f"{self._base_url}/{method}"
        timeout = self._timeout
        if method == "getUpdates":
            # Long polling holds the connection open for ``timeout`` seconds.
            timeout += int(payload.get("timeout") or 0)
        try:
            response = requests.post(url, json=to_wire(payload), timeout=timeout)
        except requests.RequestException as exc:
            raise HttpError(method, str(exc), exc) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise HttpError(method, f"HTTP {response.status_code} with a non-JSON body", exc) from exc

    async def _post_abortable(self, method: str, payload: Payload, signal: AbortSignal) -> Dict[str, Any]:
        """Run :meth:`_post` in a thread, giving up as soon as *signal* is set."""
        if signal.is_set():
            raise HttpError(method, "Request was aborted before it was sent")
        request = asyncio.ensure_future(asyncio.to_thread(self._post, method, payload))
        aborted = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait({request, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            aborted.cancel()
        if request not in done:
            # The worker thread cannot be interrupted; its body is discarded.
            request.cancel()
            raise HttpError(method, "Request was aborted")
        return request.result()

    # ------------------------------------------------------------------
    #  Call primitive
    # ------------------------------------------------------------------

    async def call(self, method: str, payload: Optional[Payload] = None, signal: Optional[AbortSignal] = None) -> ApiResponse:
        """Perform one Bot API call and return its response envelope.

        Raises:
            HttpError: If the request fails, is aborted or the body is not
                a Bot API envelope.
        """
        payload = dict(payload or {})
        if signal is None:
            body = await asyncio.to_thread(self._post, method, payload)
        else:
            body = await self._post_abortable(method, payload, signal)
        try:
            response = ApiResponse.model_validate(body)
        except ValidationError as exc:
            raise HttpError(method, "Malformed response envelope", exc) from exc
        if response.ok:
            _sdk_logger.debug("Bot API call succeeded", extra={"api_method": method})
        else:
            _sdk_logger.warning(
                "Bot API call failed",
                extra={"api_method": method, "error_code": response.error_code, "error": response.description},
            )
        return response

    # ------------------------------------------------------------------
    #  Transformers
    # ------------------------------------------------------------------

    def use(self, *transformers: Transformer) -> "BotApiClient":
        """Install *transformers*; the last installed one runs outermost."""
        self._transformers.extend(transformers)
        return self

    def installed_transformers(self) -> List[Transformer]:
        """Return a copy of the installed transformers in installation order."""
        return list(self._transformers)

    async def call_api(self, method: str, payload: Optional[Payload] = None, signal: Optional[AbortSignal] = None) -> ApiResponse:
        """Call *method* through every installed transformer."""
        call: ApiCallFn = self.call
        for transformer in self._transformers:
            call = functools.partial(transformer, call)
        return await call(method, dict(payload or {}), signal)

    @property
    def raw(self) -> "RawApi":
        """Unwrapping, attribute-style access to all Bot API methods."""
        return RawApi(self.call_api)


class RawApi:
    """Attribute-style access to the Bot API over a call function.

    ``await raw.delete_message({"chat_id": 1, "message_id": 2})`` calls
    ``deleteMessage`` and returns its result, raising :class:`BotApiError`
    when Telegram reports a failure.
    """

    def __init__(self, call: ApiCallFn) -> None:
        self._call = call

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        method = method_name(name)

        async def invoke(payload: Optional[Payload] = None, signal: Optional[AbortSignal] = None) -> Any:
            return await self.call(method, payload, signal)

        invoke.__name__ = name
        return invoke

    async def call(self, method: str, payload: Optional[Payload] = None, signal: Optional[AbortSignal] = None) -> Any:
        """Call *method* by its Bot API name and unwrap the response."""
        payload = dict(payload or {})
        response = await self._call(method, payload, signal)
        return unwrap(method, payload, response)


# ── Module-level default client ──────────────────────────────────────────────
#
# A lazily-initialised module-level :class:`BotApiClient` instance carries
# the ``BASE_URL`` / ``BOT_TOKEN`` / ``API_TIMEOUT`` values from :mod:`config`.
# ─────────────────────────────────────────────────────────────────────────────

_default_client: BotApiClient | None = None


def default_client() -> BotApiClient:
    """Return (and lazily create) the module-level client singleton."""
    global _default_client
    if _default_client is None:
        from config import API_TIMEOUT, BASE_URL, BOT_TOKEN  # deferred to avoid circular imports
        _default_client = BotApiClient(BASE_URL, timeout=API_TIMEOUT, bot_token=BOT_TOKEN)
    return _default_client
