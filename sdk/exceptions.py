"""Exception hierarchy for the Telegram Bot API SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from sdk.models import ApiResponse


class TelegramError(Exception):
    """Base class for every error raised by the SDK."""


class BotApiError(TelegramError):
    """Uniform error for a Bot API call that did not succeed.

    Attributes:
        method: Name of the failed Bot API method (e.g. ``deleteMessage``).
        payload: Parameters the method was called with.
        error_code: Telegram error code (mirrors the HTTP status).
        description: Human-readable error description from Telegram.
        parameters: Optional ``ResponseParameters`` dict (``retry_after``,
            ``migrate_to_chat_id``).
        response_body: Raw failure envelope as a dict.
    """

    def __init__(
        self,
        method: str,
        payload: Optional[Dict[str, Any]] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialise with the failed call and its raw failure envelope."""
        self.method = method
        self.payload = dict(payload or {})
        self.response_body = response_body or {}
        self.error_code: Optional[int] = self.response_body.get("error_code")
        self.description: str = self.response_body.get("description", "Unknown error")
        self.parameters: Dict[str, Any] = self.response_body.get("parameters") or {}
        super().__init__(f"Call to '{method}' failed! ({self.error_code}: {self.description})")

    @classmethod
    def from_response(
        cls,
        method: str,
        payload: Optional[Dict[str, Any]],
        response: "ApiResponse",
    ) -> "BotApiError":
        """Build the error from a failed :class:`~sdk.models.ApiResponse`."""
        return cls(method, payload, response.model_dump(exclude_none=True))


class HttpError(TelegramError):
    """Transport-level failure: network error, non-JSON body or aborted request.

    Attributes:
        method: Name of the Bot API method that was being called.
        error: The underlying exception, when there is one.
    """

    def __init__(self, method: str, message: str, error: Optional[BaseException] = None) -> None:
        self.method = method
        self.error = error
        super().__init__(f"Network request for '{method}' failed! ({message})")
