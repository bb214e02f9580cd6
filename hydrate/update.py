"""Update dispatcher -- finds the entity an inbound update carries and hydrates it.

An :class:`~sdk.models.Update` populates at most one of its variant fields.
:data:`UPDATE_VARIANTS` lists the hydratable variants in dispatch order
together with their augmenter; the first populated one wins.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from core.logger import HydrateLogger
from hydrate.message import install_message_methods
from hydrate.queries import (
    install_callback_query_methods,
    install_chat_join_request_methods,
    install_chosen_inline_result_methods,
    install_inline_query_methods,
    install_pre_checkout_query_methods,
    install_shipping_query_methods,
)
from sdk.client import ApiCallFn
from sdk.models import Update

logger = HydrateLogger.get_logger()

Augmenter = Callable[[ApiCallFn, Any], None]

UPDATE_VARIANTS: Tuple[Tuple[str, Augmenter], ...] = (
    ("message", install_message_methods),
    ("channel_post", install_message_methods),
    ("edited_message", install_message_methods),
    ("edited_channel_post", install_message_methods),
    ("inline_query", install_inline_query_methods),
    ("callback_query", install_callback_query_methods),
    ("shipping_query", install_shipping_query_methods),
    ("pre_checkout_query", install_pre_checkout_query_methods),
    ("chosen_inline_result", install_chosen_inline_result_methods),
    ("chat_join_request", install_chat_join_request_methods),
)


def _populated_variants(update: Update) -> List[Tuple[str, Augmenter]]:
    """Populated variants with their augmenters, in dispatch order."""
    return [(name, augment) for name, augment in UPDATE_VARIANTS if getattr(update, name, None) is not None]


def update_kind(update: Update) -> Optional[str]:
    """Return the name of the first populated hydratable variant, or ``None``."""
    populated = _populated_variants(update)
    return populated[0][0] if populated else None


def hydrate_update(call: ApiCallFn, update: Update) -> None:
    """Install bound operations on the entity carried by *update*, in place.

    Updates without a hydratable variant (polls, member updates, ...) are
    left untouched.
    """
    populated = _populated_variants(update)
    if not populated:
        logger.debug("No hydratable variant in update", extra={"update_id": update.update_id})
        return

    variant, augment = populated[0]
    if len(populated) > 1:
        logger.warning(
            "Update populates more than one variant; hydrating the first only",
            extra={"update_id": update.update_id, "variant": variant, "ignored": [name for name, _ in populated[1:]]},
        )

    augment(call, getattr(update, variant))
    logger.debug("Hydrated update", extra={"update_id": update.update_id, "variant": variant})
