"""Example bot -- reacts to messages and answers button presses.

Run with ``python main.py`` after setting ``BOT_TOKEN`` (or a ``.env`` file).
"""

import asyncio

from bot.context import Context
from bot.dispatcher import run
from config import BOT_TOKEN
from core.logger import HydrateLogger
from hydrate import hydrate
from sdk.client import default_client
from sdk.exceptions import TelegramError

logger = HydrateLogger.get_logger()


async def handle(ctx: Context) -> None:
    """React 👍 to text messages, echo button data back as a notification."""
    if ctx.callback_query is not None:
        await ctx.callback_query.actions.answer(text=f"You pressed: {ctx.callback_query.data or '?'}")
        return

    if ctx.message is None or ctx.message.text is None:
        return

    try:
        await ctx.message.actions.react("👍")
    except TelegramError as exc:
        # Reactions may be disabled in the chat.
        logger.warning("Could not react to message", extra={"update_id": ctx.update.update_id, "error": str(exc)})

    if ctx.message.text == "/chat":
        chat = await ctx.api.raw.get_chat({"chat_id": ctx.message.chat.id})
        count = await chat.actions.get_member_count()
        await ctx.api.raw.send_message({"chat_id": chat.id, "text": f"This chat has {count} members."})


def main() -> None:
    if not BOT_TOKEN:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")
    asyncio.run(run(default_client(), handle, [hydrate()]))


if __name__ == "__main__":
    main()
