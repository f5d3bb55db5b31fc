from __future__ import annotations

import logging
from typing import Any

import discord

logger = logging.getLogger(__name__)


async def setup(bot: discord.Client) -> None:
    services: dict[str, Any] = getattr(bot, "services", {})

    @bot.event
    async def on_message(message: discord.Message) -> None:
        # Ignore bots (including ourselves)
        if message.author.bot:
            return

        # Ignore DMs
        if message.guild is None:
            return

        logger.debug(
            "on_message: channel=%s author=%s content=%r",
            getattr(message.channel, "name", "?"),
            message.author.id,
            message.content,
        )

        registry = services.get("game_registry")
        if registry:
            try:
                await registry.handle_discord_message(message)
            except Exception:
                logger.exception("Error in game_registry.handle_discord_message")

    @bot.event
    async def on_error(event_method: str, /, *args: Any, **kwargs: Any) -> None:
        logger.exception("Unhandled exception in Discord event: %s", event_method)

    logger.info("Discord events registered (on_message, on_error)")
