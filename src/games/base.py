from __future__ import annotations

from typing import Any, Protocol


class DiscordMessageLike(Protocol):
    content: str
    author: Any
    channel: Any


class Game(Protocol):
    key: str

    async def handle_discord_message(self, message: DiscordMessageLike) -> bool:
        """
        Return True if this game consumed the message (handled it),
        False if ignored.
        """
        ...
