from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Callable

import discord

from src.domain.errors import GameNotActive, ValidationError
from src.domain.models import GameState
from src.games.word_scramble.session import WordScrambleSession
from src.services.dictionary import DEFAULT_LANGUAGE, SpellChecker
from src.services.wordlist import WordList
from src.utils.text import is_valid_word_shape, normalize_word

logger = logging.getLogger(__name__)

GAME_KEY = "word_scramble"

# How long a rejection notice stays in the channel.
ERROR_NOTICE_SECONDS = 8.0

# Keep the panel under Discord's embed description limit.
MAX_LISTED_WORDS = 50


@dataclass
class _PlayerSlot:
    session: WordScrambleSession
    status_message_id: int | None = None
    # Set by the session subscription; the panel is re-rendered while True.
    dirty: bool = True
    unsubscribe: Callable[[], None] | None = None

    def mark_dirty(self, state: GameState) -> None:
        self.dirty = True


def render_used_words(state: GameState, limit: int = MAX_LISTED_WORDS) -> str:
    if not state.used_words:
        return "_No words yet. Type one in this channel!_"
    lines = [f"`{len(w):>2}` {w}" for w in state.used_words[:limit]]
    hidden = len(state.used_words) - limit
    if hidden > 0:
        lines.append(f"…and {hidden} more")
    return "\n".join(lines)


class WordScrambleGame:
    """
    Word Scramble per player in a shared channel.

    Rules:
      - each player gets a root word picked from the start-word list
      - type words made only from the root word's letters
      - no repeats, and the word must be in the dictionary
      - +1 point per accepted word

    UX:
      - Each player has a single panel message (edited in place).
      - Rejected words get a short-lived notice; the panel is untouched.
      - The panel carries a Restart button (new root word, score reset).

    Sessions live in memory only; a restart of the bot clears them.
    """

    key = GAME_KEY

    # -------------------------
    # UI: Restart View
    # -------------------------

    class _RestartView(discord.ui.View):
        def __init__(self, *, game: "WordScrambleGame", owner_id: int) -> None:
            super().__init__(timeout=None)
            self._game = game
            self._owner_id = owner_id

        @discord.ui.button(
            label="Restart",
            style=discord.ButtonStyle.secondary,
            custom_id="word_scramble:restart:v1",
        )
        async def restart(  # type: ignore[override]
            self,
            interaction: discord.Interaction,
            button: discord.ui.Button,
        ) -> None:
            if interaction.user.id != self._owner_id:
                await interaction.response.send_message(
                    "This button is for the player who owns this panel.",
                    ephemeral=True,
                )
                return

            if not isinstance(interaction.channel, (discord.TextChannel, discord.Thread)):
                await interaction.response.send_message(
                    "This can only be used in a server text channel.",
                    ephemeral=True,
                )
                return

            await interaction.response.defer(ephemeral=True)
            await self._game.restart_for_user(channel=interaction.channel, user=interaction.user)
            await interaction.followup.send("🔁 New root word!", ephemeral=True)

    # -------------------------
    # Init
    # -------------------------

    def __init__(
        self,
        *,
        wordlist: WordList,
        checker: SpellChecker,
        language: str = DEFAULT_LANGUAGE,
        allowed_channel_ids: set[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._wordlist = wordlist
        self._checker = checker
        self._language = language
        self._allowed_channel_ids = allowed_channel_ids or set()
        self._rng = rng

        self._slots: dict[tuple[int, int], _PlayerSlot] = {}

        self._channel_locks: dict[int, asyncio.Lock] = {}
        self._edit_locks: dict[tuple[int, int], asyncio.Lock] = {}

    # -------------------------
    # Locks
    # -------------------------

    def _lock_for_channel(self, channel_id: int) -> asyncio.Lock:
        if channel_id not in self._channel_locks:
            self._channel_locks[channel_id] = asyncio.Lock()
        return self._channel_locks[channel_id]

    def _lock_for_player(self, channel_id: int, player_id: int) -> asyncio.Lock:
        k = (channel_id, player_id)
        if k not in self._edit_locks:
            self._edit_locks[k] = asyncio.Lock()
        return self._edit_locks[k]

    def _channel_enabled(self, channel_id: int) -> bool:
        return not self._allowed_channel_ids or channel_id in self._allowed_channel_ids

    # -------------------------
    # Sessions
    # -------------------------

    def get_state(self, *, channel_id: int, player_id: int) -> GameState:
        slot = self._slots.get((channel_id, player_id))
        if slot is None:
            raise GameNotActive(f"No Word Scramble round for player {player_id} in channel {channel_id}")
        return slot.session.state

    def _new_slot(self) -> _PlayerSlot:
        session = WordScrambleSession(
            word_list=self._wordlist,
            checker=self._checker,
            language=self._language,
            rng=self._rng,
        )
        slot = _PlayerSlot(session=session)
        slot.unsubscribe = session.subscribe(slot.mark_dirty)
        return slot

    # -------------------------
    # Panel rendering
    # -------------------------

    def _build_panel_embed(self, *, player_id: int, state: GameState) -> discord.Embed:
        desc = (
            f"**Score:** {state.score}\n\n"
            f"{render_used_words(state)}\n\n"
            "Type words made from the letters above in this channel."
        )
        embed = discord.Embed(title=f"🔤 {state.root_word}", description=desc)
        embed.set_footer(text=f"Player: {player_id}")
        return embed

    @staticmethod
    def _build_error_embed(err: ValidationError) -> discord.Embed:
        return discord.Embed(title=f"❌ {err.title}", description=err.message)

    async def _create_panel(
        self,
        *,
        channel: discord.abc.Messageable,
        player_id: int,
        slot: _PlayerSlot,
    ) -> None:
        embed = self._build_panel_embed(player_id=player_id, state=slot.session.state)
        view = self._RestartView(game=self, owner_id=player_id)
        msg = await channel.send(content=f"<@{player_id}>", embed=embed, view=view)
        slot.status_message_id = msg.id

    async def _edit_panel_or_recreate(
        self,
        *,
        channel: discord.abc.Messageable,
        channel_id: int,
        player_id: int,
        slot: _PlayerSlot,
    ) -> None:
        """
        Edits the existing panel if possible; if not found / can't edit, recreates it immediately.
        """
        lock = self._lock_for_player(channel_id, player_id)
        async with lock:
            slot.dirty = False
            if not slot.status_message_id or not hasattr(channel, "fetch_message"):
                await self._create_panel(channel=channel, player_id=player_id, slot=slot)
                return

            try:
                msg = await channel.fetch_message(int(slot.status_message_id))  # type: ignore[attr-defined]
                embed = self._build_panel_embed(player_id=player_id, state=slot.session.state)
                view = self._RestartView(game=self, owner_id=player_id)
                await msg.edit(content=f"<@{player_id}>", embed=embed, view=view)
            except (discord.NotFound, discord.Forbidden, discord.HTTPException):
                # Message is gone or cannot be edited -> recreate.
                slot.status_message_id = None
                await self._create_panel(channel=channel, player_id=player_id, slot=slot)

    # -------------------------
    # Public API (commands.py)
    # -------------------------

    async def start_for_user(self, *, channel: discord.abc.Messageable, user: discord.abc.User) -> bool:
        """
        Start a round for ``user`` (restarting any round they already have).
        Returns False if the channel isn't enabled for the game.
        """
        if not hasattr(channel, "id"):
            return False
        channel_id = int(getattr(channel, "id"))
        if not self._channel_enabled(channel_id):
            return False

        async with self._lock_for_channel(channel_id):
            k = (channel_id, user.id)
            slot = self._slots.get(k)
            if slot is None:
                slot = self._new_slot()
                self._slots[k] = slot
            else:
                slot.session.restart()

            logger.info(
                "Word Scramble started: channel=%s player=%s root=%s",
                channel_id,
                user.id,
                slot.session.state.root_word,
            )
            if slot.dirty:
                await self._edit_panel_or_recreate(channel=channel, channel_id=channel_id, player_id=user.id, slot=slot)
        return True

    async def restart_for_user(self, *, channel: discord.abc.Messageable, user: discord.abc.User) -> bool:
        return await self.start_for_user(channel=channel, user=user)

    async def stop_for_user(self, *, channel: discord.abc.Messageable, user: discord.abc.User) -> bool:
        if not hasattr(channel, "id"):
            return False
        channel_id = int(getattr(channel, "id"))
        async with self._lock_for_channel(channel_id):
            slot = self._slots.pop((channel_id, user.id), None)
            self._edit_locks.pop((channel_id, user.id), None)
            if slot is not None and slot.unsubscribe:
                slot.unsubscribe()
        return slot is not None

    # -------------------------
    # Message handling (submissions)
    # -------------------------

    async def handle_discord_message(self, message: discord.Message) -> bool:
        if not isinstance(message.channel, (discord.TextChannel, discord.Thread)):
            return False

        channel_id = message.channel.id
        if not self._channel_enabled(channel_id):
            return False

        guess = normalize_word(message.content)
        # Chatter (sentences, links, emoji) isn't a submission. The shape check is
        # ASCII-only, matching the English dictionary: "café" is chatter, not a guess.
        if guess and not is_valid_word_shape(guess):
            return False

        player_id = message.author.id

        async with self._lock_for_channel(channel_id):
            slot = self._slots.get((channel_id, player_id))
            # Only consume messages for users with active rounds
            if slot is None:
                return False

            try:
                slot.session.submit(message.content)
            except ValidationError as err:
                logger.debug("Rejected %r (%s) for player %s", guess, err.kind, player_id)
                await message.reply(embed=self._build_error_embed(err), delete_after=ERROR_NOTICE_SECONDS)
                return True

            # Blank input leaves the session untouched, so nothing to redraw.
            if not slot.dirty:
                return True

            await self._edit_panel_or_recreate(
                channel=message.channel,
                channel_id=channel_id,
                player_id=player_id,
                slot=slot,
            )

            # Clean up guess message to reduce noise
            try:
                await message.delete()
            except (discord.Forbidden, discord.HTTPException):
                pass

            return True
