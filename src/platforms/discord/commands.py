from __future__ import annotations

import logging
from typing import Any

import discord
from discord import app_commands

logger = logging.getLogger(__name__)


# =====================
# GAMES COMMANDS
# =====================
class GamesCommands(app_commands.Group):
    def __init__(self, bot: discord.Client, services: dict[str, Any]) -> None:
        super().__init__(name="games", description="Game commands")
        self.bot = bot
        self.services = services

    @app_commands.command(name="ping", description="Check if the bot is alive")
    async def ping(self, interaction: discord.Interaction) -> None:
        await interaction.response.send_message("🏓 Pong!", ephemeral=True)

    @app_commands.command(name="wordscramble_start", description="Start Word Scramble (creates your own panel)")
    async def wordscramble_start(self, interaction: discord.Interaction) -> None:
        word_scramble = self.services.get("word_scramble")
        if not word_scramble:
            await interaction.response.send_message("Word Scramble is not available.", ephemeral=True)
            return

        if not isinstance(interaction.channel, (discord.TextChannel, discord.Thread)):
            await interaction.response.send_message("Word Scramble can only be used in server text channels.", ephemeral=True)
            return

        await interaction.response.defer(ephemeral=True)
        started = await word_scramble.start_for_user(channel=interaction.channel, user=interaction.user)
        if not started:
            await interaction.followup.send("This channel is not enabled for Word Scramble.", ephemeral=True)
            return
        await interaction.followup.send("🔤 Word Scramble started! Check the channel for your panel.", ephemeral=True)

    @app_commands.command(name="wordscramble_restart", description="Restart your Word Scramble round (new root word)")
    async def wordscramble_restart(self, interaction: discord.Interaction) -> None:
        word_scramble = self.services.get("word_scramble")
        if not word_scramble:
            await interaction.response.send_message("Word Scramble is not available.", ephemeral=True)
            return

        if not isinstance(interaction.channel, (discord.TextChannel, discord.Thread)):
            await interaction.response.send_message("Word Scramble can only be used in server text channels.", ephemeral=True)
            return

        await interaction.response.defer(ephemeral=True)
        started = await word_scramble.restart_for_user(channel=interaction.channel, user=interaction.user)
        if not started:
            await interaction.followup.send("This channel is not enabled for Word Scramble.", ephemeral=True)
            return
        await interaction.followup.send("🔁 Word Scramble restarted! Score reset, new root word.", ephemeral=True)

    @app_commands.command(name="wordscramble_stop", description="Stop your current Word Scramble round")
    async def wordscramble_stop(self, interaction: discord.Interaction) -> None:
        word_scramble = self.services.get("word_scramble")
        if not word_scramble:
            await interaction.response.send_message("Word Scramble is not available.", ephemeral=True)
            return

        if not isinstance(interaction.channel, (discord.TextChannel, discord.Thread)):
            await interaction.response.send_message("Word Scramble can only be used in server text channels.", ephemeral=True)
            return

        stopped = await word_scramble.stop_for_user(channel=interaction.channel, user=interaction.user)
        if stopped:
            await interaction.response.send_message("🛑 Word Scramble stopped (your round was cleared).", ephemeral=True)
        else:
            await interaction.response.send_message("You don't have an active round here.", ephemeral=True)

    @app_commands.command(name="wordscramble_help", description="Show Word Scramble rules")
    async def wordscramble_help(self, interaction: discord.Interaction) -> None:
        embed = discord.Embed(
            title="🔤 Word Scramble — Help",
            description=(
                "Make words from the letters of your root word.\n\n"
                "**Rules**\n"
                "• Each letter can be used as often as it appears in the root word\n"
                "• No repeats\n"
                "• Made-up words don't count\n"
                "• +1 point per accepted word\n\n"
                "**Commands**\n"
                "`/games wordscramble_start` · `/games wordscramble_restart` · `/games wordscramble_stop`"
            ),
        )
        await interaction.response.send_message(embed=embed, ephemeral=True)


# =====================
# SETUP
# =====================
async def setup(bot: discord.Client) -> None:
    services: dict[str, Any] = getattr(bot, "services", {})

    existing = {c.name for c in bot.tree.get_commands()}

    if "games" not in existing:
        bot.tree.add_command(GamesCommands(bot, services))

    logger.info(
        "Discord commands registered: %s",
        " | ".join(c.name for c in bot.tree.get_commands()) or "(none)",
    )
