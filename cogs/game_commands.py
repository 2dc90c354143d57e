"""
Game Commands Cog for Word Scramble Bot.
Handles all slash commands related to round management.
"""
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from config import SETTINGS, LOGGER_NAME_GAME
from models.game import Round
from services.game_manager import GameManager
from services.dictionary import DictionaryOracle
from services.word_validator import normalize
from views.game_ui import GameEmbed
from views.round_controls import RoundControlsView

logger = logging.getLogger(LOGGER_NAME_GAME)


class GameCommands(commands.Cog):
    """Cog containing all game-related slash commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @property
    def game_manager(self) -> GameManager:
        return self.bot.game_manager

    @property
    def oracle(self) -> DictionaryOracle:
        return self.bot.oracle

    scramble = app_commands.Group(
        name="scramble",
        description="Word Scramble game commands"
    )

    def _controls(self, channel_id: int, round_: Round) -> RoundControlsView:
        """
        Build the Restart / End buttons bound to one round of a channel.
        Buttons on an announcement whose round was replaced or ended do nothing.
        """
        current = round_

        async def on_restart() -> Optional[discord.Embed]:
            nonlocal current
            if self.game_manager.get_round(channel_id) is not current:
                return None
            current = self.game_manager.start_round(channel_id)
            return GameEmbed.round_started(current, restarted=True)

        async def on_end() -> Optional[discord.Embed]:
            if self.game_manager.get_round(channel_id) is not current:
                return None
            ended = self.game_manager.end_round(channel_id)
            return GameEmbed.round_ended(ended)

        return RoundControlsView(on_restart=on_restart, on_end=on_end)

    async def _send_new_round(self, interaction: discord.Interaction, restarted: bool):
        round_ = self.game_manager.start_round(interaction.channel_id)
        await interaction.response.send_message(
            embed=GameEmbed.round_started(round_, restarted=restarted),
            view=self._controls(interaction.channel_id, round_)
        )

    @scramble.command(name="start", description="Start a Word Scramble round in this channel")
    async def start_round(self, interaction: discord.Interaction):
        """Start a round; an existing round in the channel is replaced."""
        restarted = self.game_manager.has_active_round(interaction.channel_id)
        await self._send_new_round(interaction, restarted=restarted)

    @scramble.command(name="restart", description="Pick a new root word and clear found words")
    async def restart_round(self, interaction: discord.Interaction):
        """Discard the current round and start a new one."""
        await self._send_new_round(interaction, restarted=True)

    @scramble.command(name="status", description="Show the current root word and found words")
    async def round_status(self, interaction: discord.Interaction):
        """View current round status."""
        round_ = self.game_manager.get_round(interaction.channel_id)
        if not round_:
            await interaction.response.send_message(embed=GameEmbed.no_round(), ephemeral=True)
            return

        await interaction.response.send_message(embed=GameEmbed.round_status(round_))

    @scramble.command(name="stop", description="End the round in this channel")
    async def stop_round(self, interaction: discord.Interaction):
        """End the channel's round."""
        round_ = self.game_manager.end_round(interaction.channel_id)
        if not round_:
            await interaction.response.send_message(embed=GameEmbed.no_round(), ephemeral=True)
            return

        await interaction.response.send_message(embed=GameEmbed.round_ended(round_))

    @scramble.command(name="rules", description="Show the rules")
    async def rules(self, interaction: discord.Interaction):
        """Display game rules."""
        await interaction.response.send_message(embed=GameEmbed.rules())

    @scramble.command(name="check", description="Check whether a word is in the dictionary")
    @app_commands.describe(word="Word to check")
    async def check_word(self, interaction: discord.Interaction, word: str):
        """Check a word against the dictionary only."""
        await interaction.response.defer(ephemeral=True)

        word = normalize(word)
        recognized = bool(word) and await self.oracle.is_real_word(word, SETTINGS.dictionary_language)

        await interaction.followup.send(
            embed=GameEmbed.word_check(word, recognized),
            ephemeral=True
        )


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(GameCommands(bot))
