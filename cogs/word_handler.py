"""
Word Handler Cog for Word Scramble Bot.
Handles message events for word submissions during active rounds.
"""
import logging
import re

import discord
from discord.ext import commands

from config import SETTINGS, LOGGER_NAME_GAME
from models.game import Accepted, Round
from services.word_validator import validate, is_original, WORD_USED
from views.game_ui import GameEmbed

logger = logging.getLogger(LOGGER_NAME_GAME)

# A submission is a single alphabetic token; anything else is chatter
SUBMISSION_PATTERN = re.compile(r"^[a-z]+$", re.IGNORECASE)


def is_submission(content: str) -> bool:
    """Check if a message looks like a word submission."""
    return bool(SUBMISSION_PATTERN.match(content.strip()))


class WordHandler(commands.Cog):
    """Cog for handling word submissions in active rounds."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Handle incoming messages for word submissions."""
        # Ignore bots
        if message.author.bot:
            return

        # Check if there's an active round in this channel
        round_ = self.bot.game_manager.get_round(message.channel.id)
        if not round_:
            return

        if not is_submission(message.content):
            return

        await self._process_word(message, round_)

    async def _process_word(self, message: discord.Message, round_: Round):
        """Process a word submission."""
        outcome = await validate(
            message.content,
            round_,
            self.bot.oracle,
            language=SETTINGS.dictionary_language,
            min_length=SETTINGS.min_word_length,
        )
        if outcome is None:
            return

        channel = message.channel
        player_name = message.author.display_name

        # The round may have been restarted while the dictionary was consulted
        if self.bot.game_manager.get_round(channel.id) is not round_:
            logger.debug(f"Discarding submission for a replaced round: channel={channel.id}")
            return

        # Another submission of the same word may have been accepted during the lookup
        if isinstance(outcome, Accepted) and not is_original(outcome.word, round_):
            outcome = WORD_USED

        if not isinstance(outcome, Accepted):
            logger.debug(
                f"Word rejected: '{message.content.strip()}' reason={outcome.reason.value}, "
                f"channel={channel.id}"
            )
            embed = GameEmbed.word_rejected(outcome, message.content.strip().lower(), player_name)
            await channel.send(embed=embed)
            return

        self.bot.game_manager.record_word(channel.id, outcome.word)

        try:
            await message.add_reaction("✅")
        except discord.HTTPException:
            logger.debug(f"Could not react to message {message.id}")

        await channel.send(embed=GameEmbed.word_accepted(round_, outcome.word, player_name))


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(WordHandler(bot))
