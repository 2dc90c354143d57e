"""
Game UI components for Word Scramble Bot.
Provides embeds for round state, accepted words and rejections.
"""
import discord

from config import SETTINGS
from models.game import Round, Rejected

# Discord caps embed field values at 1024 characters
FIELD_VALUE_LIMIT = 1024


def format_used_words(round_: Round) -> str:
    """Used words, most recent first, each prefixed with its length."""
    if not round_.used_words:
        return "*No words yet*"

    lines = []
    total = 0
    for word in round_.used_words:
        line = f"`{len(word):>2}` {word}"
        if total + len(line) + 1 > FIELD_VALUE_LIMIT - 8:
            lines.append("…")
            break
        lines.append(line)
        total += len(line) + 1
    return "\n".join(lines)


class GameEmbed:
    """Factory for creating game-related embeds."""

    @staticmethod
    def round_started(round_: Round, restarted: bool = False) -> discord.Embed:
        """Create embed for a new round announcement."""
        title = "🔄 New Root Word!" if restarted else "🔤 Word Scramble - Round Started!"
        embed = discord.Embed(
            title=title,
            description=(
                f"# {round_.root_word}\n\n"
                "Type words you can spell from these letters.\n"
                f"Words need at least **{SETTINGS.min_word_length}** letters "
                "and must be in the dictionary."
            ),
            color=discord.Color.green()
        )
        embed.set_footer(text="Press Restart for a different word")
        return embed

    @staticmethod
    def word_accepted(round_: Round, word: str, player_name: str) -> discord.Embed:
        """Create embed for accepted word, showing the round's words so far."""
        embed = discord.Embed(
            title=f"✅ {word}",
            description=f"**{player_name}** found **{word}** in **{round_.root_word}**",
            color=discord.Color.green()
        )
        embed.add_field(
            name=f"📝 Words found ({round_.word_count})",
            value=format_used_words(round_),
            inline=False
        )
        return embed

    @staticmethod
    def word_rejected(rejection: Rejected, word: str, player_name: str) -> discord.Embed:
        """Create embed for a rejected word (warning only)."""
        embed = discord.Embed(
            title=f"⚠️ {rejection.title}",
            description=(
                f"**{player_name}** entered: **{word}**\n\n"
                f"❌ {rejection.message}"
            ),
            color=discord.Color.orange()
        )
        return embed

    @staticmethod
    def round_status(round_: Round) -> discord.Embed:
        """Create embed with the current root word and found words."""
        embed = discord.Embed(
            title=f"📊 {round_.root_word}",
            color=discord.Color.blue()
        )
        embed.add_field(name="Words", value=str(round_.word_count), inline=True)
        embed.add_field(name="Letters", value=str(round_.letter_count), inline=True)
        embed.add_field(
            name="📝 Words found",
            value=format_used_words(round_),
            inline=False
        )
        return embed

    @staticmethod
    def round_ended(round_: Round) -> discord.Embed:
        """Create embed for an ended round."""
        embed = discord.Embed(
            title="🏁 Round over",
            description=(
                f"Root word: **{round_.root_word}**\n"
                f"📝 Words found: **{round_.word_count}**"
            ),
            color=discord.Color.dark_gray()
        )
        return embed

    @staticmethod
    def no_round() -> discord.Embed:
        """Create embed for a channel without a round."""
        return discord.Embed(
            title="❌ No round in this channel",
            description="Use `/scramble start` to begin!",
            color=discord.Color.dark_gray()
        )

    @staticmethod
    def word_check(word: str, recognized: bool) -> discord.Embed:
        """Create embed for a dictionary check."""
        if recognized:
            embed = discord.Embed(
                title=f"✅ Word check: {word}",
                description="This word is in the dictionary.",
                color=discord.Color.green()
            )
        else:
            embed = discord.Embed(
                title=f"❌ Word check: {word}",
                description="This word is not in the dictionary.",
                color=discord.Color.red()
            )
        return embed

    @staticmethod
    def rules() -> discord.Embed:
        """Create embed with the game rules."""
        embed = discord.Embed(
            title="📜 Word Scramble Rules",
            description="Make as many words as you can from the root word!",
            color=discord.Color.blue()
        )
        embed.add_field(
            name="⚠️ Word rules",
            value=(
                "• Use each letter of the root word at most as often as it appears\n"
                "• The word must be in the dictionary\n"
                f"• At least {SETTINGS.min_word_length} letters\n"
                "• **Not** the root word itself\n"
                "• **Not** a word already found this round"
            ),
            inline=False
        )
        embed.add_field(
            name="🎮 Commands",
            value=(
                "`/scramble start` - Start a round\n"
                "`/scramble restart` - New root word\n"
                "`/scramble status` - Show the round\n"
                "`/scramble stop` - End the round\n"
                "`/scramble check` - Check a word"
            ),
            inline=False
        )
        return embed
