"""
Word Scramble Discord Bot - Main Entry Point

A Discord bot for playing Word Scramble: spell as many words as you can from
a random root word.
Features:
- One round per channel, started with /scramble start
- Restart button for a fresh root word
- Dictionary checks via the Free Dictionary API (cached) or a local word file
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import discord
from discord.ext import commands

from config import (
    SETTINGS,
    DictionaryBackend,
    LOGGER_NAME_MAIN,
    LOGGER_NAME_GAME,
    LOGGER_NAME_DICTIONARY,
    LOGGER_NAME_DB,
)
from services.dictionary import DictionaryOracle, FreeDictionaryOracle, WordSetOracle
from services.game_manager import GameManager
from services.word_list import load_word_list

# Setup logging
def setup_logging():
    """Configure logging for the bot."""
    log_level = logging.DEBUG if SETTINGS.dev_mode else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # File handler
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / "bot.log",
        encoding="utf-8",
        mode="a"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    # Setup loggers
    for logger_name in [LOGGER_NAME_MAIN, LOGGER_NAME_GAME, LOGGER_NAME_DICTIONARY, LOGGER_NAME_DB]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    # Discord.py logger
    discord_logger = logging.getLogger("discord")
    discord_logger.setLevel(logging.WARNING)
    discord_logger.addHandler(console_handler)

    return logging.getLogger(LOGGER_NAME_MAIN)


class WordScrambleBot(commands.Bot):
    """Main bot class for Word Scramble Discord Bot."""

    def __init__(self, game_manager: GameManager, oracle: DictionaryOracle):
        intents = discord.Intents.default()
        intents.message_content = True  # Required for reading messages
        intents.guilds = True

        super().__init__(
            command_prefix="!",  # Required by commands.Bot; only slash commands are registered
            intents=intents,
            help_command=None,  # Disable default help
            activity=discord.Activity(
                type=discord.ActivityType.playing,
                name="/scramble start"
            )
        )

        self.game_manager = game_manager
        self.oracle = oracle
        self.logger = logging.getLogger(LOGGER_NAME_MAIN)

    async def setup_hook(self):
        """Called when the bot is starting up."""
        self.logger.info("Setting up bot...")

        # The database only backs the dictionary cache
        if isinstance(self.oracle, FreeDictionaryOracle):
            from database import init_database
            await init_database()

        # Load cogs
        cogs = [
            "cogs.game_commands",
            "cogs.word_handler",
        ]

        for cog in cogs:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}")
                raise

        # Sync slash commands
        self.logger.info("Syncing slash commands...")
        try:
            synced = await self.tree.sync()
            self.logger.info(f"Synced {len(synced)} slash commands")
        except discord.HTTPException as e:
            self.logger.error(f"Failed to sync commands: {e}")

    async def on_ready(self):
        """Called when the bot is ready."""
        self.logger.info("Bot is ready!")
        self.logger.info(f"Logged in as: {self.user.name} (ID: {self.user.id})")
        self.logger.info(f"Connected to {len(self.guilds)} guilds")
        self.logger.info(f"Root words available: {len(self.game_manager.word_list)}")
        self.logger.info(f"Dictionary backend: {SETTINGS.dictionary_backend}")
        self.logger.info(f"Dev mode: {SETTINGS.dev_mode}")

    async def on_guild_join(self, guild: discord.Guild):
        """Called when the bot joins a new guild."""
        self.logger.info(f"Joined guild: {guild.name} (ID: {guild.id})")

    async def on_guild_remove(self, guild: discord.Guild):
        """Called when the bot is removed from a guild."""
        self.logger.info(f"Left guild: {guild.name} (ID: {guild.id})")

    async def close(self):
        """Clean up before shutting down."""
        self.logger.info("Shutting down bot...")

        if isinstance(self.oracle, FreeDictionaryOracle):
            from database import close_database
            await self.oracle.close()
            await close_database()

        await super().close()


def create_oracle(logger: logging.Logger) -> Optional[DictionaryOracle]:
    """Build the configured dictionary oracle, or None if it cannot be built."""
    backend = SETTINGS.dictionary_backend.lower()

    if backend == DictionaryBackend.API:
        from database import async_session_factory
        return FreeDictionaryOracle(async_session_factory)

    if backend == DictionaryBackend.WORDSET:
        if not SETTINGS.dictionary_file:
            logger.error("DICTIONARY_FILE not set! It is required when DICTIONARY_BACKEND=wordset.")
            return None
        try:
            return WordSetOracle.from_file(SETTINGS.dictionary_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load dictionary file {SETTINGS.dictionary_file}: {e}")
            return None

    logger.error(f"Unknown dictionary backend: {SETTINGS.dictionary_backend}")
    return None


async def main():
    """Main entry point."""
    # Setup logging
    logger = setup_logging()
    logger.info("Starting Word Scramble Bot...")

    # Validate configuration
    if not SETTINGS.discord_token:
        logger.error("DISCORD_TOKEN not set! Please set it in .env file.")
        sys.exit(1)

    # Without root words no round can ever start
    word_list = load_word_list(SETTINGS.word_list_path)
    if not word_list.ok:
        logger.error(word_list.error)
        sys.exit(1)

    oracle = create_oracle(logger)
    if oracle is None:
        sys.exit(1)

    # Create and run bot
    bot = WordScrambleBot(GameManager(word_list.words), oracle)

    try:
        async with bot:
            await bot.start(SETTINGS.discord_token)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    except Exception as e:
        logger.error(f"Bot crashed: {e}")
        raise
    finally:
        if not bot.is_closed():
            await bot.close()


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
