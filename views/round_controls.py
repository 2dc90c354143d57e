"""
Round control views for Word Scramble Bot.
Provides the Restart / End buttons attached to a round announcement.
"""
from typing import Optional, Callable, Awaitable

import discord
from discord import ui


class RoundControlsView(ui.View):
    """
    Buttons shown under a round announcement.

    The callbacks perform the actual state change so the view stays free of
    game logic; a restart callback returns the embed for the new round.
    """

    def __init__(
        self,
        on_restart: Callable[[], Awaitable[Optional[discord.Embed]]],
        on_end: Optional[Callable[[], Awaitable[Optional[discord.Embed]]]] = None,
        timeout: Optional[float] = None
    ):
        super().__init__(timeout=timeout)
        self.on_restart = on_restart
        self.on_end = on_end

    @ui.button(
        label="Restart",
        style=discord.ButtonStyle.primary,
        emoji="🔄",
    )
    async def restart_button(self, interaction: discord.Interaction, button: ui.Button):
        """Handle restart button click: new root word, empty word list."""
        embed = await self.on_restart()
        if embed is None:
            await interaction.response.send_message(
                "❌ This round is no longer active.",
                ephemeral=True
            )
            return

        await interaction.response.edit_message(embed=embed, view=self)

    @ui.button(
        label="End",
        style=discord.ButtonStyle.danger,
        emoji="🏁",
    )
    async def end_button(self, interaction: discord.Interaction, button: ui.Button):
        """Handle end button click."""
        embed = await self.on_end() if self.on_end else None

        # Disable all buttons
        for item in self.children:
            item.disabled = True

        if embed is None:
            await interaction.response.edit_message(view=self)
        else:
            await interaction.response.edit_message(embed=embed, view=self)

        self.stop()
