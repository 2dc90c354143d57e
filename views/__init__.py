"""Views module for Word Scramble Bot."""
from views.round_controls import RoundControlsView
from views.game_ui import GameEmbed

__all__ = [
    "RoundControlsView",
    "GameEmbed",
]
