"""
View module for TicTacToe.
Turns the board into images for the graphical UI.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer
from .messages import welcome_message, result_message, thinking_message
