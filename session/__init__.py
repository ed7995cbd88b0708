"""
Session module for tic-tac-toe.
Handles players, turn order, and the terminal command loop.
"""

from .config import SessionConfig
from .commands import CommandParser, abbreviations
from .controller import GameSession
