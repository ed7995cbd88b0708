"""
Logic module for tic-tac-toe.
Handles the board, rules, and move validation.
"""

from .tokens import Token
from .win_checker import WinChecker, WINNING_LINES
from .board import Board
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
