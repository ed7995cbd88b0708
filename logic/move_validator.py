"""
Move validator for tic-tac-toe.
Validates that moves follow the rules before they reach the board.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over
    2. Index must be on the board
    3. Can only place on empty cells
    """

    def __init__(self, display_offset: int = 0):
        """
        Initialize the validator.

        Args:
            display_offset: Added to indices in error messages, so players
                see the same cell numbers they typed.
        """
        self.display_offset = display_offset

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell index to place a token on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        shown = index + self.display_offset

        if board.is_game_over():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if board.is_out_of_bounds(index):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid cell {shown}. Must be "
                    f"{self.display_offset}-{8 + self.display_offset}."
                )
            )

        if board.is_occupied(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {shown} is already occupied by {board.get_cells()[index]}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves.

        Returns:
            Empty cell indices, or nothing if the game is over.
        """
        if board.is_game_over():
            return []
        return board.empty_cells()
