"""
Win checker for tic-tac-toe.
Checks if a token has won, if a win is still reachable, and if the game
has stalled into a stalemate.

All checks work on encoded cell arrays (see logic.tokens).
"""

from typing import Optional, Tuple

import numpy as np

from .tokens import EMPTY, X_CODE, O_CODE


# All possible winning lines, as cell indices
WINNING_LINES = np.array([
    # Rows
    [0, 1, 2],   # across the top
    [3, 4, 5],   # across the middle
    [6, 7, 8],   # across the bottom
    # Columns
    [0, 3, 6],   # down the left
    [1, 4, 7],   # down the middle
    [2, 5, 8],   # down the right
    # Diagonals
    [0, 4, 8],   # from top-left
    [2, 4, 6],   # from top-right
], dtype=np.intp)
WINNING_LINES.setflags(write=False)


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 of the same token in a row
    (horizontally, vertically, or diagonally)
    """

    def winning_line_index(self, cells: np.ndarray) -> Optional[int]:
        """
        Find the first winning line.

        Args:
            cells: Encoded board cells.

        Returns:
            Index into WINNING_LINES of the first uniform line, or None.
        """
        lines = cells[WINNING_LINES]  # shape (8, 3)
        uniform = (lines[:, 0] != EMPTY) & (lines == lines[:, :1]).all(axis=1)
        hits = np.flatnonzero(uniform)
        if hits.size == 0:
            return None
        return int(hits[0])

    def check_winner(self, cells: np.ndarray) -> int:
        """
        Check if there's a winner.

        Args:
            cells: Encoded board cells.

        Returns:
            The winning cell code, or EMPTY if no winner yet.
        """
        line = self.winning_line_index(cells)
        if line is None:
            return EMPTY
        return int(cells[WINNING_LINES[line][0]])

    def get_winning_line(self, cells: np.ndarray) -> Optional[Tuple[int, int, int]]:
        """Get the winning line as a tuple of indices, or None."""
        line = self.winning_line_index(cells)
        if line is None:
            return None
        i, j, k = WINNING_LINES[line]
        return int(i), int(j), int(k)

    def win_scenarios(self, cells: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Fill every empty cell with X, and separately with O.

        Existing tokens are kept. The input array is not modified.
        """
        empty = cells == EMPTY
        with_xs = np.where(empty, X_CODE, cells).astype(cells.dtype)
        with_os = np.where(empty, O_CODE, cells).astype(cells.dtype)
        return with_xs, with_os

    def is_win_possible(self, cells: np.ndarray) -> bool:
        """
        Check if a win is already on the board or still reachable.

        Only the two uniform fillings (all X, all O) are tried.
        """
        if self.check_winner(cells) != EMPTY:
            return True
        with_xs, with_os = self.win_scenarios(cells)
        return (self.check_winner(with_xs) != EMPTY or
                self.check_winner(with_os) != EMPTY)

    def check_stalemate(self, cells: np.ndarray) -> bool:
        """
        Check if the game is a stalemate.

        A stalemate needs:
        - At most one empty cell
        - No winner
        - No win reachable by either uniform filling
        """
        if np.count_nonzero(cells == EMPTY) > 1:
            return False
        if self.check_winner(cells) != EMPTY:
            return False
        return not self.is_win_possible(cells)
