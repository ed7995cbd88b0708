"""
Board for tic-tac-toe.
Holds the 9 cells and answers every rules question about them.
"""

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .tokens import EMPTY, Token
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

BOARD_CELLS = 9


class Board:
    """
    A 3x3 tic-tac-toe board.

    Cells are indexed 0-8, row-major:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    The only way to change a board is place(). Every read hands back a
    fresh list, so callers can never alias the internal cells.
    """

    _win_checker = WinChecker()

    def __init__(self, cells: Optional[Iterable] = None):
        """
        Create a board.

        Args:
            cells: Initial cells (Token, "X", "O" or None). Empty board if
                not provided. Missing trailing cells are empty, so a short
                board is always 9 cells and is never a stalemate early.
        """
        codes = [] if cells is None else [self._encode(cell) for cell in cells]
        if len(codes) < BOARD_CELLS:
            codes.extend([EMPTY] * (BOARD_CELLS - len(codes)))
        self._cells = np.array(codes, dtype=np.int8)

    @staticmethod
    def _encode(cell) -> int:
        token = Token.parse(cell)
        return EMPTY if token is None else token.code

    @classmethod
    def _from_codes(cls, codes: np.ndarray) -> "Board":
        board = cls()
        board._cells = codes.copy()
        return board

    def get_cells(self) -> List[Optional[Token]]:
        """Return a copy of the cells, None for empty."""
        return [Token.from_code(int(code)) for code in self._cells]

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells."""
        return [int(i) for i in np.flatnonzero(self._cells == EMPTY)]

    def is_out_of_bounds(self, index: int) -> bool:
        """Check if index is not a cell on the board (0-8)."""
        return not 0 <= index <= BOARD_CELLS - 1

    def _check_index(self, index: int):
        # numpy would wrap negative indices around
        if self.is_out_of_bounds(index):
            raise IndexError(f"Cell index {index} is off the board (0-{BOARD_CELLS - 1})")

    def is_occupied(self, index: int) -> bool:
        """
        Check if there is a token at index.

        Raises:
            IndexError: If index is out of bounds.
        """
        self._check_index(index)
        return bool(self._cells[index] != EMPTY)

    def place(self, token, index: int) -> List[Optional[Token]]:
        """
        Put a token on the board.

        An invalid token leaves the board unchanged. A valid token always
        overwrites the cell, occupied or not.

        Args:
            token: Token.X / Token.O (or "X" / "O").
            index: Cell index (0-8).

        Returns:
            The cells after the move.

        Raises:
            IndexError: If index is out of bounds and the token is valid.
        """
        parsed = Token.parse(token)
        if parsed is None:
            logger.debug("Ignoring invalid token %r at %s", token, index)
            return self.get_cells()

        self._check_index(index)
        self._cells[index] = parsed.code
        logger.debug("Placed %s at %d", parsed, index)
        return self.get_cells()

    def winner(self) -> Optional[Token]:
        """The token on the first complete line, or None."""
        return Token.from_code(self._win_checker.check_winner(self._cells))

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """The cells of the line winner() found, or None."""
        return self._win_checker.get_winning_line(self._cells)

    def is_won(self) -> bool:
        return self.winner() is not None

    def is_stalemate(self) -> bool:
        """
        Check if nobody can win any more.

        Only decided once at most one cell is empty; before that this is
        always False, even when a draw is already certain.
        """
        return self._win_checker.check_stalemate(self._cells)

    def is_win_possible(self) -> bool:
        """
        Check if the board is won, or could be won by filling every empty
        cell with Xs or with Os.
        """
        return self._win_checker.is_win_possible(self._cells)

    def win_scenarios(self) -> Tuple["Board", "Board"]:
        """Two new boards: empty cells filled with Xs, and with Os."""
        with_xs, with_os = self._win_checker.win_scenarios(self._cells)
        return self._from_codes(with_xs), self._from_codes(with_os)

    def is_game_over(self) -> bool:
        """The game ends on a win or a stalemate."""
        return self.is_won() or self.is_stalemate()

    def pretty(self) -> str:
        """Render the board as a bordered text grid."""
        cells = [str(token) if token else " " for token in self.get_cells()]
        border = "-------------"
        lines = [border]
        for row in range(3):
            a, b, c = cells[row * 3:row * 3 + 3]
            lines.append(f"| {a} | {b} | {c} |")
            lines.append(border)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return f"Board({self.get_cells()!r})"
