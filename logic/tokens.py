"""
Tokens for tic-tac-toe.
The two marks a player can put on the board, and their cell encoding.
"""

from enum import Enum
from typing import Optional


# Cell codes used by the board's internal array
EMPTY = 0
X_CODE = 1
O_CODE = 2


class Token(str, Enum):
    """The two tokens in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Token":
        """Get the other token."""
        return Token.O if self == Token.X else Token.X

    @property
    def code(self) -> int:
        return X_CODE if self == Token.X else O_CODE

    @classmethod
    def parse(cls, value) -> Optional["Token"]:
        """
        Turn a value into a Token.

        Only Token members and the exact strings "X" and "O" are accepted.

        Returns:
            The Token, or None if the value is not a valid token.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in ("X", "O"):
            return cls(value)
        return None

    @classmethod
    def from_code(cls, code: int) -> Optional["Token"]:
        if code == X_CODE:
            return cls.X
        if code == O_CODE:
            return cls.O
        return None

    def __str__(self) -> str:
        return self.value
