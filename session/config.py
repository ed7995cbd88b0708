"""
Session configuration for tic-tac-toe.
Defaults for players, prompts, and logging.
"""


class SessionConfig:
    """
    Configuration class for the terminal session.
    Override attributes (or pass flags to main.py) to change them.
    """

    # ==================== PLAYERS ====================
    PLAYER_ONE = "Player 1"
    PLAYER_TWO = "Player 2"

    # ==================== TURN ORDER ====================
    # Seed for picking who goes first (None = different every run)
    RANDOM_SEED = None

    # ==================== INPUT ====================
    PROMPT = "> "
    # Cells are typed 1-9; the board uses 0-8
    CELL_NUMBER_BASE = 1

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
