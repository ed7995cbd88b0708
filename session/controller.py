"""
Session controller for tic-tac-toe.
Runs the read-command-execute loop for two players at one terminal.
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from logic.board import Board
from logic.move_validator import MoveValidator
from logic.tokens import Token

from .commands import CommandParser, ParsedCommand
from .config import SessionConfig
from .text import GOODBYE, HELP, INDEX_MAP, WELCOME

logger = logging.getLogger(__name__)


class GameSession:
    """
    Two players, any number of games, one board at a time.

    Game flow:
    1. A random player is picked to go first and plays X
    2. Players take turns typing commands until the game is won or stalled
    3. The result is counted and a new game starts
    4. Repeat until 'quit' or end of input
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the session.

        Args:
            config: Session configuration. Uses defaults if not provided.
            input_fn: Reads one line given a prompt; raises EOFError at end.
                Defaults to input().
            output: Writes one block of text. Defaults to print().
            rng: Random source for turn order. Seeded from config if not provided.
        """
        self.config = config or SessionConfig()
        self.input_fn = input_fn or input
        self.output = output or print
        self.rng = rng or random.Random(self.config.RANDOM_SEED)

        self.parser = CommandParser()
        self.validator = MoveValidator(display_offset=self.config.CELL_NUMBER_BASE)

        self.players: List[str] = [self.config.PLAYER_ONE, self.config.PLAYER_TWO]

        # In-memory tallies, kept for the life of the session
        self.games_played = 0
        self.draws = 0
        self.wins: Dict[str, int] = {name: 0 for name in self.players}

        # Per-game state
        self.board = Board()
        self.tokens: Dict[Token, str] = {}
        self.current_token = Token.X
        self.is_running = False

        self._handlers = {
            "place": self._cmd_place,
            "board": self._cmd_board,
            "new": self._cmd_new,
            "score": self._cmd_score,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
        }

    @property
    def current_player(self) -> str:
        return self.tokens[self.current_token]

    def prompt(self) -> str:
        return f"{self.current_player} ({self.current_token}) {self.config.PROMPT}"

    def run(self) -> int:
        """
        Run the session until the players quit or input ends.

        Returns:
            Number of games finished.
        """
        self.output(WELCOME)
        self.output(INDEX_MAP)
        self.start_game()
        self.is_running = True

        while self.is_running:
            try:
                line = self.input_fn(self.prompt())
            except EOFError:
                logger.debug("End of input")
                break
            self.handle(line)

        self.is_running = False
        self.output(GOODBYE)
        return self.games_played

    def start_game(self):
        """Reset the board and pick who goes first."""
        first = self.rng.choice(self.players)
        second = self.players[1] if first == self.players[0] else self.players[0]

        self.board = Board()
        self.tokens = {Token.X: first, Token.O: second}
        self.current_token = Token.X

        logger.info("Game %d: %s is X, %s is O", self.games_played + 1, first, second)
        self.output(f"New game! {first} plays X and goes first. {second} plays O.")
        self.output(self.board.pretty())

    def handle(self, line: str):
        """Execute one line of input."""
        command = self.parser.parse(line)
        if command.error:
            self.output(command.error)
            return
        if command.name is None:
            return
        self._handlers[command.name](command)

    def _cmd_place(self, command: ParsedCommand):
        if not command.args:
            self.output("Which cell? For example: place 5")
            return

        raw = command.args[0]
        try:
            number = int(raw)
        except ValueError:
            self.output(f"'{raw}' is not a cell number.")
            return

        index = number - self.config.CELL_NUMBER_BASE
        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            self.output(result.error_message)
            open_cells = self.validator.get_valid_moves(self.board)
            if open_cells:
                shown = ", ".join(str(i + self.config.CELL_NUMBER_BASE) for i in open_cells)
                self.output(f"Open cells: {shown}")
            return

        self.board.place(self.current_token, index)
        logger.debug("%s placed %s at %d", self.current_player, self.current_token, index)
        self.output(self.board.pretty())

        if self.board.is_game_over():
            self._finish_game()
        else:
            self.current_token = self.current_token.opposite()

    def _finish_game(self):
        """Announce and count the result, then start over."""
        winner = self.board.winner()
        if winner is not None:
            name = self.tokens[winner]
            self.wins[name] += 1
            line = "-".join(str(i + self.config.CELL_NUMBER_BASE) for i in self.board.winning_line())
            self.output(f"{name} ({winner}) wins on cells {line}!")
        else:
            self.draws += 1
            self.output("Stalemate! Nobody can win this one.")

        self.games_played += 1
        logger.info("Game %d over, winner: %s", self.games_played, winner)
        self.start_game()

    def _cmd_board(self, command: ParsedCommand):
        self.output(self.board.pretty())

    def _cmd_new(self, command: ParsedCommand):
        self.output("Abandoning this game.")
        self.start_game()

    def _cmd_score(self, command: ParsedCommand):
        lines = [f"Games played: {self.games_played}"]
        for name in self.players:
            lines.append(f"  {name}: {self.wins[name]} win(s)")
        lines.append(f"  Draws: {self.draws}")
        self.output("\n".join(lines))

    def _cmd_help(self, command: ParsedCommand):
        self.output(HELP)
        self.output(INDEX_MAP)

    def _cmd_quit(self, command: ParsedCommand):
        self.is_running = False
