"""
Command lookup for the terminal session.
Maps what the player typed (possibly abbreviated) to a command name.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


COMMANDS = ["place", "board", "new", "score", "help", "quit", "exit"]

# Extra names for the same command
ALIASES = {"exit": "quit"}


def abbreviations(words: Iterable[str]) -> Dict[str, str]:
    """
    Build a table of every unambiguous prefix of every word.

    A prefix shared by two words is left out, but a full word always
    maps to itself.

    Example:
        abbreviations(["board", "bye"]) ->
            {"bo": "board", "boa": "board", "boar": "board",
             "board": "board", "by": "bye", "bye": "bye"}
    """
    words = list(words)
    table: Dict[str, str] = {}
    seen: Dict[str, int] = {}

    for word in words:
        for end in range(1, len(word) + 1):
            prefix = word[:end]
            seen[prefix] = seen.get(prefix, 0) + 1
            table[prefix] = word

    for prefix, count in seen.items():
        if count > 1:
            del table[prefix]

    for word in words:
        table[word] = word

    return table


@dataclass
class ParsedCommand:
    """A line of input, resolved to a command."""
    name: Optional[str]
    args: List[str] = field(default_factory=list)
    error: Optional[str] = None


class CommandParser:
    """
    Resolves input lines to commands.

    A line that starts with a number is treated as "place <number>".
    """

    def __init__(self, commands: Iterable[str] = COMMANDS):
        self.table = abbreviations(commands)

    def lookup(self, word: str) -> Optional[str]:
        """Full command name for word, or None if unknown or ambiguous."""
        name = self.table.get(word.lower())
        if name is None:
            return None
        return ALIASES.get(name, name)

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a line of input.

        Returns:
            ParsedCommand. An empty line gives name None and no error.
        """
        words = line.split()
        if not words:
            return ParsedCommand(name=None)

        first, rest = words[0], words[1:]
        if first.lstrip("+-").isdigit():
            return ParsedCommand(name="place", args=words)

        name = self.lookup(first)
        if name is None:
            return ParsedCommand(
                name=None,
                args=rest,
                error=f"Unknown command '{first}'. Type 'help' for commands."
            )
        return ParsedCommand(name=name, args=rest)
