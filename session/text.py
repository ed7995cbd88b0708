"""
Fixed text shown by the terminal session.
"""

WELCOME = """\
=============================================
   Tic-Tac-Toe
=============================================
Two players take turns putting X and O on a
3x3 board. Three in a row wins.
Type 'help' for the list of commands.
"""

INDEX_MAP = """\
Cell numbers:
-------------
| 1 | 2 | 3 |
-------------
| 4 | 5 | 6 |
-------------
| 7 | 8 | 9 |
-------------
"""

HELP = """\
Commands (any unique prefix works, e.g. 'p 5'):
  place <cell>   put your token on a cell (a bare number works too)
  board          show the board
  new            abandon this game and start a new one
  score          show games played and wins
  help           show this help
  quit           leave (also: exit)
"""

GOODBYE = "Goodbye!"
