"""
Tests for the tic-tac-toe board.
"""

import pytest

from logic.board import Board
from logic.tokens import Token

X, O = Token.X, Token.O


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def win_with_x():
    return Board([X, X, X])


@pytest.fixture
def win_with_o():
    return Board(["O", "O", "O"])


@pytest.fixture
def stalemate():
    return Board([X, X, O, O, O, X, X, O, X])


@pytest.fixture
def possible():
    return Board([X, None, O, O, O, X, X, O, X])


# ==================== CELLS ====================

def test_new_board_is_empty(board):
    assert board.get_cells() == [None] * 9


def test_get_cells_returns_a_copy(board):
    cells = board.get_cells()
    cells[0] = X
    assert board.get_cells()[0] is None
    assert board.get_cells() is not board.get_cells()


def test_short_initial_cells_are_padded(win_with_x):
    assert win_with_x.get_cells() == [X, X, X] + [None] * 6


def test_short_initial_cells_are_not_a_stalemate():
    board = Board(["X", "O", "X"])
    assert len(board.get_cells()) == 9
    assert not board.is_stalemate()


def test_initial_cells_are_not_aliased():
    cells = [X, None, None, None, None, None, None, None, None]
    board = Board(cells)
    cells[1] = O
    assert board.get_cells()[1] is None


def test_string_tokens_decode_to_tokens(win_with_o):
    assert win_with_o.get_cells()[:3] == [O, O, O]
    assert all(isinstance(t, Token) for t in win_with_o.get_cells()[:3])


# ==================== OCCUPANCY & BOUNDS ====================

def test_is_occupied(board):
    assert board.is_occupied(0) is False
    board.place(X, 0)
    assert board.is_occupied(0) is True


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_is_occupied_out_of_bounds_raises(board, index):
    with pytest.raises(IndexError):
        board.is_occupied(index)


@pytest.mark.parametrize("index, expected", [(-1, True), (0, False), (4, False), (8, False), (9, True)])
def test_is_out_of_bounds(board, index, expected):
    assert board.is_out_of_bounds(index) is expected


# ==================== PLACE ====================

@pytest.mark.parametrize("token", [X, O, "X", "O"])
@pytest.mark.parametrize("index", range(9))
def test_place_puts_token_on_board(board, token, index):
    board.place(token, index)
    assert board.get_cells()[index] == token


def test_place_returns_new_cells(board):
    assert board.place(X, 4) == [None] * 4 + [X] + [None] * 4


def test_place_returns_a_copy(board):
    cells = board.place(X, 0)
    cells[1] = O
    assert board.get_cells()[1] is None
    assert not board.is_occupied(1)


@pytest.mark.parametrize("token", ["foo", "x", "", None, 1, "XO"])
def test_place_invalid_token_is_ignored(stalemate, token):
    before = stalemate.get_cells()
    for index in range(9):
        assert stalemate.place(token, index) == before
    assert stalemate.get_cells() == before


def test_place_overwrites_occupied_cell(board):
    board.place(X, 0)
    board.place(O, 0)
    assert board.get_cells()[0] == O


@pytest.mark.parametrize("index", [-1, -9, 9])
def test_place_out_of_bounds_raises_without_changing_board(board, index):
    with pytest.raises(IndexError):
        board.place(X, index)
    assert board.get_cells() == [None] * 9


def test_place_invalid_token_out_of_bounds_is_ignored(board):
    assert board.place("foo", 42) == [None] * 9


# ==================== WINNER ====================

def test_winner_x(win_with_x):
    assert win_with_x.winner() == X
    assert win_with_x.is_won()


def test_winner_o(win_with_o):
    assert win_with_o.winner() == O
    assert win_with_o.is_won()


def test_no_winner(board, stalemate):
    assert board.winner() is None
    assert not board.is_won()
    assert stalemate.winner() is None


@pytest.mark.parametrize("line", [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
])
def test_every_line_wins(board, line):
    for index in line:
        board.place(O, index)
    assert board.winner() == O
    assert board.winning_line() == line


def test_winner_uses_first_line_in_order():
    # Top row of X and middle row of O: rows are scanned top-down
    board = Board([X, X, X, O, O, O, None, None, None])
    assert board.winner() == X
    assert board.winning_line() == (0, 1, 2)


# ==================== STALEMATE & FEASIBILITY ====================

def test_stalemate(stalemate):
    assert not stalemate.is_won()
    assert stalemate.is_stalemate()
    assert stalemate.is_game_over()
    assert not stalemate.is_win_possible()


def test_empty_board_is_not_stalemate(board):
    assert not board.is_stalemate()
    assert not board.is_game_over()


def test_won_board_is_not_stalemate(win_with_x):
    assert not win_with_x.is_stalemate()


def test_possible_board(possible):
    assert not possible.is_stalemate()
    assert possible.is_win_possible()
    assert not possible.is_game_over()


def test_won_board_is_win_possible(board):
    for index in range(3):
        board.place(X, index)
    assert board.is_win_possible()
    assert board.is_game_over()


def test_forced_draw_with_two_empty_cells_is_not_stalemate():
    # X | O | X
    # X | O | O
    # O | _ | _   -> only considered once one cell is left
    board = Board([X, O, X, X, O, O, O, None, None])
    assert not board.is_stalemate()


# ==================== WIN SCENARIOS ====================

def test_win_scenarios_on_empty_board(board):
    xs, os = board.win_scenarios()
    assert xs.get_cells() == [X] * 9
    assert os.get_cells() == [O] * 9


def test_win_scenarios_keep_existing_tokens(possible):
    xs, os = possible.win_scenarios()
    original = possible.get_cells()
    for i, token in enumerate(original):
        if token is None:
            assert xs.get_cells()[i] == X
            assert os.get_cells()[i] == O
        else:
            assert xs.get_cells()[i] == token
            assert os.get_cells()[i] == token


def test_win_scenarios_do_not_change_board(possible):
    before = possible.get_cells()
    xs, _ = possible.win_scenarios()
    xs.place(O, 0)
    assert possible.get_cells() == before


def test_empty_cells(possible, board):
    assert possible.empty_cells() == [1]
    assert board.empty_cells() == list(range(9))


# ==================== RENDERING ====================

def test_pretty_empty_board(board):
    expected = (
        "-------------\n"
        "|   |   |   |\n"
        "-------------\n"
        "|   |   |   |\n"
        "-------------\n"
        "|   |   |   |\n"
        "-------------\n"
    )
    assert board.pretty() == expected


def test_pretty_board_with_tokens(stalemate):
    expected = (
        "-------------\n"
        "| X | X | O |\n"
        "-------------\n"
        "| O | O | X |\n"
        "-------------\n"
        "| X | O | X |\n"
        "-------------\n"
    )
    assert stalemate.pretty() == expected
    assert str(stalemate) == expected
