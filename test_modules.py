"""
Tests for the TicTacToe logic modules.
Covers the board, line scanning, players, input validation and the
computer's move selection.

Usage:
    pytest test_modules.py
    python test_modules.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.board import Board, InvalidMove, Marker
from logic.lines import WINNING_LINES
from logic.players import Role, allocate_players
from logic.move_validator import MoveValidator
from logic.ai_player import MoveReason, MoveSelector


X = Marker.X
O = Marker.O


def make_board(layout: str) -> Board:
    """
    Build a board from a 9-character string, row by row.
    "." is an empty square, e.g. "XX..O...." for X at 1,2 and O at 5.
    """
    board = Board()
    for position, char in enumerate(layout, start=1):
        if char != ".":
            board.place(position, Marker(char))
    return board


# ==================== LINES ====================

def test_winning_lines_are_rows_columns_diagonals_in_order():
    assert WINNING_LINES == [
        (1, 2, 3), (4, 5, 6), (7, 8, 9),
        (1, 4, 7), (2, 5, 8), (3, 6, 9),
        (1, 5, 9), (3, 5, 7),
    ]


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.unmarked_positions() == list(range(1, 10))
    assert not board.is_full()
    assert board.winner() is None
    assert board.is_center_open()


def test_place_removes_position_from_unmarked():
    board = Board()
    board.place(7, X)

    assert 7 not in board.unmarked_positions()
    assert board.marker_at(7) == X
    assert len(board.unmarked_positions()) == 8


def test_place_on_marked_square_is_rejected():
    board = Board()
    board.place(3, X)

    with pytest.raises(InvalidMove):
        board.place(3, O)

    # The original marker is untouched
    assert board.marker_at(3) == X


@pytest.mark.parametrize("position", [0, 10, -1])
def test_place_out_of_range_is_rejected(position):
    with pytest.raises(InvalidMove):
        Board().place(position, X)


def test_reset_twice_is_same_as_once():
    board = make_board("XOXOXO...")
    board.reset()
    board.reset()

    assert board.unmarked_positions() == list(range(1, 10))
    assert board.winner() is None


def test_diagonal_win():
    board = make_board("X...X...X")
    assert board.winner() == X
    assert board.has_win()
    assert board.winning_line() == (1, 5, 9)


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    board = Board()
    for position in line:
        board.place(position, O)
    assert board.winner() == O
    assert board.winning_line() == line


def test_mixed_line_does_not_win():
    board = make_board("XXO......")
    assert board.winner() is None
    assert not board.has_win()


def test_full_board_without_line_is_a_tie():
    board = make_board("XOXXOOOXX")
    assert board.is_full()
    assert board.unmarked_positions() == []
    assert board.winner() is None


def test_full_and_unmarked_agree_while_filling():
    board = Board()
    for position in range(1, 10):
        assert board.is_full() == (board.unmarked_positions() == [])
        board.place(position, X if position % 2 else O)
    assert board.is_full() == (board.unmarked_positions() == [])


def test_advantage_for_own_two_in_a_row():
    board = make_board("OO..X....")
    assert board.has_advantage(O)
    assert board.locate_advantage(O) == 3
    assert not board.has_advantage(X)
    assert board.locate_advantage(X) is None


def test_threat_is_opponents_two_in_a_row():
    board = make_board("XX..O....")
    assert board.has_threat(O)
    assert board.locate_threat(O) == 3
    # X is not threatened by its own line
    assert not board.has_threat(X)


def test_threat_is_symmetric_between_markers():
    x_board = make_board("XX..O....")
    o_board = make_board("OO..X....")
    assert x_board.locate_threat(O) == o_board.locate_threat(X) == 3


def test_blocked_line_is_neither_threat_nor_advantage():
    board = make_board("XXO......")
    assert not board.has_threat(O)
    assert not board.has_advantage(X)


def test_threat_scan_prefers_rows_over_columns():
    # X threatens row 4-5-6 (open 6) and column 2-5-8 (open 2)
    board = make_board("...XX..X.")
    assert board.locate_threat(O) == 6


def test_locate_returns_open_square_in_line_order():
    # Only the middle of the first column is open
    board = make_board("O.....O..")
    assert board.locate_advantage(O) == 4


def test_center_open():
    assert make_board("X.......O").is_center_open()
    assert not make_board("....X....").is_center_open()


def test_copy_is_independent():
    board = make_board("X........")
    snapshot = board.copy()
    snapshot.place(2, O)

    assert board.marker_at(2) is None
    assert snapshot.marker_at(1) == X


# ==================== PLAYERS ====================

def test_allocate_players_gives_distinct_markers():
    human, computer = allocate_players("Ada", "o", "R2D2")

    assert human.marker == O
    assert computer.marker == X
    assert human.role == Role.HUMAN and human.is_human
    assert computer.role == Role.COMPUTER and not computer.is_human


def test_allocate_players_rejects_unknown_marker():
    with pytest.raises(ValueError):
        allocate_players("Ada", "Z", "R2D2")


# ==================== VALIDATOR ====================

def test_validate_move():
    validator = MoveValidator()
    board = make_board("X........")

    assert validator.validate_move(board, " 5 ").value == 5

    for text in ["abc", "", "0", "10", "1"]:
        result = validator.validate_move(board, text)
        assert not result.is_valid
        assert result.error_message


def test_validate_prompts():
    validator = MoveValidator()

    assert validator.validate_marker("x").value == X
    assert not validator.validate_marker("q").is_valid
    assert validator.validate_yes_no("Y").value is True
    assert validator.validate_yes_no("n").value is False
    assert not validator.validate_yes_no("maybe").is_valid
    assert validator.validate_name("  Ada ").value == "Ada"
    assert not validator.validate_name("   ").is_valid


# ==================== MOVE SELECTOR ====================

def test_empty_board_takes_center():
    selector = MoveSelector(rng=random.Random(0))
    assert selector.choose(Board(), O) == 5


def test_center_beats_threat_and_advantage():
    # O could win on 3 and X threatens 9, but the center is still open
    board = make_board("OO....XX.")
    assert MoveSelector(rng=random.Random(0)).choose(board, O) == 5


def test_completes_own_line():
    board = make_board("OO..X....")
    selector = MoveSelector(rng=random.Random(0))
    assert selector.explain(board, O) == MoveReason.WIN
    assert selector.choose(board, O) == 3


def test_blocks_opponent_line():
    board = make_board("XX..O....")
    selector = MoveSelector(rng=random.Random(0))
    assert selector.explain(board, O) == MoveReason.BLOCK
    assert selector.choose(board, O) == 3


def test_winning_beats_blocking():
    # X threatens 3, but O can win on 6
    board = make_board("XX.OO....")
    assert MoveSelector(rng=random.Random(0)).choose(board, O) == 6


def test_random_move_is_open_and_repeatable():
    board = make_board("X...O...X")
    first = MoveSelector(rng=random.Random(42)).choose(board, O)
    second = MoveSelector(rng=random.Random(42)).choose(board, O)

    assert first == second
    assert first in board.unmarked_positions()


def test_choose_does_not_modify_board():
    board = make_board("XX..O....")
    before = board.unmarked_positions()
    MoveSelector(rng=random.Random(0)).choose(board, O)
    assert board.unmarked_positions() == before


def test_choose_on_full_board_is_rejected():
    with pytest.raises(InvalidMove):
        MoveSelector().choose(make_board("XOXXOOOXX"), O)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
