"""
Board state for TicTacToe.
Tracks the 9 squares, which marker is where, and answers
questions about wins, threats and open squares.

Positions are numbered 1-9, row by row:

     1 | 2 | 3
    ---+---+---
     4 | 5 | 6
    ---+---+---
     7 | 8 | 9
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass

from .lines import find_open_slot, find_winning_line, two_with_open_slot


class Marker(Enum):
    """The two markers that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the opposite marker."""
        return Marker.O if self == Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


POSITIONS = range(1, 10)
CENTER = 5


class InvalidMove(ValueError):
    """Raised when a marker cannot be placed at the requested position."""


@dataclass
class Square:
    """
    A single square on the board.
    None means empty, otherwise the Marker placed there.
    """
    marker: Optional[Marker] = None

    def is_marked(self) -> bool:
        return self.marker is not None

    def __str__(self) -> str:
        return " " if self.marker is None else self.marker.value


class Board:
    """
    The 3x3 TicTacToe board.

    Threat and advantage are recomputed from the 8 lines on every
    query; lines are always scanned rows, then columns, then diagonals.
    """

    def __init__(self):
        self._squares: Dict[int, Square] = {}
        self.reset()

    def reset(self):
        """Clear every square."""
        self._squares = {position: Square() for position in POSITIONS}

    def place(self, position: int, marker: Marker):
        """
        Put a marker on the board.

        Args:
            position: Square to mark (1-9).
            marker: The marker to place.

        Raises:
            InvalidMove: If the position is out of range or already marked.
        """
        if position not in self._squares:
            raise InvalidMove(f"Invalid position {position}. Must be 1-9.")

        square = self._squares[position]
        if square.is_marked():
            raise InvalidMove(
                f"Square {position} is already marked with {square.marker}"
            )

        square.marker = marker

    def marker_at(self, position: int) -> Optional[Marker]:
        """Get the marker at a position (None if empty)."""
        return self._squares[position].marker

    def __getitem__(self, position: int) -> Square:
        return self._squares[position]

    def unmarked_positions(self) -> List[int]:
        """All empty positions, in ascending order."""
        return [
            position for position, square in self._squares.items()
            if not square.is_marked()
        ]

    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def winner(self) -> Optional[Marker]:
        """
        Check if there's a winner.

        Returns:
            The marker holding a full line, or None if no winner yet.
        """
        line = find_winning_line(self._squares)
        if line is None:
            return None
        return self._squares[line[0]].marker

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the line that produced the winner, if any."""
        return find_winning_line(self._squares)

    def has_win(self) -> bool:
        return self.winner() is not None

    def locate_threat(self, marker: Marker) -> Optional[int]:
        """
        Find where the opponent of `marker` is one move from winning.

        A line is a threat when the opponent holds 2 of its squares
        and the third is empty.

        Args:
            marker: The marker being threatened.

        Returns:
            The empty position that blocks the first threat, or None.
        """
        opponent = marker.opposite()
        return find_open_slot(
            self._squares,
            lambda markers: two_with_open_slot(markers, opponent)
        )

    def has_threat(self, marker: Marker) -> bool:
        return self.locate_threat(marker) is not None

    def locate_advantage(self, marker: Marker) -> Optional[int]:
        """
        Find where `marker` is one move from winning.

        Args:
            marker: The marker looking for a win.

        Returns:
            The empty position that completes the first such line, or None.
        """
        return find_open_slot(
            self._squares,
            lambda markers: two_with_open_slot(markers, marker)
        )

    def has_advantage(self, marker: Marker) -> bool:
        return self.locate_advantage(marker) is not None

    def is_center_open(self) -> bool:
        return not self._squares[CENTER].is_marked()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        for position, square in self._squares.items():
            new_board._squares[position].marker = square.marker
        return new_board

    def __repr__(self) -> str:
        cells = "".join(str(self._squares[position]) for position in POSITIONS)
        return f"Board({cells!r})"
