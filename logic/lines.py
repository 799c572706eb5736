"""
Line analysis for the TicTacToe board.
Knows the 8 winning lines and how to scan them.
"""

from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from .board import Square


# All possible winning lines (as triples of board positions)
# The scan order matters: it decides which position is reported
# when more than one line qualifies.
WINNING_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # Columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # Diagonals
    (1, 5, 9),
    (3, 5, 7),
]


def line_markers(squares: Dict[int, "Square"], line: Tuple[int, int, int]) -> list:
    """Get the markers on a line, in line order (None for empty squares)."""
    return [squares[position].marker for position in line]


def find_winning_line(
    squares: Dict[int, "Square"]
) -> Optional[Tuple[int, int, int]]:
    """
    Find the first line held entirely by one marker.

    Args:
        squares: Mapping of position -> Square.

    Returns:
        The winning line, or None if nobody has three in a row.
    """
    for line in WINNING_LINES:
        markers = line_markers(squares, line)
        if markers[0] is None:
            continue  # Empty cell, no winner on this line
        if markers[0] == markers[1] == markers[2]:
            return line

    return None


def two_with_open_slot(markers: list, marker) -> bool:
    """True if `marker` holds exactly 2 squares of the line and the third is empty."""
    return markers.count(marker) == 2 and markers.count(None) == 1


def find_open_slot(
    squares: Dict[int, "Square"],
    predicate: Callable[[list], bool]
) -> Optional[int]:
    """
    Scan the lines and return the empty position of the first match.

    Args:
        squares: Mapping of position -> Square.
        predicate: Called with a line's markers; True if the line qualifies.

    Returns:
        The empty position on the first qualifying line, or None.
    """
    for line in WINNING_LINES:
        markers = line_markers(squares, line)
        if not predicate(markers):
            continue
        for position, marker in zip(line, markers):
            if marker is None:
                return position

    return None
