"""
Computer player for TicTacToe.
Picks a move with a fixed list of rules, looking one move ahead at most.
"""

import random
from enum import Enum
from typing import Optional

from .board import Board, InvalidMove, Marker, CENTER


class MoveReason(Enum):
    """Which rule picked the computer's move."""
    CENTER = "take the center"
    WIN = "complete own line"
    BLOCK = "block opponent's line"
    RANDOM = "random open square"


class MoveSelector:
    """
    Chooses the computer's move. Rules, first match wins:

    1. Take the center if it is open
    2. Complete a line where we already have two
    3. Block a line where the opponent has two
    4. Otherwise pick a random open square

    This is a greedy heuristic, so a careful human can beat it.
    """

    def __init__(self, rng: Optional[random.Random] = None, verbose: bool = False):
        """
        Initialize the selector.

        Args:
            rng: Random source for rule 4 (pass a seeded one for repeatable games).
            verbose: If True, print why each move was chosen.
        """
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

    def explain(self, board: Board, marker: Marker) -> MoveReason:
        """
        Get the rule that applies to this board.

        Args:
            board: Current board (not modified).
            marker: The computer's marker.

        Returns:
            The MoveReason for the next move.

        Raises:
            InvalidMove: If the board has no open squares.
        """
        if board.is_full():
            raise InvalidMove("No open squares left to choose from")

        if board.is_center_open():
            return MoveReason.CENTER
        if board.has_advantage(marker):
            return MoveReason.WIN
        if board.has_threat(marker):
            return MoveReason.BLOCK
        return MoveReason.RANDOM

    def choose(self, board: Board, marker: Marker) -> int:
        """
        Choose the position to mark.

        Args:
            board: Current board (not modified).
            marker: The computer's marker.

        Returns:
            Position (1-9) of the chosen square.

        Raises:
            InvalidMove: If the board has no open squares.
        """
        reason = self.explain(board, marker)

        if reason == MoveReason.CENTER:
            position = CENTER
        elif reason == MoveReason.WIN:
            position = board.locate_advantage(marker)
        elif reason == MoveReason.BLOCK:
            position = board.locate_threat(marker)
        else:
            position = self.rng.choice(board.unmarked_positions())

        if self.verbose:
            print(f"[AI] {marker} plays {position} ({reason.value})")

        return position
