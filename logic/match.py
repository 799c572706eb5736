"""
Match controller for TicTacToe.
Runs rounds between the human and the computer, keeps the score,
and ends the match when a player reaches the required round wins.

Game flow:
1. The first mover places a marker
2. The board is checked for a win, then for a full board
3. If the round goes on, the other player moves
4. A finished round updates the score; the match ends at 5 wins
"""

from enum import Enum
from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Marker
from .players import Player, Role
from .ai_player import MoveSelector


DEFAULT_WINS_TO_WIN = 5


class RoundOutcome(Enum):
    """How a round ended."""
    WIN_X = "win_x"
    WIN_O = "win_o"
    TIE = "tie"

    @classmethod
    def for_winner(cls, marker: Optional[Marker]) -> "RoundOutcome":
        if marker is None:
            return cls.TIE
        return cls.WIN_X if marker == Marker.X else cls.WIN_O

    @property
    def winner_marker(self) -> Optional[Marker]:
        if self == RoundOutcome.WIN_X:
            return Marker.X
        if self == RoundOutcome.WIN_O:
            return Marker.O
        return None


class Phase(Enum):
    """Where the match is."""
    AWAITING_MOVE = "awaiting_move"
    ROUND_OVER = "round_over"
    MATCH_OVER = "match_over"


@dataclass
class MatchState:
    """
    Everything the controller tracks between turns.
    Scores are kept per marker and only reset when a new match starts.
    """
    scores: Dict[Marker, int] = field(
        default_factory=lambda: {Marker.X: 0, Marker.O: 0}
    )
    round_number: int = 0
    phase: Phase = Phase.AWAITING_MOVE
    active_marker: Optional[Marker] = None
    last_outcome: Optional[RoundOutcome] = None
    champion: Optional[Player] = None


class GameIO:
    """
    What the controller needs from the outside world.
    The console version lives in ui.py; tests use a scripted one.
    """

    def show_board(self, board: Board, players: Tuple[Player, Player], state: MatchState):
        raise NotImplementedError

    def ask_position(self, board: Board, player: Player) -> int:
        """Get an open position from a human player (reprompting as needed)."""
        raise NotImplementedError

    def show_round_result(
        self,
        board: Board,
        players: Tuple[Player, Player],
        state: MatchState,
        winner: Optional[Player]
    ):
        raise NotImplementedError

    def wait_for_next_round(self):
        raise NotImplementedError

    def show_champion(self, champion: Player, state: MatchState):
        raise NotImplementedError


class MatchController:
    """
    Owns the board and the match state.

    Only one player writes to the board at a time: the controller asks
    the active player for a position, places it, and then hands the
    turn over.
    """

    def __init__(
        self,
        human: Player,
        computer: Player,
        io: GameIO,
        selector: Optional[MoveSelector] = None,
        first_mover: Role = Role.HUMAN,
        wins_needed: int = DEFAULT_WINS_TO_WIN
    ):
        """
        Set up a match.

        Args:
            human: The human player.
            computer: The computer player.
            io: Board display and human input.
            selector: Computer move logic (default: unseeded MoveSelector).
            first_mover: Who moves first in every round of the match.
            wins_needed: Round wins needed to take the match.
        """
        if human.marker == computer.marker:
            raise ValueError("Players must have different markers")
        if wins_needed < 1:
            raise ValueError(f"wins_needed must be at least 1, got {wins_needed}")

        self.human = human
        self.computer = computer
        self.io = io
        self.selector = selector if selector is not None else MoveSelector()
        self.first_mover = first_mover
        self.wins_needed = wins_needed

        self.board = Board()
        self.state = MatchState()
        self._by_marker = {human.marker: human, computer.marker: computer}

    @property
    def players(self) -> Tuple[Player, Player]:
        return (self.human, self.computer)

    @property
    def active_player(self) -> Optional[Player]:
        if self.state.active_marker is None:
            return None
        return self._by_marker[self.state.active_marker]

    def score_for(self, player: Player) -> int:
        return self.state.scores[player.marker]

    def new_match(self):
        """Reset scores and the board for a fresh match."""
        self.state = MatchState()
        self.board.reset()

    def start_round(self):
        """Clear the board and give the first turn to the first mover."""
        if self.state.phase == Phase.MATCH_OVER:
            raise RuntimeError("Match is already over, start a new match first")

        self.board.reset()
        self.state.round_number += 1
        self.state.phase = Phase.AWAITING_MOVE
        self.state.last_outcome = None

        first = self.human if self.first_mover == Role.HUMAN else self.computer
        self.state.active_marker = first.marker

    def play_turn(self) -> Optional[RoundOutcome]:
        """
        Let the active player make one move.

        Returns:
            The round outcome if this move ended the round, else None.

        Raises:
            RuntimeError: If no round is in progress.
        """
        if self.state.phase != Phase.AWAITING_MOVE or self.state.active_marker is None:
            raise RuntimeError("No round in progress")

        player = self.active_player
        position = self._choose_position(player)
        self.board.place(position, player.marker)

        # Win first: a move that fills the board can still win it
        if self.board.has_win():
            outcome = RoundOutcome.for_winner(self.board.winner())
        elif self.board.is_full():
            outcome = RoundOutcome.TIE
        else:
            self.state.active_marker = player.marker.opposite()
            return None

        self._finish_round(outcome)
        return outcome

    def play_round(self) -> RoundOutcome:
        """Play one round to completion and report the result."""
        self.start_round()
        self.io.show_board(self.board, self.players, self.state)

        outcome = self.play_turn()
        while outcome is None:
            self.io.show_board(self.board, self.players, self.state)
            outcome = self.play_turn()

        winner_marker = outcome.winner_marker
        winner = self._by_marker[winner_marker] if winner_marker else None
        self.io.show_round_result(self.board, self.players, self.state, winner)
        return outcome

    def play_match(self) -> Player:
        """
        Play rounds until one player has enough wins.

        Returns:
            The champion.
        """
        self.new_match()

        while True:
            self.play_round()
            if self.state.phase == Phase.MATCH_OVER:
                break
            self.io.wait_for_next_round()

        self.io.show_champion(self.state.champion, self.state)
        return self.state.champion

    def _choose_position(self, player: Player) -> int:
        # Both sides only ever see a copy of the board
        snapshot = self.board.copy()
        if player.is_human:
            return self.io.ask_position(snapshot, player)
        return self.selector.choose(snapshot, player.marker)

    def _finish_round(self, outcome: RoundOutcome):
        self.state.last_outcome = outcome
        self.state.active_marker = None
        self.state.phase = Phase.ROUND_OVER

        winner_marker = outcome.winner_marker
        if winner_marker is None:
            return

        self.state.scores[winner_marker] += 1
        if self.state.scores[winner_marker] >= self.wins_needed:
            self.state.champion = self._by_marker[winner_marker]
            self.state.phase = Phase.MATCH_OVER
