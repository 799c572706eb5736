"""
Logic module for TicTacToe.
Handles the board, players, the computer opponent and the match.
"""

from .board import Board, Marker, Square, InvalidMove
from .lines import WINNING_LINES
from .players import Player, Role, allocate_players
from .move_validator import MoveValidator, ValidationResult
from .ai_player import MoveSelector, MoveReason
from .match import MatchController, MatchState, GameIO, Phase, RoundOutcome

__version__ = "1.0.0"
