"""
Players for a TicTacToe match.
One human and one computer, each holding one of the two markers.
"""

from enum import Enum
from typing import Tuple, Union
from dataclasses import dataclass

from .board import Marker


class Role(Enum):
    """Who is behind a player."""
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class Player:
    """
    A player in the match.
    The marker is fixed for the whole match.
    """
    name: str
    marker: Marker
    role: Role

    @property
    def is_human(self) -> bool:
        return self.role == Role.HUMAN


def allocate_players(
    human_name: str,
    human_marker: Union[Marker, str],
    computer_name: str
) -> Tuple[Player, Player]:
    """
    Set up the two players of a match with distinct markers.

    Args:
        human_name: Name typed in by the human.
        human_marker: Marker the human picked ("x"/"o" in any case is accepted).
        computer_name: Name for the computer player.

    Returns:
        (human, computer) players.

    Raises:
        ValueError: If the marker is not X or O.
    """
    if not isinstance(human_marker, Marker):
        try:
            human_marker = Marker(str(human_marker).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown marker {human_marker!r}. Must be X or O.")

    human = Player(name=human_name, marker=human_marker, role=Role.HUMAN)
    computer = Player(
        name=computer_name,
        marker=human_marker.opposite(),
        role=Role.COMPUTER
    )
    return human, computer
