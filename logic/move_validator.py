"""
Input validator for TicTacToe.
Checks what the human typed before it reaches the board.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board, Marker


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    error_message: Optional[str] = None
    value: object = None


class MoveValidator:
    """
    Validates human input.

    Rules:
    1. A move must be a number
    2. It must be a position from 1 to 9
    3. The square must be empty
    """

    def validate_move(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a typed move.

        Args:
            board: Current board.
            text: Raw text entered by the human.

        Returns:
            ValidationResult with the position as `value` when valid.
        """
        text = text.strip()

        # Check if it's a number at all
        try:
            position = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a number."
            )

        # Check if position is in valid range
        if not 1 <= position <= 9:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 1-9."
            )

        # Check if square is empty
        if board.marker_at(position) is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Square {position} is already taken."
            )

        return ValidationResult(is_valid=True, value=position)

    def validate_marker(self, text: str) -> ValidationResult:
        """Accept X or O in any case."""
        choice = text.strip().upper()
        if choice not in (Marker.X.value, Marker.O.value):
            return ValidationResult(
                is_valid=False,
                error_message="Marker must be X or O."
            )
        return ValidationResult(is_valid=True, value=Marker(choice))

    def validate_yes_no(self, text: str) -> ValidationResult:
        """Accept y or n in any case."""
        choice = text.strip().lower()
        if choice not in ("y", "n"):
            return ValidationResult(
                is_valid=False,
                error_message="Please answer y or n."
            )
        return ValidationResult(is_valid=True, value=(choice == "y"))

    def validate_name(self, text: str) -> ValidationResult:
        name = text.strip()
        if not name:
            return ValidationResult(
                is_valid=False,
                error_message="Please provide a valid name."
            )
        return ValidationResult(is_valid=True, value=name)
