"""
TicTacToe console UI.
Draws the board and talks to the human through text prompts.

Shows:
- The board with coloured markers (winning line highlighted)
- Both players' markers and round wins
- Prompts for name, marker, moves and replays
"""

from typing import Callable, Iterable, Optional, Tuple

from colorama import Style
from colorama.ansi import Cursor, clear_screen

from config import GameConfig
from logic.board import Board, POSITIONS
from logic.match import GameIO, MatchState
from logic.move_validator import MoveValidator, ValidationResult
from logic.players import Player


def join_or(items: Iterable, separator: str = ", ", final: str = "or") -> str:
    """
    Join items into a readable list.

    join_or([1])       -> "1"
    join_or([1, 2])    -> "1 or 2"
    join_or([1, 2, 3]) -> "1, 2, or 3"
    """
    words = [str(item) for item in items]

    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f" {final} ".join(words)

    return separator.join(words[:-1] + [f"{final} {words[-1]}"])


class ConsoleUI(GameIO):
    """
    Line-based console front end for a match.
    """

    def __init__(
        self,
        clear: bool = GameConfig.CLEAR_SCREEN,
        use_color: bool = GameConfig.USE_COLOR,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the UI.

        Args:
            clear: Clear the screen before redrawing the board.
            use_color: Colour markers and messages with ANSI codes.
            input_func: Reads one line from the human (input() by default).
        """
        self.clear_enabled = clear
        self.use_color = use_color
        self.input_func = input_func
        self.validator = MoveValidator()

    # ==================== OUTPUT HELPERS ====================

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def clear(self):
        if self.clear_enabled:
            print(clear_screen() + Cursor.POS(1, 1), end="")

    def draw_board(self, board: Board, highlight: Optional[Tuple[int, ...]] = None) -> str:
        """
        Render the board as text.

        Args:
            board: Board to draw.
            highlight: Positions to paint in the win colour.

        Returns:
            The board as a multi-line string.
        """
        cells = {}
        for position in POSITIONS:
            text = str(board[position])
            marker = board.marker_at(position)
            if marker is not None:
                if highlight and position in highlight:
                    text = self._paint(text, GameConfig.WIN_COLOR)
                else:
                    text = self._paint(text, GameConfig.MARKER_COLORS[marker.value])
            cells[position] = text

        spacer = "     |     |"
        divider = "-----+-----+-----"
        lines = []
        for row in range(3):
            first = row * 3 + 1
            lines.append(spacer)
            lines.append(
                f"  {cells[first]}  |  {cells[first + 1]}  |  {cells[first + 2]}"
            )
            lines.append(spacer)
            if row < 2:
                lines.append(divider)

        return "\n".join(lines)

    def _print_header(self, players: Tuple[Player, Player], state: MatchState):
        human, computer = players
        print(f"You're an {human.marker}. {computer.name} is an {computer.marker}.")
        for player in players:
            wins = state.scores[player.marker]
            print(f"{player.name} => Rounds won: {wins}".rjust(GameConfig.SCORE_WIDTH))

    # ==================== PROMPTS ====================

    def _ask(
        self,
        prompt: str,
        validate: Callable[[str], ValidationResult]
    ):
        """Keep asking until the answer validates, then return its value."""
        print(prompt)
        while True:
            result = validate(self.input_func(""))
            if result.is_valid:
                return result.value
            print(self._paint(result.error_message, GameConfig.ERROR_COLOR))

    def ask_name(self) -> str:
        self.clear()
        return self._ask("Please choose your name", self.validator.validate_name)

    def ask_marker(self):
        return self._ask("Please choose your marker (X or O)", self.validator.validate_marker)

    def ask_go_first(self) -> bool:
        return self._ask("Would you like to go first? (y/n)", self.validator.validate_yes_no)

    def ask_play_again(self) -> bool:
        return self._ask("Would you like to play again? (y/n)", self.validator.validate_yes_no)

    # ==================== GameIO ====================

    def show_welcome(self):
        print("Welcome to Tic Tac Toe!")
        print("")

    def show_goodbye(self):
        print("Thanks for playing Tic Tac Toe! Goodbye!")

    def show_board(self, board: Board, players: Tuple[Player, Player], state: MatchState):
        self.clear()
        if state.round_number > 1:
            print(f"Round {state.round_number}")
        else:
            self.show_welcome()
        self._print_header(players, state)
        print(self.draw_board(board))
        print("")

    def ask_position(self, board: Board, player: Player) -> int:
        prompt = f"Choose a square ({join_or(board.unmarked_positions())}): "
        return self._ask(prompt, lambda text: self.validator.validate_move(board, text))

    def show_round_result(
        self,
        board: Board,
        players: Tuple[Player, Player],
        state: MatchState,
        winner: Optional[Player]
    ):
        self.clear()
        self._print_header(players, state)
        print(self.draw_board(board, highlight=board.winning_line()))
        print("")

        if winner is None:
            print("It's a tie!")
        elif winner.is_human:
            print(self._paint("You won!", GameConfig.WIN_COLOR))
        else:
            print(f"{winner.name} won!")

    def wait_for_next_round(self):
        def only_enter(text: str) -> ValidationResult:
            if text == "":
                return ValidationResult(is_valid=True)
            return ValidationResult(
                is_valid=False,
                error_message="Sorry, you must ONLY press Enter"
            )

        self._ask("Press Enter to continue to the next round:", only_enter)

    def show_champion(self, champion: Player, state: MatchState):
        print("")
        print(self._paint(f"{champion.name} won it all!", GameConfig.WIN_COLOR))
