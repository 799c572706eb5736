"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, computer player, match controller)
- Console UI (prompts and board drawing)

Run this script to play TicTacToe against the computer!
"""

import random
from typing import Optional

from colorama import just_fix_windows_console

from config import GameConfig
from logic.ai_player import MoveSelector
from logic.board import Marker
from logic.match import MatchController
from logic.players import Player, Role, allocate_players
from ui import ConsoleUI


class TicTacToeGame:
    """
    One human against the computer, match after match.

    Players and the first mover are settled once; every new match
    starts the scores from zero.
    """

    def __init__(
        self,
        ui: ConsoleUI,
        human_name: Optional[str] = None,
        human_marker: Optional[Marker] = None,
        first_mover: Optional[Role] = None,
        wins_needed: int = GameConfig.WINS_TO_WIN_MATCH,
        seed: Optional[int] = GameConfig.RANDOM_SEED,
        verbose: bool = GameConfig.VERBOSE
    ):
        """
        Initialize the game.

        Args:
            ui: Console front end.
            human_name: Skip the name prompt if given.
            human_marker: Skip the marker prompt if given.
            first_mover: Skip the "go first?" prompt if given.
            wins_needed: Round wins needed to take a match.
            seed: Seed for the computer's random choices.
            verbose: Print the computer's reasoning.
        """
        self.ui = ui
        self.human_name = human_name
        self.human_marker = human_marker
        self.first_mover = first_mover
        self.wins_needed = wins_needed

        # One random source for everything the computer decides
        self.rng = random.Random(seed)
        self.selector = MoveSelector(rng=self.rng, verbose=verbose)

        self.human: Optional[Player] = None
        self.computer: Optional[Player] = None
        self.controller: Optional[MatchController] = None

    def setup(self) -> MatchController:
        """Ask for whatever was not given on the command line and build the match."""
        name = self.human_name or self.ui.ask_name()
        marker = self.human_marker or self.ui.ask_marker()
        computer_name = self.rng.choice(GameConfig.COMPUTER_NAMES)

        self.human, self.computer = allocate_players(name, marker, computer_name)

        if self.first_mover is None:
            self.first_mover = Role.HUMAN if self.ui.ask_go_first() else Role.COMPUTER

        self.controller = MatchController(
            self.human,
            self.computer,
            self.ui,
            selector=self.selector,
            first_mover=self.first_mover,
            wins_needed=self.wins_needed
        )
        return self.controller

    def start(self):
        """Play matches until the human has had enough."""
        if self.controller is None:
            self.setup()

        while True:
            self.controller.play_match()
            if not self.ui.ask_play_again():
                break
            print("Let's play again!")
            print("")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--name",
        help="Your name (skips the prompt)"
    )
    parser.add_argument(
        "--marker",
        type=str.upper,
        choices=[marker.value for marker in Marker],
        help="Your marker (skips the prompt)"
    )
    parser.add_argument(
        "--first",
        choices=[role.value for role in Role],
        default=GameConfig.FIRST_MOVER,
        help="Who moves first in every round (skips the prompt)"
    )
    parser.add_argument(
        "--wins",
        type=int,
        default=GameConfig.WINS_TO_WIN_MATCH,
        help="Round wins needed to take the match"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain text output"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=GameConfig.VERBOSE,
        help="Print why the computer picked each move"
    )

    args = parser.parse_args()

    if args.wins < 1:
        parser.error("--wins must be at least 1")

    use_color = GameConfig.USE_COLOR and not args.no_color
    if use_color:
        just_fix_windows_console()

    ui = ConsoleUI(
        clear=GameConfig.CLEAR_SCREEN and not args.no_clear,
        use_color=use_color
    )
    game = TicTacToeGame(
        ui,
        human_name=args.name,
        human_marker=Marker(args.marker) if args.marker else None,
        first_mover=Role(args.first) if args.first else None,
        wins_needed=args.wins,
        seed=args.seed,
        verbose=args.verbose
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        ui.show_goodbye()


if __name__ == "__main__":
    main()
