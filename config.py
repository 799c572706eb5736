"""
Game configuration for TicTacToe.
Match rules, player names and console display settings.
"""

from colorama import Fore, Style


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override these per run.
    """

    # ==================== MATCH RULES ====================
    # Round wins needed to take the match
    WINS_TO_WIN_MATCH = 5

    # Who moves first in every round ("human" or "computer").
    # None means ask once when the match is set up.
    FIRST_MOVER = None

    # ==================== PLAYERS ====================
    # The computer picks one of these names at random
    COMPUTER_NAMES = ["R2D2", "Forty-Two", "C3PO"]

    # ==================== DISPLAY SETTINGS ====================
    CLEAR_SCREEN = True
    USE_COLOR = True

    # Colours used when drawing markers
    MARKER_COLORS = {
        "X": Fore.CYAN + Style.BRIGHT,
        "O": Fore.YELLOW + Style.BRIGHT,
    }
    WIN_COLOR = Fore.GREEN + Style.BRIGHT
    ERROR_COLOR = Fore.RED

    # Width the score lines are right-aligned to
    SCORE_WIDTH = 70

    # ==================== DEBUG SETTINGS ====================
    # Print the rule behind every computer move
    VERBOSE = False

    # Seed for the computer's random moves (None = different every run)
    RANDOM_SEED = None
