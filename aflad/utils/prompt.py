"""Terminal prompts for player setup and card selection."""

from aflad.game.engine import MIN_PLAYERS, default_player_name
from aflad.models.player import Player

from .logger import GameDisplay


def read_int(prompt: str) -> int | None:
    """Read an integer from the terminal, None if the input is not a number."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def ask_player_count(default: int = MIN_PLAYERS, maximum: int | None = None) -> int:
    """Ask for the number of players.

    Blank, non-numeric or too-small answers fall back to ``default``
    (itself never below the minimum player count). Answers above
    ``maximum`` are asked again.
    """
    default = max(default, MIN_PLAYERS)
    if maximum is not None:
        default = min(default, maximum)
    while True:
        count = read_int(f"\nEnter number of players (default {default}): ")
        if count is None or count < MIN_PLAYERS:
            return default
        if maximum is None or count <= maximum:
            return count
        print(f"At most {maximum} players can play. Please try again.")


def ask_player_names(count: int) -> list[str]:
    """Ask each player for a name, blank answers get a default name."""
    names = []
    for position in range(1, count + 1):
        name = input(f"Enter name for Player {position}: ").strip()
        names.append(name or default_player_name(position))
    return names


class TerminalCardSelector:
    """Card selection callback that shows the hand and asks for a card.

    Re-prompts until the answer is a valid 1-based hand position and
    returns the matching 0-based index.
    """

    def __init__(self, display: GameDisplay | None = None):
        self.display = display or GameDisplay()

    def __call__(self, player: Player, available: range) -> int:
        self.display.print_hand(player)
        while True:
            choice = read_int(
                f"{player.name}, select a card to play (1-{len(available)}): "
            )
            if choice is not None and choice - 1 in available:
                return choice - 1
            print("Invalid selection. Please try again.")
