from enum import Enum
from typing import Tuple


class InvalidChoice(ValueError):
    """Raised when a name outside rock/paper/scissors reaches the core."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid choice: {value!r} (expected one of rock, paper, scissors)")


class Choice(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return EMOJI[self.value]


class Outcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


EMOJI = {"rock": "🗿", "paper": "📄", "scissors": "✂️"}
WINMAP = {"rock": "scissors", "paper": "rock", "scissors": "paper"}

MESSAGES = {
    "win": "You Win! 🎉",
    "lose": "You Lose! 😢",
    "tie": "It's a Tie! 🤝",
}
TIE_EXPLANATION = "Both players chose the same!"
EXPLANATIONS = {
    ("rock", "scissors"): "Rock crushes Scissors",
    ("paper", "rock"): "Paper covers Rock",
    ("scissors", "paper"): "Scissors cuts Paper",
}


def list_choices() -> Tuple[Choice, ...]:
    return tuple(Choice)


def get_choice(name) -> Choice:
    """Resolve a choice name (case-insensitive) or raise InvalidChoice."""
    if isinstance(name, Choice):
        return name
    if not isinstance(name, str):
        raise InvalidChoice(name)
    try:
        return Choice(name.strip().lower())
    except ValueError:
        raise InvalidChoice(name) from None


def beats(a, b) -> bool:
    return WINMAP[get_choice(a).value] == get_choice(b).value


def determine_outcome(player, computer) -> Outcome:
    """
    Return the outcome from the player's side: win | lose | tie.
    """
    player, computer = get_choice(player), get_choice(computer)
    if player == computer:
        return Outcome.TIE
    return Outcome.WIN if beats(player, computer) else Outcome.LOSE


def explain(player, computer, outcome) -> str:
    outcome = Outcome(outcome)
    if outcome is Outcome.TIE:
        return TIE_EXPLANATION
    player, computer = get_choice(player), get_choice(computer)
    winner, loser = (player, computer) if outcome is Outcome.WIN else (computer, player)
    return EXPLANATIONS.get((winner.value, loser.value), "")  # "" is unreachable with the fixed rule set


def message_for(outcome) -> str:
    return MESSAGES[Outcome(outcome).value]
