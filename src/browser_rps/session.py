import threading
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from browser_rps.chooser import RandomChooser
from browser_rps.game_logic import (
    Choice,
    Outcome,
    determine_outcome,
    explain,
    get_choice,
    list_choices,
    message_for,
)
from browser_rps.scoreboard import ScoreState, ScoreTracker

# States
IDLE, RESOLVING = "idle", "resolving"


@dataclass(frozen=True)
class RoundResult:
    player_choice: Choice
    computer_choice: Choice
    outcome: Outcome
    explanation: str

    @property
    def message(self) -> str:
        return message_for(self.outcome)

    def to_dict(self) -> dict:
        return {
            "player": _choice_dict(self.player_choice),
            "computer": _choice_dict(self.computer_choice),
            "outcome": self.outcome.value,
            "message": self.message,
            "explanation": self.explanation,
        }


def _choice_dict(choice: Choice) -> dict:
    return {"name": choice.value, "label": choice.label, "emoji": choice.emoji}


class GameSession:
    """
    One player's game against the computer.

    A round moves the session from IDLE to RESOLVING; the presentation layer
    calls `acknowledge_round` once the result has been shown. Rounds started
    while RESOLVING are ignored so rapid clicks or key repeats cannot
    double-submit.
    """

    def __init__(self, chooser: Optional[RandomChooser] = None,
                 on_round: Optional[Callable[[RoundResult], None]] = None):
        self.chooser = chooser or RandomChooser()
        self.on_round = on_round
        self.scores = ScoreTracker()
        self.phase = IDLE
        self.last_result: Optional[RoundResult] = None
        self.rounds_played = 0
        # web requests for one browser may arrive on different worker threads
        self._lock = threading.RLock()

    @property
    def in_progress(self) -> bool:
        return self.phase == RESOLVING

    def list_choices(self):
        return list_choices()

    def start_round(self, choice_name) -> Optional[RoundResult]:
        player = get_choice(choice_name)
        with self._lock:
            if self.in_progress:
                logger.debug(f"Ignoring '{player.value}': round still in progress")
                return None

            computer = self.chooser.pick_random()
            outcome = determine_outcome(player, computer)
            result = RoundResult(player, computer, outcome, explain(player, computer, outcome))

            self.scores.apply_outcome(outcome)
            self.rounds_played += 1
            self.last_result = result
            self.phase = RESOLVING
            score = self.scores.snapshot()
            logger.info(
                f"Round {self.rounds_played}: {player.value} vs {computer.value} -> {outcome.value} "
                f"({score.player_score}-{score.computer_score})"
            )

        if self.on_round is not None:
            try:
                self.on_round(result)
            except Exception:
                # the round stands even if its audit record could not be written
                logger.exception("on_round hook failed")
        return result

    def acknowledge_round(self):
        with self._lock:
            if not self.in_progress:
                return
            self.phase = IDLE
            self.last_result = None

    def reset_game(self) -> ScoreState:
        with self._lock:
            self.scores.reset()
            self.phase = IDLE
            self.last_result = None
            self.rounds_played = 0
            logger.info("Game reset")
            return self.scores.snapshot()

    def get_score(self) -> ScoreState:
        with self._lock:
            return self.scores.snapshot()
