from dataclasses import dataclass

from browser_rps.game_logic import Outcome


@dataclass(frozen=True)
class ScoreState:
    player_score: int = 0
    computer_score: int = 0

    def to_dict(self) -> dict:
        return {"player_score": self.player_score, "computer_score": self.computer_score}


class ScoreTracker:
    """Win counters for both sides; ties are not counted."""

    def __init__(self):
        self.player_score = 0
        self.computer_score = 0

    def apply_outcome(self, outcome):
        outcome = Outcome(outcome)
        if outcome is Outcome.WIN:
            self.player_score += 1
        elif outcome is Outcome.LOSE:
            self.computer_score += 1

    def reset(self):
        self.player_score = 0
        self.computer_score = 0

    def snapshot(self) -> ScoreState:
        return ScoreState(self.player_score, self.computer_score)
