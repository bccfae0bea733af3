import itertools
import random

from browser_rps.game_logic import Choice, list_choices

MOVES = list_choices()


class RandomChooser:
    """
    Uniform computer opponent. The random source is injected so tests (and
    separate sessions) never share the global `random` state.
    """
    def __init__(self, rng=None, seed=None):
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

    def pick_random(self) -> Choice:
        return self.rng.choice(MOVES)


def seed_sequence(seed=None):
    """
    Seeds for successive sessions: seed, seed + 1, ... so each session plays
    differently but a seeded run replays. None when unseeded.
    """
    return None if seed is None else itertools.count(seed)
