import random
from collections import Counter

from browser_rps.chooser import RandomChooser, seed_sequence
from browser_rps.game_logic import Choice


def test_pick_random_is_uniform():
    chooser = RandomChooser(seed=1234)
    n = 10_000
    counts = Counter(chooser.pick_random() for _ in range(n))
    assert set(counts) == set(Choice)
    for c in Choice:
        assert abs(counts[c] / n - 1 / 3) < 0.03


def test_seeded_choosers_repeat():
    a = RandomChooser(seed=7)
    b = RandomChooser(seed=7)
    assert [a.pick_random() for _ in range(20)] == [b.pick_random() for _ in range(20)]


def test_injected_rng_is_used():
    class FirstOnly:
        def choice(self, seq):
            return seq[0]

    assert RandomChooser(rng=FirstOnly()).pick_random() is Choice.ROCK


def test_global_random_state_untouched():
    random.seed(99)
    expected = random.random()
    random.seed(99)
    RandomChooser(seed=1).pick_random()
    RandomChooser().pick_random()
    assert random.random() == expected


def test_seed_sequence():
    assert seed_sequence(None) is None
    seeds = seed_sequence(5)
    assert [next(seeds) for _ in range(3)] == [5, 6, 7]
    a, b = RandomChooser(seed=5), RandomChooser(seed=6)
    assert [a.pick_random() for _ in range(20)] != [b.pick_random() for _ in range(20)]
