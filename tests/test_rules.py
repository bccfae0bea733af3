import itertools

import pytest

from browser_rps.game_logic import (
    Choice,
    InvalidChoice,
    Outcome,
    WINMAP,
    beats,
    determine_outcome,
    explain,
    get_choice,
    list_choices,
    message_for,
)

NAMES = ["rock", "paper", "scissors"]


def test_determine_outcome_rules():
    assert determine_outcome("rock", "scissors") == "win"
    assert determine_outcome("rock", "paper") == "lose"
    assert determine_outcome("rock", "rock") == "tie"
    assert determine_outcome("scissors", "paper") == Outcome.WIN
    assert determine_outcome("paper", "rock") == Outcome.WIN


def test_all_nine_combinations():
    outcomes = {}
    for p, c in itertools.product(NAMES, NAMES):
        outcomes[(p, c)] = determine_outcome(p, c)
        if p == c:
            assert outcomes[(p, c)] is Outcome.TIE
        elif WINMAP[p] == c:
            assert outcomes[(p, c)] is Outcome.WIN
        else:
            assert outcomes[(p, c)] is Outcome.LOSE
    counts = [list(outcomes.values()).count(o) for o in Outcome]
    assert counts == [3, 3, 3]


def test_outcomes_are_antisymmetric():
    for a, b in itertools.product(NAMES, NAMES):
        ab, ba = determine_outcome(a, b), determine_outcome(b, a)
        if a == b:
            assert ab is ba is Outcome.TIE
        else:
            assert {ab, ba} == {Outcome.WIN, Outcome.LOSE}


def test_rule_table_is_a_three_cycle():
    assert set(WINMAP) == set(NAMES)
    assert all(k != v for k, v in WINMAP.items())
    seen, cur = [], "rock"
    for _ in range(3):
        seen.append(cur)
        cur = WINMAP[cur]
    assert cur == "rock"
    assert sorted(seen) == sorted(NAMES)
    assert beats("rock", "scissors")
    assert not beats("scissors", "rock")


def test_list_choices_order_and_display_data():
    choices = list_choices()
    assert [c.value for c in choices] == NAMES
    assert [c.label for c in choices] == ["Rock", "Paper", "Scissors"]
    assert all(c.emoji for c in choices)


def test_get_choice_normalizes_names():
    assert get_choice("Rock") is Choice.ROCK
    assert get_choice(" scissors ") is Choice.SCISSORS
    assert get_choice(Choice.PAPER) is Choice.PAPER


@pytest.mark.parametrize("bad", ["lizard", "", None, 3, "rocks"])
def test_invalid_choice_raises(bad):
    with pytest.raises(InvalidChoice) as exc:
        get_choice(bad)
    assert exc.value.value == bad


def test_invalid_choice_in_outcome():
    with pytest.raises(InvalidChoice):
        determine_outcome("invalid", "rock")
    with pytest.raises(ValueError):
        determine_outcome("rock", "spock")


def test_explanations():
    assert explain("rock", "scissors", "win") == "Rock crushes Scissors"
    assert explain("scissors", "rock", "lose") == "Rock crushes Scissors"
    assert explain("paper", "rock", "win") == "Paper covers Rock"
    assert explain("paper", "scissors", "lose") == "Scissors cuts Paper"
    assert explain("paper", "paper", "tie") == "Both players chose the same!"


def test_explanation_never_empty_for_real_rounds():
    for p, c in itertools.product(NAMES, NAMES):
        assert explain(p, c, determine_outcome(p, c))


def test_messages():
    assert message_for("win") == "You Win! 🎉"
    assert message_for(Outcome.LOSE) == "You Lose! 😢"
    assert message_for("tie") == "It's a Tie! 🤝"
