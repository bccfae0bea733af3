import csv

from browser_rps.config import game_seed, load_config, reveal_delays
from browser_rps.game_logic import Choice, Outcome
from browser_rps.round_log import HEADER, make_round_logger
from browser_rps.session import RoundResult


def test_default_config():
    cfg = load_config()
    assert reveal_delays(cfg) == (0.6, 0.3)
    assert game_seed(cfg) is None
    assert cfg["web"]["cookie_name"] == "sid"
    assert cfg["logging"]["save_round_log"] is False


def test_missing_keys_fall_back():
    assert reveal_delays({}) == (0.6, 0.3)
    assert game_seed({}) is None
    assert reveal_delays({"reveal": {"choice_delay_ms": -5, "result_delay_ms": 1000}}) == (0.0, 1.0)


def test_load_config_from_path(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("game:\n  seed: 3\nreveal:\n  choice_delay_ms: 0\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert game_seed(cfg) == 3
    assert reveal_delays(cfg) == (0.0, 0.3)


def test_round_log_disabled():
    assert make_round_logger({"logging": {"save_round_log": False}}) is None
    assert make_round_logger({}) is None


def test_round_log_writes_rows(tmp_path):
    hook = make_round_logger({"logging": {"save_round_log": True, "out_dir": "out"}}, root=str(tmp_path))
    hook(RoundResult(Choice.ROCK, Choice.SCISSORS, Outcome.WIN, "Rock crushes Scissors"))
    hook(RoundResult(Choice.PAPER, Choice.PAPER, Outcome.TIE, "Both players chose the same!"))
    with open(tmp_path / "out" / "round_log.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == HEADER
    assert [r[1:] for r in rows[1:]] == [["rock", "scissors", "win"], ["paper", "paper", "tie"]]
