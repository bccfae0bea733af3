import csv
import os
import time
from typing import Optional

from browser_rps.session import RoundResult

HEADER = ["ts", "player", "computer", "result"]


def ensure_outputs_dir(out_dir_name: str, root: Optional[str] = None) -> str:
    # Relative paths resolve against the project root ( .../src/browser_rps/round_log.py )
    if root is None:
        root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    out_dir = os.path.join(root, out_dir_name)
    os.makedirs(out_dir, exist_ok=True)
    return out_dir


def get_csv_path(out_dir: str) -> str:
    csv_path = os.path.join(out_dir, "round_log.csv")
    if not os.path.exists(csv_path):
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(HEADER)
    return csv_path


def log_round(csv_path: str, result: RoundResult):
    with open(csv_path, "a", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow([f"{time.time():.3f}", result.player_choice.value,
                    result.computer_choice.value, result.outcome.value])


def make_round_logger(cfg: dict, root: Optional[str] = None):
    """Return an `on_round` hook writing to round_log.csv, or None when disabled."""
    log_cfg = cfg.get("logging", {}) or {}
    if not bool(log_cfg.get("save_round_log", False)):
        return None
    out_dir = ensure_outputs_dir(str(log_cfg.get("out_dir", "outputs")), root)
    csv_path = get_csv_path(out_dir)

    def _hook(result: RoundResult):
        log_round(csv_path, result)

    return _hook
