import os
import sys
from typing import Optional

import yaml
from loguru import logger

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


def load_config(path: Optional[str] = None) -> dict:
    config_path = path or os.environ.get("BROWSER_RPS_CONFIG") or DEFAULT_CONFIG_PATH
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def reveal_delays(cfg: dict):
    """(choice_delay, result_delay) in seconds."""
    reveal_cfg = cfg.get("reveal", {}) or {}
    choice_ms = max(0, int(reveal_cfg.get("choice_delay_ms", 600)))
    result_ms = max(0, int(reveal_cfg.get("result_delay_ms", 300)))
    return choice_ms / 1000.0, result_ms / 1000.0


def game_seed(cfg: dict) -> Optional[int]:
    seed = (cfg.get("game", {}) or {}).get("seed")
    return None if seed is None else int(seed)


def setup_logging(cfg: dict):
    level = str((cfg.get("logging", {}) or {}).get("level", "INFO")).upper()
    logger.remove()
    logger.add(sys.stderr, level=level)
