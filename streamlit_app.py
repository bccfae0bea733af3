# ──────────────────────────────────────────────────────────────────────────────
# Bootstrap: path + page config FIRST (must be the first Streamlit command)
# ──────────────────────────────────────────────────────────────────────────────
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Rock Paper Scissors",
    layout="centered",
    page_icon="✂️",
)

# ──────────────────────────────────────────────────────────────────────────────
# Std libs / local package
# ──────────────────────────────────────────────────────────────────────────────
import time  # noqa: E402

from browser_rps.chooser import RandomChooser, seed_sequence  # noqa: E402
from browser_rps.config import game_seed, load_config, reveal_delays  # noqa: E402
from browser_rps.round_log import make_round_logger  # noqa: E402
from browser_rps.session import GameSession  # noqa: E402


def local_css(file_name: Path):
    if file_name.exists():
        st.markdown(f"<style>{file_name.read_text(encoding='utf-8')}</style>", unsafe_allow_html=True)


local_css(SRC / "browser_rps" / "web" / "static" / "styles.css")

CFG = load_config()
choice_delay, result_delay = reveal_delays(CFG)

# ──────────────────────────────────────────────────────────────────────────────
# App state: one GameSession per browser tab
# ──────────────────────────────────────────────────────────────────────────────
@st.cache_resource
def get_seed_source(seed):
    # shared by all tabs, so each tab takes the next seed like the web server does
    return seed_sequence(seed)


def next_tab_seed():
    seeds = get_seed_source(game_seed(CFG))
    return next(seeds) if seeds is not None else None


if "game" not in st.session_state:
    st.session_state.game = GameSession(
        chooser=RandomChooser(seed=next_tab_seed()),
        on_round=make_round_logger(CFG),
    )
game: GameSession = st.session_state.game

st.markdown("## Rock Paper Scissors")

# ──────────────────────────────────────────────────────────────────────────────
# Scoreboard
# ──────────────────────────────────────────────────────────────────────────────
score_box = st.empty()


def draw_scoreboard():
    score = game.get_score()
    c1, c2 = score_box.columns(2)
    c1.metric("You", score.player_score)
    c2.metric("Computer", score.computer_score)


draw_scoreboard()

# ──────────────────────────────────────────────────────────────────────────────
# Choices (disabled while a round is being shown)
# ──────────────────────────────────────────────────────────────────────────────
picked = None
cols = st.columns(len(game.list_choices()))
for col, choice in zip(cols, game.list_choices()):
    if col.button(f"{choice.emoji} {choice.label}", key=f"choice-{choice.value}",
                  use_container_width=True, disabled=game.in_progress):
        picked = choice.value

choices_box = st.empty()
result_box = st.empty()

if picked is not None:
    result = game.start_round(picked)
    if result is not None:
        # Staged reveal; Streamlit reruns the script, so plain sleeps stand in for timers
        time.sleep(choice_delay)
        choices_box.markdown(
            f"**You:** {result.player_choice.emoji} {result.player_choice.label} "
            f"&nbsp; vs &nbsp; **Computer:** {result.computer_choice.emoji} {result.computer_choice.label}"
        )
        time.sleep(result_delay)
        result_box.markdown(f"### {result.message}\n{result.explanation}")
        draw_scoreboard()
elif game.last_result is not None:
    result = game.last_result
    choices_box.markdown(
        f"**You:** {result.player_choice.emoji} {result.player_choice.label} "
        f"&nbsp; vs &nbsp; **Computer:** {result.computer_choice.emoji} {result.computer_choice.label}"
    )
    result_box.markdown(f"### {result.message}\n{result.explanation}")

c1, c2 = st.columns(2)
if c1.button("Play Again", use_container_width=True, disabled=not game.in_progress):
    game.acknowledge_round()
    st.rerun()
if c2.button("Reset Game", use_container_width=True):
    game.reset_game()
    st.rerun()

# ──────────────────────────────────────────────────────────────────────────────
# Sidebar tips
# ──────────────────────────────────────────────────────────────────────────────
with st.sidebar.expander("📘 Tips", True):
    st.markdown(
        """
        ### How to Play
        - Pick Rock, Paper or Scissors.
        - The computer picks at random.
        - Rock crushes Scissors, Scissors cuts Paper, Paper covers Rock.
        - Press **Play Again** for the next round.
        """
    )
