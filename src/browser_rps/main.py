from loguru import logger

from browser_rps.chooser import RandomChooser
from browser_rps.config import game_seed, load_config, reveal_delays, setup_logging
from browser_rps.game_logic import InvalidChoice
from browser_rps.reveal import RevealSchedule
from browser_rps.round_log import make_round_logger
from browser_rps.session import GameSession, RoundResult

KEYS = {"r": "rock", "p": "paper", "s": "scissors"}
HELP = "Keys: r (Rock), p (Paper), s (Scissors), Enter (next round), x (reset), q (quit)"


def format_score(session: GameSession) -> str:
    score = session.get_score()
    return f"You {score.player_score} : {score.computer_score} Computer"


def reveal(result: RoundResult, session: GameSession, choice_delay: float, result_delay: float,
           out=print) -> RevealSchedule:
    def show_choices():
        out(f"  You: {result.player_choice.emoji} {result.player_choice.label}   "
            f"Computer: {result.computer_choice.emoji} {result.computer_choice.label}")

    def show_result():
        out(f"  {result.message}  {result.explanation}")
        out(f"  {format_score(session)}")

    return RevealSchedule(show_choices, show_result, choice_delay, result_delay).start()


def handle_key(session: GameSession, key: str, choice_delay: float, result_delay: float, out=print):
    """Process one line of input. Returns False when the player quits."""
    key = key.strip().lower()
    if key == "q":
        return False
    if key == "x":
        session.reset_game()
        out(f"Game reset. {format_score(session)}")
        return True
    if key == "":
        session.acknowledge_round()
        return True
    if key in KEYS or key in KEYS.values():
        try:
            result = session.start_round(KEYS.get(key, key))
        except InvalidChoice as e:
            out(str(e))
            return True
        if result is None:
            out("Round in progress; press Enter for the next round.")
        else:
            reveal(result, session, choice_delay, result_delay, out).wait()
        return True
    out(HELP)
    return True


def main():
    cfg = load_config()
    setup_logging(cfg)
    choice_delay, result_delay = reveal_delays(cfg)
    session = GameSession(chooser=RandomChooser(seed=game_seed(cfg)), on_round=make_round_logger(cfg))

    print("Rock Paper Scissors")
    print(HELP)
    try:
        while True:
            try:
                key = input("> ")
            except EOFError:
                break
            if not handle_key(session, key, choice_delay, result_delay):
                break
    except KeyboardInterrupt:
        pass
    logger.info(f"Final score: {format_score(session)}")


if __name__ == "__main__":
    main()
