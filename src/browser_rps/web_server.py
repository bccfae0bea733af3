import os
import threading
import uuid
from collections import OrderedDict
from typing import Callable, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from pydantic import BaseModel

from browser_rps.chooser import RandomChooser, seed_sequence
from browser_rps.config import game_seed, load_config, reveal_delays, setup_logging
from browser_rps.game_logic import InvalidChoice, list_choices
from browser_rps.round_log import make_round_logger
from browser_rps.scoreboard import ScoreState
from browser_rps.session import GameSession


# ---------------- Session storage ----------------
class SessionStore:
    """
    Maps browser session ids to their own GameSession. Holds at most
    `max_sessions`; the least recently used session is dropped first.
    """

    def __init__(self, factory: Callable[[], GameSession], max_sessions: int = 1000):
        self._factory = factory
        self.max_sessions = max(1, int(max_sessions))
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._sessions)

    def __contains__(self, sid):
        return sid in self._sessions

    def get(self, sid: Optional[str]) -> Optional[GameSession]:
        with self._lock:
            if not sid or sid not in self._sessions:
                return None
            self._sessions.move_to_end(sid)
            return self._sessions[sid]

    def get_or_create(self, sid: Optional[str]) -> Tuple[str, GameSession, bool]:
        with self._lock:
            if sid and sid in self._sessions:
                self._sessions.move_to_end(sid)
                return sid, self._sessions[sid], False
            sid = uuid.uuid4().hex
            self._sessions[sid] = self._factory()
            while len(self._sessions) > self.max_sessions:
                old_sid, _ = self._sessions.popitem(last=False)
                logger.debug(f"Evicted game session {old_sid[:8]}")
            logger.info(f"New game session {sid[:8]}")
            return sid, self._sessions[sid], True


# ---------------- Request/Response models ----------------
class RoundRequest(BaseModel):
    choice: str


class ChoiceOut(BaseModel):
    name: str
    label: str
    emoji: str


class ScoreOut(BaseModel):
    player_score: int
    computer_score: int


class RoundOut(BaseModel):
    player: ChoiceOut
    computer: ChoiceOut
    outcome: str
    message: str
    explanation: str


class RoundResponse(BaseModel):
    accepted: bool
    round: Optional[RoundOut] = None
    score: ScoreOut


class ScoreResponse(BaseModel):
    score: ScoreOut


# ---------------- App init ----------------
_static_dir = os.path.join(os.path.dirname(__file__), "web", "static")


def create_app(cfg: Optional[dict] = None) -> FastAPI:
    cfg = load_config() if cfg is None else cfg
    web_cfg = cfg.get("web", {}) or {}
    cookie_name = str(web_cfg.get("cookie_name", "sid"))
    choice_delay, result_delay = reveal_delays(cfg)
    seed = game_seed(cfg)
    on_round = make_round_logger(cfg)
    seeds = seed_sequence(seed)

    def _new_session() -> GameSession:
        chooser = RandomChooser(seed=next(seeds)) if seeds is not None else RandomChooser()
        return GameSession(chooser=chooser, on_round=on_round)

    app = FastAPI(title="Browser RPS")
    app.state.sessions = SessionStore(_new_session, int(web_cfg.get("max_sessions", 1000)))

    def _session(req: Request, resp: Response) -> GameSession:
        sid, sess, created = app.state.sessions.get_or_create(req.cookies.get(cookie_name))
        if created:
            resp.set_cookie(cookie_name, sid, httponly=True, samesite="lax")
        return sess

    @app.get("/api/config")
    def api_config():
        return {
            "choice_delay_ms": int(round(choice_delay * 1000)),
            "result_delay_ms": int(round(result_delay * 1000)),
            "keys": {"r": "rock", "p": "paper", "s": "scissors"},
        }

    @app.get("/api/choices", response_model=List[ChoiceOut])
    def api_choices():
        return [{"name": c.value, "label": c.label, "emoji": c.emoji} for c in list_choices()]

    @app.get("/api/score", response_model=ScoreResponse)
    def api_score(req: Request):
        # read-only: a browser without a game yet sees a fresh board
        sess = app.state.sessions.get(req.cookies.get(cookie_name))
        score = sess.get_score() if sess is not None else ScoreState()
        return {"score": score.to_dict()}

    @app.post("/api/round", response_model=RoundResponse)
    def api_round(req: Request, resp: Response, rr: RoundRequest):
        sess = _session(req, resp)
        try:
            result = sess.start_round(rr.choice)
        except InvalidChoice as e:
            logger.warning(str(e))
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "accepted": result is not None,
            "round": result.to_dict() if result is not None else None,
            "score": sess.get_score().to_dict(),
        }

    @app.post("/api/acknowledge", response_model=ScoreResponse)
    def api_acknowledge(req: Request, resp: Response):
        sess = _session(req, resp)
        sess.acknowledge_round()
        return {"score": sess.get_score().to_dict()}

    @app.post("/api/reset", response_model=ScoreResponse)
    def api_reset(req: Request, resp: Response):
        return {"score": _session(req, resp).reset_game().to_dict()}

    # Simple health check
    @app.get("/health")
    def health():
        return {"ok": True}

    # Mount static last, and serve index at root
    app.mount("/static", StaticFiles(directory=_static_dir), name="static")

    @app.get("/")
    def index_page():
        return FileResponse(os.path.join(_static_dir, "index.html"))

    return app


def serve():
    import uvicorn

    cfg = load_config()
    setup_logging(cfg)
    web_cfg = cfg.get("web", {}) or {}
    host = str(web_cfg.get("host", "127.0.0.1"))
    port = int(web_cfg.get("port", 8000))
    logger.info(f"Starting Browser RPS on http://{host}:{port}")
    uvicorn.run("browser_rps.web_server:create_app", host=host, port=port, factory=True)


if __name__ == "__main__":
    serve()
