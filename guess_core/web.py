from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

from .config import default_bound, env_flag, log_level
from .errors import GameAlreadyWon, GuessError, RandomnessUnavailable
from .rng import RandomProvider, SecureRandomProvider
from .state import CORRECT, HIGH, LOW, GameState, parse_number

DEFAULT_BOUND = default_bound()

# Static assets ship inside the package so installed copies serve them too
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

FEEDBACK = {LOW: "Too Low", HIGH: "Too High", CORRECT: "Correct!"}

STATUS_BY_KIND = {
    GameAlreadyWon.kind: 409,
    RandomnessUnavailable.kind: 503,
}

# One game per running host; created on first use so a failed draw can be retried.
_game: Optional[GameState] = None
_lock = threading.Lock()


def random_provider() -> RandomProvider:
    return SecureRandomProvider()


def _current_game() -> GameState:
    global _game
    if _game is None:
        _game = GameState(DEFAULT_BOUND, rng=random_provider())
        app.logger.info("game initialized with range 1..%d", DEFAULT_BOUND)
    return _game


def _json_body() -> Dict[str, Any]:
    """Request body as a dict; bodies that are not JSON objects count as empty."""
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _game_to_json(g: GameState) -> Dict[str, Any]:
    out: Dict[str, Any] = {"ok": True}
    out.update(g.snapshot())
    return out


@app.errorhandler(GuessError)
def handle_guess_error(e: GuessError) -> Any:
    body = e.to_json()
    if isinstance(e, RandomnessUnavailable):
        body["retryable"] = True
        app.logger.warning("randomness unavailable: %s", e.message)
    return jsonify(body), STATUS_BY_KIND.get(e.kind, 400)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.get("/api/state")
def api_state() -> Any:
    with _lock:
        return jsonify(_game_to_json(_current_game()))


@app.post("/api/guess")
def api_guess() -> Any:
    value = parse_number(_json_body().get("value"))
    with _lock:
        g = _current_game()
        res = g.guess(value)
        out = _game_to_json(g)
    out.update(res.to_json())
    out["message"] = FEEDBACK[res.result]
    return jsonify(out)


@app.post("/api/reset")
def api_reset() -> Any:
    global _game
    bound = parse_number(_json_body().get("bound"))
    with _lock:
        if _game is None:
            _game = GameState(DEFAULT_BOUND if bound is None else bound, rng=random_provider())
        else:
            _game.reset(bound)
        out = _game_to_json(_game)
    if bound is None:
        out["message"] = "Game restarted. New secret set."
    else:
        out["message"] = f"Range set to 1..{out['bound']}. New secret generated."
    return jsonify(out)


def main() -> int:
    logging.basicConfig(level=log_level())
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    port = int(os.getenv("PORT", "5000"))
    app.run(host="127.0.0.1", port=port, debug=debug)
    return 0


# Entrypoint for "python -m guess_core.web"
if __name__ == "__main__":
    raise SystemExit(main())
