from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from game import (
    Coord,
    Grid,
    GridConfig,
    InvalidConfig,
    celebration_ms,
    default_config,
    flip,
    flip_targets,
    game_status,
    generate,
    has_won,
    max_dim,
    parse_coord,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG = default_config()
CELEBRATION_MS = celebration_ms()
MAX_DIM = max_dim()

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


def grid_to_json(g: Grid) -> Dict[str, Any]:
    return {
        "grid": g.to_lists(),
        "won": has_won(g),
        "status": game_status(g),
    }


def _bad_request(error: str) -> Tuple[Any, int]:
    logger.warning("rejected %s %s: %s", request.method, request.path, error)
    return jsonify({"ok": False, "error": error}), 400


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _config_from_body(body: Dict[str, Any]) -> GridConfig:
    try:
        nrows = body.get("nrows", DEFAULT_CONFIG.nrows)
        ncols = body.get("ncols", DEFAULT_CONFIG.ncols)
        chance = body.get("chanceLightStartsOn", DEFAULT_CONFIG.chance_light_starts_on)
        if isinstance(nrows, str):
            nrows = int(nrows)
        if isinstance(ncols, str):
            ncols = int(ncols)
        if isinstance(chance, str):
            chance = float(chance)
    except ValueError as e:
        raise InvalidConfig(f"bad config: {e}") from None
    config = GridConfig(nrows=nrows, ncols=ncols, chance_light_starts_on=chance).validate()
    if config.nrows > MAX_DIM or config.ncols > MAX_DIM:
        raise InvalidConfig(f"grid may be at most {MAX_DIM}x{MAX_DIM}, got {config.nrows}x{config.ncols}")
    return config


def _coord_from_body(body: Dict[str, Any]) -> Coord:
    raw = body.get("coord")
    if isinstance(raw, str):
        return parse_coord(raw)
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        r, c = raw
    elif "row" in body and "col" in body:
        r, c = body["row"], body["col"]
    else:
        raise ValueError("coord required")
    if isinstance(r, bool) or isinstance(c, bool) or not isinstance(r, int) or not isinstance(c, int):
        raise ValueError(f"coord must be two integers, got {[r, c]!r}")
    return r, c


def _grid_from_body(body: Dict[str, Any]) -> Grid:
    if "grid" not in body:
        raise ValueError("grid required")
    g = Grid.from_rows(body["grid"])
    if g.nrows > MAX_DIM or g.ncols > MAX_DIM:
        raise ValueError(f"grid may be at most {MAX_DIM}x{MAX_DIM}, got {g.nrows}x{g.ncols}")
    return g


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

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "config": {
            "nrows": DEFAULT_CONFIG.nrows,
            "ncols": DEFAULT_CONFIG.ncols,
            "chanceLightStartsOn": DEFAULT_CONFIG.chance_light_starts_on,
        },
        "celebrationMs": CELEBRATION_MS,
    })


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    seed: Optional[int] = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return _bad_request("seed must be an integer")
    try:
        config = _config_from_body(body)
    except InvalidConfig as e:
        return _bad_request(str(e))
    g = generate(config, seed=seed)
    logger.info("new %dx%d game (chance=%.2f, seed=%s, lit=%d)",
                config.nrows, config.ncols, config.chance_light_starts_on, seed, g.lit_count())
    out = {"ok": True, "celebrationMs": CELEBRATION_MS}
    out.update(grid_to_json(g))
    return jsonify(out)


@app.post("/api/flip")
def api_flip() -> Any:
    body = _body()
    try:
        g = _grid_from_body(body)
        r, c = _coord_from_body(body)
    except ValueError as e:
        return _bad_request(str(e))
    if not g.in_bounds(r, c):
        return _bad_request(f"cell ({r}, {c}) is outside the {g.nrows}x{g.ncols} grid")
    next_grid = flip(g, r, c)
    if has_won(next_grid):
        logger.info("game won on a %dx%d grid", g.nrows, g.ncols)
    out: Dict[str, Any] = {"ok": True, "flipped": [[tr, tc] for (tr, tc) in flip_targets(g, (r, c))]}
    out.update(grid_to_json(next_grid))
    return jsonify(out)


@app.post("/api/won")
def api_won() -> Any:
    body = _body()
    try:
        g = _grid_from_body(body)
    except ValueError as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "won": has_won(g), "status": game_status(g), "lit": g.lit_count()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
