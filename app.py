from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

try:
    from .game import (  # type: ignore
        COLORS,
        BLANK_COLOR,
        Grid,
        InvalidDimensions,
        OutOfBounds,
        create_grid,
        random_fill,
        play_move,
        legal_groups,
        is_won,
        is_lost,
        screen_to_point,
    )
except ImportError:
    from game import (  # type: ignore
        COLORS,
        BLANK_COLOR,
        Grid,
        InvalidDimensions,
        OutOfBounds,
        create_grid,
        random_fill,
        play_move,
        legal_groups,
        is_won,
        is_lost,
        screen_to_point,
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("ignoring non-integer %s=%r", name, raw)
        return default


def _env_log_level(name: str, default: str = "WARNING") -> int:
    raw = (os.getenv(name) or default).strip().upper()
    level = getattr(logging, raw, None)
    if not isinstance(level, int):
        logging.getLogger(__name__).warning("ignoring unknown log level %s=%r", name, raw)
        return getattr(logging, default)
    return level


DEFAULT_WIDTH = _env_int("SAMEGAME_WIDTH", 20)
DEFAULT_HEIGHT = _env_int("SAMEGAME_HEIGHT", 10)
DEFAULT_COLORS = _env_int("SAMEGAME_COLORS", len(COLORS))
DEFAULT_CELL_SIZE = _env_int("SAMEGAME_CELL_SIZE", 20)
MAX_WIDTH = _env_int("SAMEGAME_MAX_WIDTH", 100)
MAX_HEIGHT = _env_int("SAMEGAME_MAX_HEIGHT", 100)

logging.basicConfig(level=_env_log_level("SAMEGAME_LOG_LEVEL"))
log = logging.getLogger(__name__)

app = Flask(__name__)


class BadPayload(Exception):
    """Malformed JSON body; reported to the client as a 400."""


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _int_field(value: Any, what: str) -> int:
    # JSON booleans are ints in Python; reject them along with floats and strings.
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadPayload(f"{what} must be an integer, got {value!r}")
    return value


def _check_size(w: int, h: int) -> None:
    if w > MAX_WIDTH or h > MAX_HEIGHT:
        raise BadPayload(f"board {w}x{h} exceeds the {MAX_WIDTH}x{MAX_HEIGHT} limit")


def _cell_field(value: Any) -> Optional[int]:
    if value is None:
        return None
    cell = _int_field(value, "cell")
    if not 0 <= cell < len(COLORS):
        raise BadPayload(f"cell {cell} is not a color id in [0, {len(COLORS)})")
    return cell


def grid_to_json(g: Grid) -> Dict[str, Any]:
    return {"width": int(g.width), "height": int(g.height), "grid": g.to_rows()}


def json_to_grid(obj: Any) -> Grid:
    if not isinstance(obj, dict):
        raise BadPayload("state required")
    try:
        w = _int_field(obj["width"], "width")
        h = _int_field(obj["height"], "height")
        _check_size(w, h)
        rows = [[_cell_field(c) for c in row] for row in obj["grid"]]
    except (KeyError, TypeError) as e:
        raise BadPayload(f"bad state: {e}") from e
    return create_grid(w, h, rows)


def _pair(value: Any, what: str) -> List[int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise BadPayload(f"{what} must be a pair of integers")
    return [_int_field(value[0], what), _int_field(value[1], what)]


def _move_response(before: Grid, x: int, y: int) -> Any:
    after = play_move(before, x, y)
    return jsonify({
        "ok": True,
        "state": grid_to_json(after),
        "changed": after != before,
        "removed": before.filled_count() - after.filled_count(),
        "won": is_won(after),
        "lost": is_lost(after),
    })


@app.errorhandler(BadPayload)
def _bad_request(e: BadPayload) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(InvalidDimensions)
def _invalid_dimensions(e: InvalidDimensions) -> Any:
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


@app.errorhandler(OutOfBounds)
def _out_of_bounds(e: OutOfBounds) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
        "colors": DEFAULT_COLORS,
        "cellSize": DEFAULT_CELL_SIZE,
        "palette": [list(c) for c in COLORS],
        "blank": list(BLANK_COLOR),
    })


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    w = _int_field(body.get("width", DEFAULT_WIDTH), "width")
    h = _int_field(body.get("height", DEFAULT_HEIGHT), "height")
    colors = _int_field(body.get("colors", DEFAULT_COLORS), "colors")
    _check_size(w, h)
    if colors > len(COLORS):
        raise BadPayload(f"at most {len(COLORS)} colors are supported, got {colors}")
    seed = body.get("seed", None)
    if seed is not None:
        seed = _int_field(seed, "seed")
    g = random_fill(w, h, colors, seed=seed)
    log.debug("dealt %dx%d board with %d colors (seed=%r)", w, h, colors, seed)
    return jsonify({"ok": True, "state": grid_to_json(g), "won": is_won(g), "lost": is_lost(g)})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    g = json_to_grid(body.get("state"))
    x, y = _pair(body.get("move"), "move")
    return _move_response(g, x, y)


@app.post("/api/click")
def api_click() -> Any:
    body = _body()
    g = json_to_grid(body.get("state"))
    px, py = _pair(body.get("pixel"), "pixel")
    cell_size = _int_field(body.get("cellSize", DEFAULT_CELL_SIZE), "cellSize")
    if cell_size <= 0:
        raise BadPayload("cellSize must be positive")
    x, y = screen_to_point(px, py, cell_size)
    return _move_response(g, x, y)


@app.post("/api/hint")
def api_hint() -> Any:
    body = _body()
    g = json_to_grid(body.get("state"))
    groups = [sorted([int(x), int(y)] for x, y in grp) for grp in legal_groups(g)]
    return jsonify({"ok": True, "groups": groups})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
