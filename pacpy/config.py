# config.py
# Constants, paths and the tunable GameConfig for PacPy.

import json
import sys
from dataclasses import dataclass, fields
from pathlib import Path

# -----------------------
# Grid & timing
# -----------------------
TILE = 28                  # tile size in pixels
COLS = 28
ROWS = 35
CANVAS_W = COLS * TILE
CANVAS_H = ROWS * TILE
HUD_HEIGHT = 40            # strip above the map for SCORE / LIVES
FPS = 60

PAC_SPEED = 3.0            # pixels per reference frame
GHOST_SPEED = 2.2          # slightly slower than the player
TURN_THRESHOLD = 4         # px from a tile center that counts as aligned
REFERENCE_FRAME_MS = 16    # speeds are expressed per 16 ms frame
MAX_FRAME_MS = 40          # clamp on elapsed time per update
PROBE_REACH = 0.45         # forward wall probe, in tiles
COLLISION_DISTANCE = 0.6   # in tiles
AGENT_RADIUS = 0.42        # in tiles

# -----------------------
# Rules
# -----------------------
PELLET_SCORE = 10
START_LIVES = 3
MISDIRECTION_CHANCE = 0.15
TRANSITION_DELAY_MS = 50
OVERLAY_SECONDS = 2.0

PLAYER_START = (14, 17)
GHOST_START = (11, 13)
GHOST_START_DIR = (1, 0)

# -----------------------
# Colours
# -----------------------
BG_COLOR = (0, 0, 0)
WALL_OUTER = (0, 119, 119)
WALL_INNER = (0, 51, 51)
PELLET_COLOR = (255, 255, 255)
PAC_COLOR = (255, 215, 0)
GHOST_COLOR = (255, 77, 77)
EYE_WHITE = (255, 255, 255)
EYE_PUPIL = (0, 0, 0)
HUD_COLOR = (255, 255, 255)
OVERLAY_COLOR = (255, 255, 0)


def resource_path(rel_path: str) -> Path:
    """Return an absolute path to a resource, working for dev and for PyInstaller.

    Usage: resource_path('pacman_data') or resource_path('pacman_data/settings.json')
    """
    # PyInstaller creates a temp folder and stores path in _MEIPASS
    meipass = getattr(sys, '_MEIPASS', None)
    if meipass:
        return Path(meipass) / rel_path
    return Path(__file__).resolve().parent.parent / rel_path


DATA_DIR = resource_path("pacman_data")
SETTINGS_FILE = DATA_DIR / "settings.json"


@dataclass(frozen=True)
class GameConfig:
    """Tunable knobs for one play session. Defaults match the module constants."""

    tile: int = TILE
    player_speed: float = PAC_SPEED
    pursuer_speed: float = GHOST_SPEED
    turn_threshold: float = TURN_THRESHOLD
    max_frame_ms: float = MAX_FRAME_MS
    misdirection_chance: float = MISDIRECTION_CHANCE
    start_lives: int = START_LIVES
    transition_delay_ms: float = TRANSITION_DELAY_MS
    seed: int = 2025
    auto_restart: bool = True
    player_start: tuple = PLAYER_START
    pursuer_start: tuple = GHOST_START
    pursuer_start_dir: tuple = GHOST_START_DIR

    def __post_init__(self) -> None:
        if self.tile < 1:
            raise ValueError("tile must be >= 1")
        if self.player_speed <= 0 or self.pursuer_speed <= 0:
            raise ValueError("speeds must be > 0")
        if self.turn_threshold <= 0:
            raise ValueError("turn_threshold must be > 0")
        if self.max_frame_ms <= 0:
            raise ValueError("max_frame_ms must be > 0")
        if not 0.0 <= self.misdirection_chance <= 1.0:
            raise ValueError("misdirection_chance must be in [0, 1]")
        if self.start_lives < 1:
            raise ValueError("start_lives must be >= 1")
        if self.transition_delay_ms < 0:
            raise ValueError("transition_delay_ms must be >= 0")
        if self.pursuer_start_dir not in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            raise ValueError("pursuer_start_dir must be a unit axis direction")


def _as_int(v):
    # bool is an int subclass; 28.0 passes, 28.7 does not
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"expected an integer, got {type(v).__name__}")
    if v != int(v):
        raise ValueError(f"expected an integer, got {v}")
    return int(v)


def _as_float(v):
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"expected a number, got {type(v).__name__}")
    return float(v)


def _as_bool(v):
    if not isinstance(v, bool):
        raise TypeError(f"expected true or false, got {type(v).__name__}")
    return v


def _as_pair(v):
    if not isinstance(v, (list, tuple)) or len(v) != 2:
        raise TypeError("expected a two-element list")
    return (_as_int(v[0]), _as_int(v[1]))


_COERCE = {
    "tile": _as_int,
    "player_speed": _as_float,
    "pursuer_speed": _as_float,
    "turn_threshold": _as_float,
    "max_frame_ms": _as_float,
    "misdirection_chance": _as_float,
    "start_lives": _as_int,
    "transition_delay_ms": _as_float,
    "seed": _as_int,
    "auto_restart": _as_bool,
    "player_start": _as_pair,
    "pursuer_start": _as_pair,
    "pursuer_start_dir": _as_pair,
}


def load_settings(path=None) -> GameConfig:
    """Build a GameConfig from an optional JSON settings file.

    The file is only read, never written. Bad keys are skipped with a warning.
    """
    p = Path(path) if path is not None else SETTINGS_FILE
    if not p.exists():
        return GameConfig()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"[settings] could not read {p}: {e}; using defaults")
        return GameConfig()
    if not isinstance(data, dict):
        print(f"[settings] {p} is not a JSON object; using defaults")
        return GameConfig()
    known = {f.name for f in fields(GameConfig)}
    kwargs = {}
    for key, value in data.items():
        if key not in known:
            print(f"[settings] ignoring unknown key {key!r}")
            continue
        try:
            kwargs[key] = _COERCE[key](value)
        except (TypeError, ValueError, OverflowError):
            print(f"[settings] ignoring bad value for {key!r}: {value!r}")
    return GameConfig(**kwargs)
