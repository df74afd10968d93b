# PACMAN.py
# PacPy launcher: single-ghost Pac-Man on a fixed maze, built on Pygame.
# Settings are read (never written) from pacman_data/settings.json if present.

import sys
import time
import traceback

from pacpy.config import DATA_DIR, load_settings
from pacpy.game import PacmanGame


def write_crash_log(exc_text: str):
    """Append a timestamped traceback to pacman_data/pacman_error.log."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    logp = DATA_DIR / "pacman_error.log"
    with open(logp, "a", encoding="utf-8") as f:
        f.write("=== Exception on run: " + time.strftime('%Y-%m-%d %H:%M:%S') + " ===\n")
        f.write(exc_text)
        f.write("\n")
    return logp


def main():
    # Wrap startup so a double-clicked bundle still leaves a trace of what went wrong.
    try:
        # always start in windowed mode
        game = PacmanGame(load_settings(), windowed=True)
        game.run()
    except Exception:
        exc_text = traceback.format_exc()
        try:
            logp = write_crash_log(exc_text)
            print(f"[pacman] crashed, traceback written to {logp}", file=sys.stderr)
        except OSError:
            # can't write the log, fall back to stderr
            sys.stderr.write(exc_text)
        # If running from a console, pause so the user can see the error
        if sys.stdin and sys.stdin.isatty():
            input("An error occurred while running PacPy. Press Enter to exit...")
        sys.exit(1)


if __name__ == "__main__":
    main()
