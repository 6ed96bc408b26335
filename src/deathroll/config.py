"""Settings shared by the library and the command line."""

import os

PLAY_FLOOR = 5
CALCULATOR_FLOOR = 2
DEFAULT_WAGER = 5


def _read_seed(environ):
    raw = environ.get("DEATHROLL_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DEATHROLL_SEED must be an integer, got `{raw}`.") from None


def load(environ=None):
    """Refresh the module level settings from `environ` (default `os.environ`)."""
    global seed, log_level
    environ = os.environ if environ is None else environ
    seed = _read_seed(environ)
    log_level = environ.get("DEATHROLL_LOG_LEVEL", "WARNING").upper()


seed = None
log_level = "WARNING"
load()
