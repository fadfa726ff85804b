from __future__ import annotations

# Facade module that re-exports the guess-number core.
# The Flask app, the CLI entry point and the tests import from here.
# Single-responsibility modules live under guess_core/*.

from guess_core.config import DEFAULT_BOUND, MAX_BOUND, default_bound, env_flag, log_level  # noqa: F401
from guess_core.errors import (  # noqa: F401
    GuessError,
    InvalidBound,
    InvalidGuess,
    OutOfRange,
    GameAlreadyWon,
    RandomnessUnavailable,
)
from guess_core.rng import (  # noqa: F401
    RandomProvider,
    SecureRandomProvider,
    SeededRandomProvider,
)
from guess_core.state import (  # noqa: F401
    LOW,
    HIGH,
    CORRECT,
    GameState,
    GuessResult,
    as_whole_number,
    parse_number,
)
from guess_core.cli import main as cli_main  # noqa: F401

__all__ = [
    "DEFAULT_BOUND",
    "MAX_BOUND",
    "default_bound",
    "env_flag",
    "log_level",
    "GuessError",
    "InvalidBound",
    "InvalidGuess",
    "OutOfRange",
    "GameAlreadyWon",
    "RandomnessUnavailable",
    "RandomProvider",
    "SecureRandomProvider",
    "SeededRandomProvider",
    "LOW",
    "HIGH",
    "CORRECT",
    "GameState",
    "GuessResult",
    "as_whole_number",
    "parse_number",
    "cli_main",
]


if __name__ == "__main__":
    raise SystemExit(cli_main())
