from __future__ import annotations

from typing import Any, Dict, Optional


class GuessError(Exception):
    """Base class for every failure the game core reports to its host."""
    kind = "guess_error"
    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_json(self) -> Dict[str, Any]:
        return {"ok": False, "error": self.kind, "message": self.message}


class InvalidBound(GuessError):
    kind = "invalid_bound"
    default_message = "Max must be a positive integer."


class InvalidGuess(GuessError):
    kind = "invalid_guess"
    default_message = "Please enter a valid whole number."


class OutOfRange(GuessError):
    kind = "out_of_range"

    def __init__(self, bound: int) -> None:
        self.bound = bound
        super().__init__(f"Enter a number between 1 and {bound}.")


class GameAlreadyWon(GuessError):
    kind = "game_already_won"
    default_message = "You already won. Restart to play again."


class RandomnessUnavailable(GuessError):
    kind = "randomness_unavailable"
    default_message = "Secure randomness is unavailable. Try again."
