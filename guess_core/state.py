from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Optional

from .config import DEFAULT_BOUND, MAX_BOUND
from .errors import GameAlreadyWon, InvalidBound, InvalidGuess, OutOfRange, RandomnessUnavailable
from .rng import RandomProvider, SecureRandomProvider

logger = logging.getLogger(__name__)

LOW = "low"
HIGH = "high"
CORRECT = "correct"

_DIGITS = re.compile(r"[+-]?[0-9]+")
_CHUNK = 1000


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one accepted guess; attempts is the count including this guess."""
    result: str  # 'low' | 'high' | 'correct'
    attempts: int

    @property
    def correct(self) -> bool:
        return self.result == CORRECT

    def to_json(self) -> Dict[str, Any]:
        return {"result": self.result, "attempts": int(self.attempts)}


def as_whole_number(value: Any) -> Optional[int]:
    """Returns value as an int if it is a finite integer (10 or 10.0), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _int_from_digits(text: str) -> int:
    # int() refuses very long digit strings; build the value chunk by chunk.
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")
    value = 0
    for i in range(0, len(digits), _CHUNK):
        chunk = digits[i:i + _CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return sign * value


def parse_number(raw: Any) -> Any:
    """
    Converts user text to an int or float for the hosts. Non-strings and
    unparseable text are returned unchanged so the game rejects them with
    its own error kinds.
    """
    if not isinstance(raw, str):
        return raw
    text = raw.strip()
    if _DIGITS.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            return _int_from_digits(text)
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return raw


class GameState:
    """
    The single game in a session: a hidden secret in [1, bound] and the
    attempts made against it.

    Two states: active (guesses accepted) and won (guesses rejected with
    GameAlreadyWon). Only start/reset leave the won state. Every failing call
    leaves all fields exactly as they were.
    """

    def __init__(self, bound: Any = DEFAULT_BOUND, rng: Optional[RandomProvider] = None) -> None:
        self._rng: RandomProvider = rng if rng is not None else SecureRandomProvider()
        self._bound = 0
        self._secret = 0
        self._attempts = 0
        self._finished = False
        self.start(bound)

    def start(self, bound: Any) -> None:
        checked = as_whole_number(bound)
        if checked is None or checked < 1:
            raise InvalidBound()
        if checked > MAX_BOUND:
            raise InvalidBound(f"Max must be at most {MAX_BOUND}.")
        try:
            secret = self._rng.next_uniform(checked)
        except RandomnessUnavailable:
            raise
        except Exception as e:
            logger.warning("random provider failed for bound %d: %s", checked, e)
            raise RandomnessUnavailable() from e
        if as_whole_number(secret) is None or not 1 <= secret <= checked:
            logger.warning("random provider returned %r for bound %d", secret, checked)
            raise RandomnessUnavailable()
        self._bound = checked
        self._secret = int(secret)
        self._attempts = 0
        self._finished = False
        logger.debug("new secret drawn in 1..%d", checked)

    def reset(self, bound: Any = None) -> None:
        """Starts over with a fresh secret; bound defaults to the current one."""
        self.start(self._bound if bound is None else bound)

    def guess(self, value: Any) -> GuessResult:
        if self._finished:
            raise GameAlreadyWon()
        n = as_whole_number(value)
        if n is None:
            raise InvalidGuess()
        if n < 1 or n > self._bound:
            raise OutOfRange(self._bound)

        self._attempts += 1
        if n < self._secret:
            result = LOW
        elif n > self._secret:
            result = HIGH
        else:
            result = CORRECT
            self._finished = True
            logger.info("secret found in %d attempt(s)", self._attempts)
        logger.debug("guess %d -> %s (attempt %d)", n, result, self._attempts)
        return GuessResult(result=result, attempts=self._attempts)

    def get_attempts(self) -> int:
        return self._attempts

    def get_bound(self) -> int:
        return self._bound

    @property
    def finished(self) -> bool:
        return self._finished

    def snapshot(self) -> Dict[str, Any]:
        return {"bound": self._bound, "attempts": self._attempts, "finished": self._finished}

    def __repr__(self) -> str:
        return f"GameState(bound={self._bound}, attempts={self._attempts}, finished={self._finished})"
