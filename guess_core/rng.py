from __future__ import annotations

import logging
import random
import secrets
from typing import Optional, Protocol

from .errors import RandomnessUnavailable

logger = logging.getLogger(__name__)


class RandomProvider(Protocol):
    """Source of the secret: a uniform integer in [1, bound]."""

    def next_uniform(self, bound: int) -> int:
        ...


class SecureRandomProvider:
    """Default provider backed by the OS entropy pool via ``secrets``."""

    def next_uniform(self, bound: int) -> int:
        try:
            return secrets.randbelow(bound) + 1
        except (OSError, NotImplementedError) as e:
            logger.warning("entropy source failed: %s", e)
            raise RandomnessUnavailable() from e


class SeededRandomProvider:
    """Deterministic provider for tests and practice runs. Not cryptographically secure."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_uniform(self, bound: int) -> int:
        return self._rng.randint(1, bound)
