import logging
import random
from typing import Optional

from .errors import InvalidArgumentError


logger = logging.getLogger(__name__)

DEFAULT_SIDES = 6


class Die:
    """A single die with a fixed number of sides.

    Dice share the process-wide ``random`` generator unless a generator is
    injected, so two dice created at the same moment do not roll in lockstep.
    Any object with a ``randint(a, b)`` method can be used as ``rng``.
    """

    def __init__(self, sides: int = DEFAULT_SIDES, rng: Optional[random.Random] = None):
        if isinstance(sides, bool) or not isinstance(sides, int) or sides < 1:
            raise InvalidArgumentError("sides", f"A die needs a positive number of sides, got {sides!r}")
        self._sides = sides
        self.rng = rng or random

    @property
    def sides(self) -> int:
        """Number of sides on this die."""
        return self._sides

    def roll(self) -> int:
        """Roll the die and return a value between 1 and ``sides``."""
        return self.rng.randint(1, self._sides)

    def __repr__(self) -> str:
        return f"Die(sides={self._sides})"

    def __str__(self) -> str:
        return f"d{self._sides}"
