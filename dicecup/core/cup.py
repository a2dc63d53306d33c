import logging
import random
from collections import Counter
from typing import Iterator, List, Optional

from .die import DEFAULT_SIDES, Die
from .errors import InvalidArgumentError
from .throw import Throw


logger = logging.getLogger(__name__)


class DiceCup:
    """An ordered collection of dice that can be thrown any number of times."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng
        self._dice: List[Die] = []

    @property
    def dice(self) -> List[Die]:
        """Dice in the cup, in the order they are rolled."""
        return list(self._dice)

    def add_die(self, die: Die) -> "DiceCup":
        """Add the given die to the cup."""
        self._dice.append(die)
        logger.debug("Added %r to cup (%d dice)", die, len(self._dice))
        return self

    def add_dice(self, count: int, sides: int = DEFAULT_SIDES) -> "DiceCup":
        """Add ``count`` new dice with ``sides`` faces each."""
        if count < 0:
            raise InvalidArgumentError("count", f"Cannot add a negative number of dice ({count})")
        # Build every die first so a bad side count leaves the cup untouched
        new_dice = [Die(sides, rng=self.rng) for _ in range(count)]
        self._dice.extend(new_dice)
        logger.debug("Added %d d%d to cup (%d dice)", count, sides, len(self._dice))
        return self

    def produce_throw(self) -> Throw:
        """Toss the dice!"""
        rolls = [die.roll() for die in self._dice]
        logger.debug("Threw %s -> %s", self.notation or "empty cup", rolls)
        return Throw(rolls)

    @property
    def sides(self) -> Counter:
        """Count of dice per number of sides."""
        return Counter(die.sides for die in self._dice)

    @property
    def notation(self) -> str:
        """Cup contents in dice notation, e.g. ``2d6+1d20``."""
        return "+".join(f"{count}d{sides}" for sides, count in self.sides.items())

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    def __repr__(self) -> str:
        return f"DiceCup({self.notation or 'empty'})"
