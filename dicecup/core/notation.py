"""Parsing and formatting of dice notation such as ``3d6`` or ``2d6+1d8``."""
import random
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .cup import DiceCup
from .errors import InvalidArgumentError


_TERM = re.compile(r"(\d*)d(\d+)")


@dataclass(frozen=True)
class DiceNotation:
    """A parsed dice expression: a list of (count, sides) terms."""
    terms: Tuple[Tuple[int, int], ...]

    @classmethod
    def parse(cls, text: str) -> "DiceNotation":
        """Parse ``NdS`` terms joined by ``+``. ``N`` defaults to 1."""
        expr = re.sub(r"\s+", "", text.lower())
        if not expr:
            raise InvalidArgumentError("notation", "Dice notation is empty")

        terms: List[Tuple[int, int]] = []
        for part in expr.split("+"):
            match = _TERM.fullmatch(part)
            if not match:
                raise InvalidArgumentError("notation", f"Cannot parse dice term {part!r} in {text!r}")
            count = int(match.group(1)) if match.group(1) else 1
            sides = int(match.group(2))
            if sides < 1:
                raise InvalidArgumentError("notation", f"Dice need at least one side: {part!r}")
            terms.append((count, sides))
        return cls(tuple(terms))

    @property
    def dice_count(self) -> int:
        """Total number of dice described."""
        return sum(count for count, _ in self.terms)

    @property
    def min_total(self) -> int:
        return self.dice_count

    @property
    def max_total(self) -> int:
        return sum(count * sides for count, sides in self.terms)

    def build_cup(self, rng: Optional[random.Random] = None) -> DiceCup:
        """Create a cup holding the dice this notation describes."""
        cup = DiceCup(rng=rng)
        for count, sides in self.terms:
            cup.add_dice(count, sides)
        return cup

    def __str__(self) -> str:
        return "+".join(f"{count}d{sides}" for count, sides in self.terms)


def cup_from_notation(text: str, rng: Optional[random.Random] = None) -> DiceCup:
    """Build a dice cup from notation text, e.g. ``cup_from_notation("3d6")``."""
    return DiceNotation.parse(text).build_cup(rng=rng)
