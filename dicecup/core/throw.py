"""The outcome of throwing a cup of dice."""
from typing import Iterable, Iterator, List, Tuple, TYPE_CHECKING

from .errors import InvalidArgumentError, NoRollsError

if TYPE_CHECKING:
    from .cup import DiceCup


class Throw:
    """Result of rolling every die in a cup once.

    The rolls are fixed when the throw is made. ``clear()`` drops them, and a
    throw used as a context manager clears itself on exit::

        with cup.produce_throw() as throw:
            best = throw.get_highest(3)

    After clearing, the throw behaves like an empty one.
    """

    def __init__(self, rolls: Iterable[int]):
        self._rolls: Tuple[int, ...] = tuple(rolls)

    @classmethod
    def from_cup(cls, cup: "DiceCup") -> "Throw":
        """Throw the dice in ``cup``."""
        return cls(die.roll() for die in cup)

    @property
    def rolls(self) -> Tuple[int, ...]:
        """Each of the rolls, in dice order."""
        return self._rolls

    @property
    def total(self) -> int:
        """Sum of all the rolls."""
        return sum(self._rolls)

    @property
    def highest(self) -> int:
        """Highest single roll."""
        if not self._rolls:
            raise NoRollsError("Cannot take the highest roll of an empty throw")
        return max(self._rolls)

    @property
    def lowest(self) -> int:
        """Lowest single roll."""
        if not self._rolls:
            raise NoRollsError("Cannot take the lowest roll of an empty throw")
        return min(self._rolls)

    def get_highest(self, count: int) -> List[int]:
        """The ``count`` highest rolls, highest first."""
        self._check_count(count)
        return sorted(self._rolls, reverse=True)[:count]

    def get_lowest(self, count: int) -> List[int]:
        """The ``count`` lowest rolls, lowest first."""
        self._check_count(count)
        return sorted(self._rolls)[:count]

    def _check_count(self, count: int):
        if count > len(self._rolls):
            raise InvalidArgumentError("count", "Count cannot exceed the number of rolls")
        if count < 0:
            raise InvalidArgumentError("count", "Count cannot be negative")

    def clear(self):
        """Release the stored rolls."""
        self._rolls = ()

    @property
    def is_empty(self) -> bool:
        """True when there are no rolls, either never made or cleared."""
        return not self._rolls

    def __enter__(self) -> "Throw":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def __len__(self) -> int:
        return len(self._rolls)

    def __iter__(self) -> Iterator[int]:
        return iter(self._rolls)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return self._rolls == other._rolls

    def __str__(self) -> str:
        return f"Throw({list(self._rolls)})"

    __repr__ = __str__
