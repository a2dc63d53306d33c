"""dicecup - dice, cups of dice and the throws they produce."""
from .core.die import Die
from .core.cup import DiceCup
from .core.throw import Throw
from .core.errors import InvalidArgumentError, NoRollsError
from .core.notation import DiceNotation, cup_from_notation

__version__ = "0.1.0"

__all__ = [
    "Die",
    "DiceCup",
    "Throw",
    "InvalidArgumentError",
    "NoRollsError",
    "DiceNotation",
    "cup_from_notation",
]
