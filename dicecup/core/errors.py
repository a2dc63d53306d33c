"""Errors raised by the dice model."""


class InvalidArgumentError(ValueError):
    """An argument was outside the range the operation accepts."""

    def __init__(self, param: str, message: str):
        super().__init__(f"{message} (parameter: {param})")
        self.param = param
        self.message = message


class NoRollsError(ValueError):
    """A statistic was requested from a throw that holds no rolls."""
