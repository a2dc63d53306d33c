import random

import pytest


class ScriptedRandom:
    """Stands in for a random generator, returning preset values in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
