import pytest


class FixedRng:
    """Generator stand-in that always draws a=1, b=0."""

    def __init__(self):
        self.calls = 0

    def integers(self, low, high=None):
        self.calls += 1
        return low


@pytest.fixture
def fixed_rng() -> FixedRng:
    return FixedRng()


@pytest.fixture
def fruits() -> list[str]:
    return ["apple", "banana", "grape", "kiwi", "lemon",
            "mango", "orange", "peach", "plum", "watermelon"]
