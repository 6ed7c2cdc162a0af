import pytest

from shared.config.settings import Settings


class FixedRandom:
    """Stand-in for random.Random that always returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def settings():
    return Settings.defaults()


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def constant_baseline():
    def make(value):
        return lambda text: value
    return make
