import random

import pytest

from game.engine import GameEngine
from game.scheduling import ManualScheduler


class Recorder:
    """Collects everything the engine emits."""

    def __init__(self):
        self.events = []

    def __call__(self, event, payload, to=None):
        self.events.append((event, payload, to))

    def narrative(self, kind=None):
        return [
            payload for event, payload, _ in self.events
            if event == "narrative" and (kind is None or payload["type"] == kind)
        ]

    def private(self, to):
        return [(event, payload) for event, payload, target in self.events if target == to]

    def clear(self):
        self.events = []


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(recorder, scheduler):
    return GameEngine(emit=recorder, schedule=scheduler, rng=random.Random(1234))


@pytest.fixture
def table(engine):
    """Factory: seat n players with ids p0..p(n-1)."""
    def _seat(n):
        for i in range(n):
            assert engine.join(f"p{i}", f"P{i}")["ok"]
        return engine
    return _seat
