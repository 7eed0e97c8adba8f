import asyncio
import time

import pytest

from diceroller.coordinator import GameCoordinator


class Recorder:
    """Emetteur factice: conserve chaque (événement, données, destinataire)."""

    def __init__(self):
        self.events = []

    async def __call__(self, event, data=None, to=None, **_kwargs):
        self.events.append((event, data, to))

    def names(self):
        return [name for name, _, _ in self.events]

    def payloads(self, event):
        return [data for name, data, _ in self.events if name == event]

    def last(self, event):
        payloads = self.payloads(event)
        return payloads[-1] if payloads else None

    def clear(self):
        self.events.clear()


class ScriptedRolls:
    """Source de dé déterministe: renvoie les valeurs fournies dans l'ordre."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.values.pop(0)


async def wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition jamais atteinte")
        await asyncio.sleep(0.005)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_coordinator(recorder):
    def _make(rolls=(), turn_timeout=5.0, round_pause=0.05):
        return GameCoordinator(
            emit=recorder,
            roll_source=ScriptedRolls(rolls),
            turn_timeout=turn_timeout,
            round_pause=round_pause,
        )

    return _make
