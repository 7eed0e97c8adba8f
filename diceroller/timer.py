"""Minuteur de tour: une seule échéance planifiée à la fois."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional


class TurnTimer:
    """Planifie ``callback(*args)`` après ``delay`` secondes.

    ``start`` remplace toute échéance précédente. ``stop`` annule la tâche en
    attente, sauf si c'est la tâche courante: un rappel en cours d'exécution qui
    réarme le minuteur ne doit pas s'annuler lui-même.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]) -> None:
        self.delay = delay
        self.callback = callback
        self.task: Optional[asyncio.Task[Any]] = None

    @property
    def active(self) -> bool:
        return self.task is not None and not self.task.done()

    def start(self, *args: Any) -> None:
        self.stop()

        async def timer_loop() -> None:
            await asyncio.sleep(self.delay)
            await self.callback(*args)

        self.task = asyncio.create_task(timer_loop())

    def stop(self) -> None:
        task = self.task
        self.task = None
        if task is None or task.done():
            return
        if task is asyncio.current_task():
            return
        task.cancel()
