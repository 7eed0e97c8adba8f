"""Source de lancers de dé (injectable) et politique de repli."""

from __future__ import annotations

import asyncio
import inspect
import logging
import random
from typing import Awaitable, Callable, Union

logger = logging.getLogger(__name__)

RollSource = Callable[[], Union[int, Awaitable[int]]]


def _roll_once() -> int:
    return random.randint(1, 6)


async def roll_die() -> int:
    """Lance un dé à six faces dans un thread de travail."""
    return await asyncio.to_thread(_roll_once)


async def _call(source: RollSource) -> int:
    value = source()
    if inspect.isawaitable(value):
        value = await value
    if not isinstance(value, int) or isinstance(value, bool) or not 1 <= value <= 6:
        raise ValueError(f"lancer hors de [1, 6]: {value!r}")
    return value


async def obtain_roll(source: RollSource) -> int:
    """Obtient une valeur de dé; une seule nouvelle tentative, puis repli local.

    Le tour doit toujours avancer: si la source échoue deux fois, on tire la
    valeur avec ``random.randint`` dans le processus.
    """
    try:
        return await _call(source)
    except Exception:
        logger.warning("Echec de la source de dé, nouvelle tentative", exc_info=True)
    try:
        return await _call(source)
    except Exception:
        logger.exception("Echec répété de la source de dé, repli sur un tirage local")
    return _roll_once()
