"""Configuration du serveur (environnement) et constantes de jeu."""

from __future__ import annotations

import os
from typing import List

# Délais fixes du déroulement d'une partie (secondes)
TURN_TIMEOUT_SEC = 10.0
ROUND_PAUSE_SEC = 2.0

JOIN_DEFERRED_MESSAGE = "Wait for the next round to join."


def _split_origins(raw: str) -> List[str] | str:
    if raw.strip() == "*":
        return "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))
    CORS_ORIGINS = _split_origins(os.environ.get("CORS_ORIGINS", "*"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")
