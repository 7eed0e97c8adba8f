"""Gestion des événements Socket.IO (connexion, inscription, lancers, manches)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .coordinator import GameCoordinator
from .sockets import sio

logger = logging.getLogger(__name__)

# instance globale unique: une seule partie par processus
coordinator = GameCoordinator(emit=sio.emit)


@sio.event
async def connect(sid: str, _environ: Dict[str, Any], _auth: Any = None) -> None:
    logger.info("Joueur connecté: %s", sid)
    await send_current_state(sid)


@sio.event
async def disconnect(sid: str, _reason: Optional[str] = None) -> None:
    await coordinator.disconnect(sid)
    logger.info("Joueur déconnecté: %s", sid)


@sio.event
async def join(sid: str, data: Dict[str, Any] | str) -> None:
    name = data.get("name", "") if isinstance(data, dict) else str(data)
    await coordinator.join(sid, name)


@sio.event
async def roll(sid: str, _data: Any = None) -> None:
    await coordinator.submit_roll(sid)


@sio.on("startRound")
async def start_round(sid: str, data: Optional[Dict[str, Any]] = None) -> None:
    options = data if isinstance(data, dict) else None
    await coordinator.start_round(sid, options)


async def send_current_state(to_sid: str) -> None:
    """Envoie l'état courant au client qui vient de se connecter."""
    snapshot = coordinator.snapshot()
    await sio.emit("players", snapshot["players"], to=to_sid)
    if not snapshot["roundActive"]:
        return
    await sio.emit(
        "roundStart",
        {"currentRound": snapshot["currentRound"], "totalRounds": snapshot["totalRounds"]},
        to=to_sid,
    )
    current = coordinator.state.current_player()
    if current is not None:
        await sio.emit(
            "turn", {"playerId": current.id, "index": snapshot["currentTurnIndex"]}, to=to_sid
        )

