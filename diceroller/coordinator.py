"""Coordination des manches: inscriptions, ordre des tours, délais et scores.

Chaque événement entrant (join, roll, startRound, disconnect) et chaque
expiration de minuteur s'exécute entièrement sous un unique ``asyncio.Lock``:
l'état de la partie n'est jamais modifié par deux traitements à la fois.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from .config import JOIN_DEFERRED_MESSAGE, ROUND_PAUSE_SEC, TURN_TIMEOUT_SEC
from .dice import RollSource, obtain_roll, roll_die
from .state import MatchState, Player
from .timer import TurnTimer

logger = logging.getLogger(__name__)

Emitter = Callable[..., Awaitable[Any]]


class GameCoordinator:
    def __init__(
        self,
        emit: Emitter,
        roll_source: RollSource = roll_die,
        turn_timeout: float = TURN_TIMEOUT_SEC,
        round_pause: float = ROUND_PAUSE_SEC,
    ) -> None:
        self.emit = emit
        self.roll_source = roll_source
        self.round_pause = round_pause
        self.state = MatchState()
        self.timer = TurnTimer(turn_timeout, self._auto_roll)
        self.continuation: Optional[asyncio.Task[Any]] = None
        self._lock = asyncio.Lock()

    # Evénements entrants

    async def join(self, session_id: str, requested_name: str) -> None:
        async with self._lock:
            state = self.state
            if state.has_seat(session_id):
                logger.debug("join ignoré: %s est déjà inscrit", session_id)
                return
            player = Player(id=session_id, name=state.unique_name(requested_name))
            if state.round_active:
                state.pending.append(player)
                await self.emit("joinError", JOIN_DEFERRED_MESSAGE, to=session_id)
                return
            state.roster.append(player)
            await self._broadcast_players()

    async def start_round(self, session_id: str, options: Optional[Dict[str, Any]] = None) -> None:
        async with self._lock:
            state = self.state
            if not state.roster or state.roster[0].id != session_id:
                logger.debug("startRound ignoré: %s n'est pas le premier joueur", session_id)
                return
            self._cancel_continuation()
            self.timer.stop()

            total_rounds = _positive_int((options or {}).get("totalRounds"))
            if total_rounds:
                state.total_rounds = total_rounds
                state.current_round = 1
                state.reset_scores()
            elif state.current_round == 0:
                state.current_round = 1
                state.reset_scores()
            else:
                state.current_round += 1
            await self._begin_round()

    async def submit_roll(self, session_id: str) -> None:
        async with self._lock:
            current = self.state.current_player()
            if not self.state.round_active or current is None or current.id != session_id:
                logger.debug("roll ignoré: ce n'est pas le tour de %s", session_id)
                return
            await self._record_roll(current)

    async def disconnect(self, session_id: str) -> None:
        async with self._lock:
            state = self.state
            state.pending = [p for p in state.pending if p.id != session_id]
            index = state.index_of(session_id)
            if index == -1:
                return
            player = state.roster[index]
            was_current = index == state.current_turn_index

            if state.round_active and player.current_roll is None:
                player.current_roll = 0
                await self._broadcast_rolls()
            if index < state.current_turn_index:
                state.current_turn_index -= 1

            del state.roster[index]
            await self._broadcast_players()

            if not state.roster:
                # Plus personne: la partie repart de zéro au prochain startRound
                self.timer.stop()
                self._cancel_continuation()
                state.reset_match()
            elif state.round_active and was_current:
                self.timer.stop()
                if state.current_turn_index >= len(state.roster):
                    state.current_turn_index = 0
                await self._advance_turn()

    def snapshot(self) -> Dict[str, Any]:
        state = self.state
        return {
            "players": state.roster_payload(),
            "pending": [p.to_dict() for p in state.pending],
            "roundActive": state.round_active,
            "currentTurnIndex": state.current_turn_index,
            "currentRound": state.current_round,
            "totalRounds": state.total_rounds,
            "scores": dict(state.scores),
        }

    # Machine à états interne

    async def _begin_round(self) -> None:
        state = self.state
        state.clear_rolls()
        state.round_active = True
        state.current_turn_index = 0
        await self.emit(
            "roundStart",
            {"currentRound": state.current_round, "totalRounds": state.total_rounds},
        )
        await self._advance_turn()

    async def _advance_turn(self) -> None:
        state = self.state
        if state.current_turn_index >= len(state.roster):
            await self._complete_round()
            return

        player = state.roster[state.current_turn_index]
        await self.emit("turn", {"playerId": player.id, "index": state.current_turn_index})
        self.timer.start(player.id)

    async def _auto_roll(self, player_id: str) -> None:
        async with self._lock:
            state = self.state
            if not state.round_active:
                return
            player = state.find_player(player_id)
            if player is None or player.current_roll is not None:
                return
            if state.current_player() is not player:
                return
            logger.info("Délai dépassé pour %s, lancer automatique", player.name)
            await self._record_roll(player)

    async def _record_roll(self, player: Player) -> None:
        player.current_roll = await obtain_roll(self.roll_source)
        await self._broadcast_rolls()
        self.timer.stop()
        self.state.current_turn_index += 1
        await self._advance_turn()

    async def _complete_round(self) -> None:
        state = self.state
        state.round_active = False
        self.timer.stop()

        for player in state.roster:
            if player.current_roll is not None:
                state.scores[player.id] = state.scores.get(player.id, 0) + player.current_roll
        best = max((p.current_roll or 0 for p in state.roster), default=0)
        winners = [p for p in state.roster if (p.current_roll or 0) == best]

        await self.emit(
            "roundEnd",
            {
                "winners": [p.to_dict() for p in winners],
                "rolls": state.roster_payload(),
                "scores": dict(state.scores),
                "currentRound": state.current_round,
                "totalRounds": state.total_rounds,
            },
        )
        logger.info(
            "Manche %s/%s terminée, gagnant(s): %s",
            state.current_round,
            state.total_rounds,
            ", ".join(p.name for p in winners),
        )

        for player in state.pending:
            player.current_roll = None
            state.roster.append(player)
        state.pending = []
        await self._broadcast_players()

        if state.current_round < state.total_rounds:
            self.continuation = asyncio.create_task(self._next_round())

    async def _next_round(self) -> None:
        await asyncio.sleep(self.round_pause)
        async with self._lock:
            if self.continuation is asyncio.current_task():
                self.continuation = None
            state = self.state
            if state.round_active or not state.roster:
                return
            state.current_round += 1
            await self._begin_round()

    def _cancel_continuation(self) -> None:
        task = self.continuation
        self.continuation = None
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    async def _broadcast_players(self) -> None:
        await self.emit("players", self.state.roster_payload())

    async def _broadcast_rolls(self) -> None:
        await self.emit("rolls", self.state.roster_payload())


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None
