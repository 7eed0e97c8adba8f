"""Etat de la partie: joueurs, file d'attente et compteurs de manche."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Player:
    id: str
    name: str
    current_roll: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "currentRoll": self.current_roll}


@dataclass
class MatchState:
    # Joueurs
    roster: List[Player] = field(default_factory=list)
    pending: List[Player] = field(default_factory=list)

    # Manche en cours
    round_active: bool = False
    current_turn_index: int = 0

    # Partie (plusieurs manches)
    current_round: int = 0
    total_rounds: int = 1
    scores: Dict[str, int] = field(default_factory=dict)

    def find_player(self, player_id: str) -> Optional[Player]:
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def index_of(self, player_id: str) -> int:
        for index, player in enumerate(self.roster):
            if player.id == player_id:
                return index
        return -1

    def has_seat(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self.roster + self.pending)

    def current_player(self) -> Optional[Player]:
        if 0 <= self.current_turn_index < len(self.roster):
            return self.roster[self.current_turn_index]
        return None

    def unique_name(self, requested: str) -> str:
        """Nom unique parmi les joueurs inscrits et en attente ("Bob", "Bob 1", ...)."""
        taken = {p.name for p in self.roster + self.pending}
        name = requested
        suffix = 0
        while name in taken:
            suffix += 1
            name = f"{requested} {suffix}"
        return name

    def clear_rolls(self) -> None:
        for player in self.roster:
            player.current_roll = None

    def reset_scores(self) -> None:
        self.scores = {p.id: 0 for p in self.roster}

    def roster_payload(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.roster]

    def reset_match(self) -> None:
        self.round_active = False
        self.current_turn_index = 0
        self.current_round = 0
        self.total_rounds = 1
        self.scores = {}
