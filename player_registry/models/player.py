"""
Models / player.py
Role:
- Describe one registered player and the persisted roster document.

Fields (Player):
- id: unique identifier, issued by the service.
- nick: display nickname, 1 to 15 characters.
- points: running total, never negative.

Roster keeps `last_id` next to the players so deleted ids are never issued again.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

NICK_MIN_LENGTH = 1
NICK_MAX_LENGTH = 15
# orjson only encodes signed 64-bit integers
MAX_POINTS = 2**63 - 1


class Player(BaseModel):
    """Registered player, as stored in the backing file."""
    id: int
    nick: str = Field(min_length=NICK_MIN_LENGTH, max_length=NICK_MAX_LENGTH)
    points: int = Field(default=0, ge=0, le=MAX_POINTS)

    model_config = ConfigDict(validate_assignment=True)


class Roster(BaseModel):
    """Whole persisted collection: players in creation order plus the id counter."""
    players: List[Player] = Field(default_factory=list)
    last_id: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_unique(self) -> "Roster":
        ids = [player.id for player in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate player id in roster")
        nicks = [player.nick for player in self.players]
        if len(nicks) != len(set(nicks)):
            raise ValueError("duplicate nick in roster")
        return self

    def find(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def nick_taken(self, nick: str) -> bool:
        return any(player.nick == nick for player in self.players)

    def issue_id(self) -> int:
        """Reserve the next id, above every id ever issued or currently stored."""
        highest = max((player.id for player in self.players), default=0)
        self.last_id = max(self.last_id, highest) + 1
        return self.last_id
