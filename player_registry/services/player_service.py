"""
Service: player_service.py
Role:
- Business rules for the player registry: nickname checks, id issuing,
  points accounting and deletion.
- Every call re-reads the roster from the store, mutates it in memory and
  writes the whole roster back before returning. Nothing is cached between calls.

Rules:
- nick: 1 to 15 characters, unique among stored players (case-sensitive).
- ids are issued by the service and never reused, even after a deletion.
- points only grow, through `add_points` with a whole, non-negative amount.
"""
from __future__ import annotations

import logging
from threading import RLock
from typing import Any, List, Optional

from player_registry.models.player import MAX_POINTS, NICK_MAX_LENGTH, NICK_MIN_LENGTH, Player, Roster
from .player_store import JsonPlayerStore, PlayerStore

logger = logging.getLogger(__name__)


class PlayerServiceError(Exception):
    """Base exception for player registry rules."""


class InvalidPlayerDataError(PlayerServiceError, ValueError):
    """Raised when a nickname or points amount breaks the validation rules."""


class DuplicateNickError(PlayerServiceError, ValueError):
    """Raised when the nickname is already used by a stored player."""


class PlayerNotFoundError(PlayerServiceError, LookupError):
    """Raised when no stored player has the requested id."""


def _is_valid_nick(nick: Any) -> bool:
    return isinstance(nick, str) and NICK_MIN_LENGTH <= len(nick) <= NICK_MAX_LENGTH


def _is_whole_amount(amount: Any) -> bool:
    return isinstance(amount, int) and not isinstance(amount, bool)


class PlayerService:
    """Create/read/update/delete players on top of a `PlayerStore`."""

    def __init__(self, store: Optional[PlayerStore] = None) -> None:
        self.store = store or JsonPlayerStore()
        self._lock = RLock()

    def _require(self, roster: Roster, player_id: int) -> Player:
        player = roster.find(player_id)
        if player is None:
            logger.warning("Unknown player", extra={"player_id": player_id})
            raise PlayerNotFoundError(f"Player {player_id} not found")
        return player

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_player(self, nick: str) -> int:
        """Register `nick` with zero points and return its new id."""
        if not _is_valid_nick(nick):
            logger.warning("Rejected nickname", extra={"nick": nick})
            raise InvalidPlayerDataError("invalid nickname")
        with self._lock:
            roster = self.store.load_all()
            if roster.nick_taken(nick):
                logger.warning("Duplicate nickname", extra={"nick": nick})
                raise DuplicateNickError(f"Nickname {nick!r} is already taken")
            player_id = roster.issue_id()
            roster.players.append(Player(id=player_id, nick=nick, points=0))
            self.store.save_all(roster)
        logger.info("Player created", extra={"player_id": player_id, "nick": nick})
        return player_id

    def get_players(self) -> List[Player]:
        with self._lock:
            return list(self.store.load_all().players)

    def get_player_by_id(self, player_id: int) -> Player:
        with self._lock:
            roster = self.store.load_all()
            return self._require(roster, player_id).model_copy()

    def add_points(self, player_id: int, amount: int) -> None:
        """Add `amount` to the player's total. Fractions must be truncated by the caller."""
        if not _is_whole_amount(amount):
            logger.warning("Rejected points amount", extra={"player_id": player_id, "amount": amount})
            raise InvalidPlayerDataError(f"points amount must be a whole number, got {amount!r}")
        if amount < 0:
            logger.warning("Rejected points amount", extra={"player_id": player_id, "amount": amount})
            raise InvalidPlayerDataError(f"points amount must not be negative, got {amount}")
        with self._lock:
            roster = self.store.load_all()
            player = self._require(roster, player_id)
            if amount > MAX_POINTS - player.points:
                logger.warning("Points total overflow", extra={"player_id": player_id, "amount": amount})
                raise InvalidPlayerDataError(f"points total would exceed {MAX_POINTS}")
            player.points += amount
            self.store.save_all(roster)
        logger.info("Points added", extra={"player_id": player_id, "amount": amount})

    def delete_player(self, player_id: int) -> None:
        with self._lock:
            roster = self.store.load_all()
            player = self._require(roster, player_id)
            roster.players.remove(player)
            self.store.save_all(roster)
        logger.info("Player deleted", extra={"player_id": player_id, "nick": player.nick})
