"""
Player store.
Persists the whole roster at once: every load materialises the full player
set, every save rewrites it. Two variants share the `PlayerStore` interface:

- JsonPlayerStore: one JSON document on disk (see io_utils for the atomic write).
- InMemoryPlayerStore: keeps a private copy in memory, handy for tests.

Persisted structure:
{
  "last_id": 3,
  "players": [ { "id": 1, "nick": "...", "points": 0 } ]
}
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import orjson
from pydantic import ValidationError

from player_registry.config.settings import settings
from player_registry.models.player import Roster
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)


class PlayerStoreError(RuntimeError):
    """Raised when the backing data cannot be read or does not match the roster schema."""


class PlayerStore(ABC):
    """Load-all / save-all persistence for the roster."""

    @abstractmethod
    def load_all(self) -> Roster:
        """Return the stored roster, or an empty one when nothing was saved yet."""

    @abstractmethod
    def save_all(self, roster: Roster) -> None:
        """Replace the stored roster with `roster`."""

    @abstractmethod
    def clear(self) -> None:
        """Drop everything stored (no-op when already empty)."""


class JsonPlayerStore(PlayerStore):
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(str(path or settings.DATA_FILE)).expanduser()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load_all(self) -> Roster:
        try:
            raw = read_json(self.path)
        except orjson.JSONDecodeError as exc:
            raise PlayerStoreError(f"{self.path} is not valid JSON ({exc})") from exc
        if raw is None:
            logger.debug("No roster file, starting empty", extra={"path": str(self.path)})
            return Roster()
        if not isinstance(raw, dict):
            raise PlayerStoreError(f"{self.path} must contain a JSON object at the root.")
        try:
            roster = Roster.model_validate(raw)
        except ValidationError as exc:
            raise PlayerStoreError(f"{self.path} does not match the roster schema: {exc}") from exc
        logger.debug("Roster loaded", extra={"path": str(self.path), "count": len(roster.players)})
        return roster

    def save_all(self, roster: Roster) -> None:
        try:
            write_json(self.path, roster.model_dump(mode="json"))
        except orjson.JSONEncodeError as exc:
            raise PlayerStoreError(f"roster cannot be encoded to {self.path} ({exc})") from exc
        logger.debug("Roster saved", extra={"path": str(self.path), "count": len(roster.players)})

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class InMemoryPlayerStore(PlayerStore):
    def __init__(self, roster: Optional[Roster] = None) -> None:
        self._roster: Optional[Roster] = roster.model_copy(deep=True) if roster else None

    def load_all(self) -> Roster:
        if self._roster is None:
            return Roster()
        return self._roster.model_copy(deep=True)

    def save_all(self, roster: Roster) -> None:
        self._roster = roster.model_copy(deep=True)

    def clear(self) -> None:
        self._roster = None
