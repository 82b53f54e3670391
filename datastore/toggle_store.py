from __future__ import annotations

import logging
from functools import lru_cache
from threading import Lock
from typing import Mapping

from models.fixtures import DeckFixtures
from services.errors import KeyNotFoundError
from services.toggles import FlipMode, FlipRelay, ToggleAction, ToggleState, reduce_toggles

logger = logging.getLogger(__name__)


class ToggleStore:
    """In-memory owner of the deck's current relay and mode state."""

    def __init__(self, initial: ToggleState) -> None:
        self._initial = initial
        self._state = initial
        self._lock = Lock()

    @classmethod
    def from_fixtures(cls, fixtures: DeckFixtures) -> "ToggleStore":
        return cls(ToggleState(relays=fixtures.relays, auto_mode=fixtures.auto_mode))

    @property
    def state(self) -> ToggleState:
        with self._lock:
            return self._state

    def dispatch(self, action: ToggleAction) -> ToggleState:
        """Commit ``action`` and return the state it produced."""
        try:
            with self._lock:
                self._state = reduce_toggles(self._state, action)
                state = self._state
        except KeyNotFoundError as exc:
            logger.warning(
                "Rejected flip for unknown relay",
                extra={"relay": exc.key, "reason": str(exc)},
            )
            raise
        if isinstance(action, FlipRelay):
            logger.info(
                "Relay flipped",
                extra={"relay": action.key, "energized": state.relays[action.key]},
            )
        else:
            logger.info("Mode flipped", extra={"auto_mode": state.auto_mode})
        return state

    def flip_relay(self, key: str) -> Mapping[str, bool]:
        return self.dispatch(FlipRelay(key)).relays

    def flip_mode(self) -> bool:
        return self.dispatch(FlipMode()).auto_mode

    def reset(self) -> None:
        """Drop every flip and return to the mount-time defaults."""
        with self._lock:
            self._state = self._initial


@lru_cache
def build_default_store() -> ToggleStore:
    return ToggleStore.from_fixtures(DeckFixtures())
