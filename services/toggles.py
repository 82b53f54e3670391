"""Relay and mode toggle transitions.

Every change to the deck's switches goes through :func:`reduce_toggles`, a
pure ``(state, action) -> state`` function, so the behavior can be tested
without a running server.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import reduce
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from services.errors import KeyNotFoundError


@dataclass(frozen=True)
class ToggleState:
    """Relay flags keyed by relay name plus the standalone automatic-mode flag."""

    relays: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))
    auto_mode: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.relays, MappingProxyType):
            object.__setattr__(self, "relays", MappingProxyType(dict(self.relays)))


@dataclass(frozen=True)
class FlipRelay:
    key: str


@dataclass(frozen=True)
class FlipMode:
    pass


ToggleAction = Union[FlipRelay, FlipMode]


def flip_relay(relays: Mapping[str, bool], key: str) -> Mapping[str, bool]:
    """Return a copy of ``relays`` with ``key`` negated, keeping definition order."""
    if key not in relays:
        raise KeyNotFoundError(key)
    updated = dict(relays)
    updated[key] = not relays[key]
    return MappingProxyType(updated)


def reduce_toggles(state: ToggleState, action: ToggleAction) -> ToggleState:
    if isinstance(action, FlipRelay):
        return replace(state, relays=flip_relay(state.relays, action.key))
    if isinstance(action, FlipMode):
        return replace(state, auto_mode=not state.auto_mode)
    raise TypeError(f"Unsupported toggle action: {action!r}")


def replay(state: ToggleState, actions: Iterable[ToggleAction]) -> ToggleState:
    """Apply ``actions`` in order, stopping at the first failing one."""
    return reduce(reduce_toggles, actions, state)
