"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Bar:
    """One normalized reading in the voltage trend chart."""

    value: float
    height: float
    label: str


@dataclass(frozen=True, slots=True)
class SensorCard:
    label: str
    value: str
    detail: str
    accent: str


@dataclass(frozen=True, slots=True)
class ActivityEntry:
    label: str
    time: str
    tone: str


@dataclass(frozen=True, slots=True)
class HeroStat:
    label: str
    value: str
