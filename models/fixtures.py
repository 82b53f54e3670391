"""Static sample data shown on the control deck."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from models.records import ActivityEntry, HeroStat, SensorCard

VOLTAGE_TREND: Tuple[float, ...] = (12.1, 11.9, 12.3, 12.6, 12.4, 12.7, 12.5)

SENSOR_CARDS: Tuple[SensorCard, ...] = (
    SensorCard(label="Temperature", value="24.5 C", detail="Stable", accent="#0ea5e9"),
    SensorCard(label="Humidity", value="52 %", detail="Healthy band", accent="#06b6d4"),
    SensorCard(label="Voltage", value="12.4 V", detail="Charging", accent="#22c55e"),
    SensorCard(label="Current", value="1.8 A", detail="Nominal draw", accent="#f97316"),
)

ACTIVITY_FEED: Tuple[ActivityEntry, ...] = (
    ActivityEntry(label="Pump primed", time="2m ago", tone="#0ea5e9"),
    ActivityEntry(label="Auto mode tuned", time="12m ago", tone="#06b6d4"),
    ActivityEntry(label="Firmware ping OK", time="26m ago", tone="#22c55e"),
    ActivityEntry(label="Light array trimmed", time="1h ago", tone="#f97316"),
)

HERO_STATS: Tuple[HeroStat, ...] = (
    HeroStat(label="Runtime", value="6h 21m"),
    HeroStat(label="Tasks Queued", value="03"),
    HeroStat(label="Ping", value="18 ms"),
)

DEFAULT_RELAYS: Mapping[str, bool] = MappingProxyType(
    {"pump": True, "fan": False, "lights": True, "aux": False}
)

DEFAULT_AUTO_MODE = True


@dataclass(frozen=True)
class DeckFixtures:
    """Immutable bundle of everything the deck renders at mount time."""

    readings: Tuple[float, ...] = VOLTAGE_TREND
    sensor_cards: Tuple[SensorCard, ...] = SENSOR_CARDS
    activity_feed: Tuple[ActivityEntry, ...] = ACTIVITY_FEED
    hero_stats: Tuple[HeroStat, ...] = HERO_STATS
    relays: Mapping[str, bool] = field(default_factory=lambda: DEFAULT_RELAYS)
    auto_mode: bool = DEFAULT_AUTO_MODE
