"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class HeroStatModel(BaseModel):
    label: str
    value: str


class SensorCardModel(BaseModel):
    """A single tile in the sensor grid."""

    label: str
    value: str
    detail: str
    accent: str = Field(..., description="Hex color used for the tile tag.")


class BarModel(BaseModel):
    """One normalized reading in the trend chart."""

    value: float
    height: float = Field(..., ge=24, le=90)
    label: str


class TrendView(BaseModel):
    """Bars derived from the voltage readings plus the peak caption."""

    bars: List[BarModel] = Field(default_factory=list)
    peak: float
    caption: str


class RelayView(BaseModel):
    name: str
    title: str
    energized: bool
    hint: str


class ModeView(BaseModel):
    auto: bool
    label: str


class ToggleView(BaseModel):
    """Current relay flags in definition order and the mode pill."""

    relays: List[RelayView] = Field(default_factory=list)
    mode: ModeView


class ActivityEntryModel(BaseModel):
    label: str
    time: str
    tone: str


class DashboardSnapshot(BaseModel):
    """Everything the control deck screen renders in one payload."""

    title: str
    deck_name: str
    hero: List[HeroStatModel] = Field(default_factory=list)
    sensors: List[SensorCardModel] = Field(default_factory=list)
    trend: TrendView
    toggles: ToggleView
    activity: List[ActivityEntryModel] = Field(default_factory=list)
