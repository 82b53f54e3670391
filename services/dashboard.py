"""Composition of fixtures, trend bars and toggle state for rendering."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from app.schemas import (
    ActivityEntryModel,
    BarModel,
    DashboardSnapshot,
    HeroStatModel,
    ModeView,
    RelayView,
    SensorCardModel,
    ToggleView,
    TrendView,
)
from datastore.toggle_store import ToggleStore, build_default_store
from models.fixtures import DeckFixtures
from services.toggles import FlipMode, FlipRelay, ToggleState
from services.trend import TrendNormalizer
from settings import get_settings

logger = logging.getLogger(__name__)

ACTIVE_HINT = "Active and within limits"
STANDBY_HINT = "Standby - tap to arm"


def mode_label(auto_mode: bool) -> str:
    return "Auto" if auto_mode else "Manual"


def relay_hint(energized: bool) -> str:
    return ACTIVE_HINT if energized else STANDBY_HINT


class DashboardService:
    """Builds dashboard snapshots and forwards taps to the toggle store."""

    def __init__(
        self,
        fixtures: DeckFixtures,
        store: ToggleStore,
        normalizer: TrendNormalizer,
        title: str = "expoTestApp",
        deck_name: str = "Control Deck",
    ) -> None:
        self.fixtures = fixtures
        self.store = store
        self.title = title
        self.deck_name = deck_name
        # Bars are read once at mount; readings never change afterwards.
        self.bars = normalizer.normalize(fixtures.readings)
        self.peak = normalizer.peak(fixtures.readings)
        logger.info(
            "Trend normalized",
            extra={"bar_count": len(self.bars), "peak": self.peak},
        )

    def trend(self) -> TrendView:
        return TrendView(
            bars=[BarModel(value=bar.value, height=bar.height, label=bar.label) for bar in self.bars],
            peak=self.peak,
            caption=f"{self.peak:g} V peak",
        )

    def toggles(self) -> ToggleView:
        return self._toggle_view(self.store.state)

    def flip_relay(self, key: str) -> ToggleView:
        """Negate one relay; raises ``KeyNotFoundError`` for unknown names."""
        return self._toggle_view(self.store.dispatch(FlipRelay(key)))

    def flip_mode(self) -> ToggleView:
        return self._toggle_view(self.store.dispatch(FlipMode()))

    def snapshot(self) -> DashboardSnapshot:
        fixtures = self.fixtures
        return DashboardSnapshot(
            title=self.title,
            deck_name=self.deck_name,
            hero=[HeroStatModel(label=stat.label, value=stat.value) for stat in fixtures.hero_stats],
            sensors=[
                SensorCardModel(
                    label=card.label,
                    value=card.value,
                    detail=card.detail,
                    accent=card.accent,
                )
                for card in fixtures.sensor_cards
            ],
            trend=self.trend(),
            toggles=self.toggles(),
            activity=[
                ActivityEntryModel(label=entry.label, time=entry.time, tone=entry.tone)
                for entry in fixtures.activity_feed
            ],
        )

    def shutdown(self) -> None:
        """Discard toggle state when the deck is unmounted."""
        self.store.reset()

    @staticmethod
    def _toggle_view(state: ToggleState) -> ToggleView:
        relays = [
            RelayView(
                name=name,
                title=name.upper(),
                energized=energized,
                hint=relay_hint(energized),
            )
            for name, energized in state.relays.items()
        ]
        return ToggleView(
            relays=relays,
            mode=ModeView(auto=state.auto_mode, label=mode_label(state.auto_mode)),
        )


@lru_cache
def build_default_dashboard(title: Optional[str] = None) -> DashboardService:
    """Factory that wires the dashboard with the shipped sample data."""
    settings = get_settings()
    return DashboardService(
        fixtures=DeckFixtures(),
        store=build_default_store(),
        normalizer=TrendNormalizer(),
        title=settings.app_title if title is None else title,
        deck_name=settings.deck_name,
    )
