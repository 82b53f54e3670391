"""Voltage trend normalization for the bar chart."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Tuple

from models.records import Bar
from services.errors import InvalidInputError

MIN_HEIGHT = 24
MAX_HEIGHT = 90


def _coerce_readings(readings: Iterable[float]) -> Tuple[float, ...]:
    values = tuple(float(value) for value in readings)
    if not values:
        raise InvalidInputError("Readings must not be empty.")
    if max(values) <= 0:
        raise InvalidInputError("Readings need a positive maximum to normalize.")
    return values


@lru_cache(maxsize=32)
def _normalize(values: Tuple[float, ...]) -> Tuple[Bar, ...]:
    peak = max(values)
    return tuple(
        Bar(
            value=value,
            height=max(float(MIN_HEIGHT), (value / peak) * MAX_HEIGHT),
            label=f"T{index}",
        )
        for index, value in enumerate(values, start=1)
    )


class TrendNormalizer:
    """Pure normalization component; results are memoized on the reading values."""

    def normalize(self, readings: Iterable[float]) -> Tuple[Bar, ...]:
        return _normalize(_coerce_readings(readings))

    def peak(self, readings: Iterable[float]) -> float:
        return max(_coerce_readings(readings))


def normalize(readings: Iterable[float]) -> Tuple[Bar, ...]:
    return TrendNormalizer().normalize(readings)
