"""Forecast request builder.

A request starts as :class:`ForecastRequest`, which carries no coordinates
and cannot be rendered. :meth:`ForecastRequest.coord` returns a
:class:`LocatedForecastRequest`, the only type exposing :meth:`build`.
Every chaining call returns a new instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TypeVar

from .catalog import DailyVariable, HourlyVariable, PressureLevelVariable, Setting
from .config import ForecastRequestConfig, resolve_config
from .errors import MissingCoordinatesError
from .serializer import render_forecast_url

logger = logging.getLogger("open_meteo_request")

_RequestT = TypeVar("_RequestT", bound="_ForecastOptions")
_ItemT = TypeVar("_ItemT")


def _collect(items: Iterable[_ItemT], item_type: type[_ItemT], *, name: str) -> tuple[_ItemT, ...]:
    if isinstance(items, (str, bytes)):
        raise TypeError(f"{name} must be an iterable of {item_type.__name__}, not str")
    collected = tuple(items)
    for item in collected:
        if not isinstance(item, item_type):
            raise TypeError(f"{name} entries must be {item_type.__name__}")
    return collected


def _ensure_number(value: float, *, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number")
    return value


@dataclass(slots=True, frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class _ForecastOptions:
    setting_items: tuple[Setting, ...] = ()
    hourly_variables: tuple[HourlyVariable, ...] = ()
    daily_variables: tuple[DailyVariable, ...] = ()
    pressure_variables: tuple[PressureLevelVariable, ...] = ()

    def __post_init__(self) -> None:
        for name in (
            "setting_items",
            "hourly_variables",
            "daily_variables",
            "pressure_variables",
        ):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def settings(self: _RequestT, items: Iterable[Setting]) -> _RequestT:
        added = _collect(items, Setting, name="settings")
        return replace(self, setting_items=self.setting_items + added)

    def hourly(self: _RequestT, items: Iterable[HourlyVariable]) -> _RequestT:
        added = _collect(items, HourlyVariable, name="hourly")
        return replace(self, hourly_variables=self.hourly_variables + added)

    def daily(self: _RequestT, items: Iterable[DailyVariable]) -> _RequestT:
        added = _collect(items, DailyVariable, name="daily")
        return replace(self, daily_variables=self.daily_variables + added)

    def pressure_var(self: _RequestT, items: Iterable[PressureLevelVariable]) -> _RequestT:
        added = _collect(items, PressureLevelVariable, name="pressure_var")
        return replace(self, pressure_variables=self.pressure_variables + added)


@dataclass(slots=True, frozen=True)
class ForecastRequest(_ForecastOptions):
    """Request without coordinates."""

    @classmethod
    def new(cls) -> "ForecastRequest":
        return cls()

    def coord(self, latitude: float, longitude: float) -> "LocatedForecastRequest":
        """Set the mandatory coordinates, keeping everything collected so far."""
        coordinates = Coordinates(
            latitude=_ensure_number(latitude, name="latitude"),
            longitude=_ensure_number(longitude, name="longitude"),
        )
        return LocatedForecastRequest(
            setting_items=self.setting_items,
            hourly_variables=self.hourly_variables,
            daily_variables=self.daily_variables,
            pressure_variables=self.pressure_variables,
            coordinates=coordinates,
        )


@dataclass(slots=True, frozen=True)
class LocatedForecastRequest(_ForecastOptions):
    """Request with coordinates, ready to be rendered."""

    coordinates: Coordinates = field(kw_only=True)

    def build(self, config: ForecastRequestConfig | None = None) -> str:
        resolved = resolve_config(config)
        url = render_forecast_url(self, base_url=resolved.base_url)
        logger.debug(
            "forecast url built settings=%s hourly=%s daily=%s pressure=%s",
            len(self.setting_items),
            len(self.hourly_variables),
            len(self.daily_variables),
            len(self.pressure_variables),
        )
        return url

    def __str__(self) -> str:
        return self.build()


def build_forecast_url(
    request: ForecastRequest | LocatedForecastRequest,
    config: ForecastRequestConfig | None = None,
) -> str:
    """Render either request state, rejecting one that has no coordinates."""

    if isinstance(request, LocatedForecastRequest):
        return request.build(config)
    logger.warning("forecast url rejected: coordinates were never set")
    raise MissingCoordinatesError()


__all__ = [
    "Coordinates",
    "ForecastRequest",
    "LocatedForecastRequest",
    "build_forecast_url",
]
