"""Query-string rendering for located forecast requests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .catalog import DailyVariable, HourlyVariable, PressureLevelVariable, Setting
from .config import FORECAST_BASE_URL

if TYPE_CHECKING:
    from .request import LocatedForecastRequest


def render_coordinates(latitude: float, longitude: float) -> str:
    return f"?latitude={latitude}&longitude={longitude}"


def render_settings(settings: Iterable[Setting]) -> list[str]:
    return [f"&{setting.key}={setting.render()}" for setting in settings]


def render_variable_list(
    name: str,
    variables: Iterable[HourlyVariable | DailyVariable],
) -> str:
    # Every entry, the first one included, is preceded by a comma.
    values = "".join(f",{variable.value}" for variable in variables)
    if not values:
        return ""
    return f"&{name}={values}"


def render_pressure_variables(variables: Iterable[PressureLevelVariable]) -> list[str]:
    return [f"&{variable.render()}" for variable in variables]


def render_forecast_url(
    request: "LocatedForecastRequest",
    *,
    base_url: str = FORECAST_BASE_URL,
) -> str:
    coordinates = request.coordinates
    fragments = [
        base_url,
        render_coordinates(coordinates.latitude, coordinates.longitude),
    ]
    fragments.extend(render_settings(request.setting_items))
    fragments.append(render_variable_list("hourly", request.hourly_variables))
    fragments.append(render_variable_list("daily", request.daily_variables))
    fragments.extend(render_pressure_variables(request.pressure_variables))
    return "".join(fragments)


__all__ = [
    "render_coordinates",
    "render_settings",
    "render_variable_list",
    "render_pressure_variables",
    "render_forecast_url",
]
