"""Public package exports for the Open-Meteo forecast request builder."""

from .catalog import (
    CellSelection,
    CellSelectionSetting,
    CurrentWeather,
    DailyVariable,
    Elevation,
    EndDate,
    ForecastDays,
    HourlyVariable,
    PastDays,
    PrecipitationUnit,
    PrecipitationUnitSetting,
    PressureLevelVariable,
    PressureMeasurement,
    Setting,
    SpeedUnit,
    StartDate,
    TemperatureUnit,
    TemperatureUnitSetting,
    TimeFormat,
    TimeFormatSetting,
    Timezone,
    TimezoneSetting,
    WindspeedUnitSetting,
)
from .config import FORECAST_BASE_URL, ForecastRequestConfig
from .errors import MissingCoordinatesError, OpenMeteoConfigError, OpenMeteoRequestError
from .request import Coordinates, ForecastRequest, LocatedForecastRequest, build_forecast_url

__all__ = [
    "FORECAST_BASE_URL",
    "ForecastRequestConfig",
    "ForecastRequest",
    "LocatedForecastRequest",
    "Coordinates",
    "build_forecast_url",
    "OpenMeteoRequestError",
    "MissingCoordinatesError",
    "OpenMeteoConfigError",
    "TemperatureUnit",
    "SpeedUnit",
    "PrecipitationUnit",
    "TimeFormat",
    "CellSelection",
    "HourlyVariable",
    "DailyVariable",
    "PressureMeasurement",
    "PressureLevelVariable",
    "Timezone",
    "Setting",
    "Elevation",
    "CurrentWeather",
    "TemperatureUnitSetting",
    "WindspeedUnitSetting",
    "PrecipitationUnitSetting",
    "TimeFormatSetting",
    "TimezoneSetting",
    "PastDays",
    "ForecastDays",
    "StartDate",
    "EndDate",
    "CellSelectionSetting",
]
