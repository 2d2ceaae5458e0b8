"""Option catalog for the forecast endpoint.

Every member's value is the identifier the forecast API expects verbatim,
so adding upstream vocabulary is a one-line change here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class SpeedUnit(str, Enum):
    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KN = "kn"


class PrecipitationUnit(str, Enum):
    MM = "mm"
    INCH = "inch"


class TimeFormat(str, Enum):
    ISO8601 = "iso8601"
    UNIXTIME = "unixtime"


class CellSelection(str, Enum):
    """Grid cell strategy used to answer a coordinate query."""

    LAND = "land"
    SEA = "sea"
    NEAREST = "nearest"


class HourlyVariable(str, Enum):
    TEMPERATURE_2M = "temperature_2m"
    RELATIVE_HUMIDITY_2M = "relative_humidity_2m"
    DEWPOINT_2M = "dewpoint_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    PRESSURE_MSL = "pressure_msl"
    SURFACE_PRESSURE = "surface_pressure"
    CLOUDCOVER = "cloudcover"
    CLOUDCOVER_LOW = "cloudcover_low"
    CLOUDCOVER_MID = "cloudcover_mid"
    CLOUDCOVER_HIGH = "cloudcover_high"
    WINDSPEED_10M = "windspeed_10m"
    WINDSPEED_80M = "windspeed_80m"
    WINDSPEED_120M = "windspeed_120m"
    WINDSPEED_180M = "windspeed_180m"
    WINDDIRECTION_10M = "winddirection_10m"
    WINDDIRECTION_80M = "winddirection_80m"
    WINDDIRECTION_120M = "winddirection_120m"
    WINDDIRECTION_180M = "winddirection_180m"
    WINDGUSTS_10M = "windgusts_10m"
    SHORTWAVE_RADIATION = "shortwave_radiation"
    DIRECT_RADIATION = "direct_radiation"
    DIRECT_NORMAL_IRRADIANCE = "direct_normal_irradiance"
    DIFFUSE_RADIATION = "diffuse_radiation"
    VAPOR_PRESSURE_DEFICIT = "vapor_pressure_deficit"
    CAPE = "cape"
    EVAPOTRANSPIRATION = "evapotranspiration"
    ET0_FAO_EVAPOTRANSPIRATION = "et0_fao_evapotranspiration"
    PRECIPITATION = "precipitation"
    SNOWFALL = "snowfall"
    PRECIPITATION_PROBABILITY = "precipitation_probability"
    RAIN = "rain"
    SHOWERS = "showers"
    WEATHERCODE = "weathercode"
    SNOW_DEPTH = "snow_depth"
    FREEZINGLEVEL_HEIGHT = "freezinglevel_height"
    VISIBILITY = "visibility"
    SOIL_TEMPERATURE_0CM = "soil_temperature_0cm"
    SOIL_TEMPERATURE_6CM = "soil_temperature_6cm"
    SOIL_TEMPERATURE_18CM = "soil_temperature_18cm"
    SOIL_TEMPERATURE_54CM = "soil_temperature_54cm"
    SOIL_MOISTURE_0_1CM = "soil_moisture_0_1cm"
    SOIL_MOISTURE_1_3CM = "soil_moisture_1_3cm"
    SOIL_MOISTURE_3_9CM = "soil_moisture_3_9cm"
    SOIL_MOISTURE_9_27CM = "soil_moisture_9_27cm"
    SOIL_MOISTURE_27_81CM = "soil_moisture_27_81cm"
    IS_DAY = "is_day"


class DailyVariable(str, Enum):
    TEMPERATURE_2M_MAX = "temperature_2m_max"
    TEMPERATURE_2M_MIN = "temperature_2m_min"
    APPARENT_TEMPERATURE_MAX = "apparent_temperature_max"
    APPARENT_TEMPERATURE_MIN = "apparent_temperature_min"
    PRECIPITATION_SUM = "precipitation_sum"
    RAIN_SUM = "rain_sum"
    SHOWERS_SUM = "showers_sum"
    SNOWFALL_SUM = "snowfall_sum"
    PRECIPITATION_HOURS = "precipitation_hours"
    PRECIPITATION_PROBABILITY_MAX = "precipitation_probability_max"
    PRECIPITATION_PROBABILITY_MIN = "precipitation_probability_min"
    PRECIPITATION_PROBABILITY_MEAN = "precipitation_probability_mean"
    WEATHERCODE = "weathercode"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    WINDSPEED_10M_MAX = "windspeed_10m_max"
    WINDGUSTS_10M_MAX = "windgusts_10m_max"
    WINDDIRECTION_10M_DOMINANT = "winddirection_10m_dominant"
    SHORTWAVE_RADIATION_SUM = "shortwave_radiation_sum"
    ET0_FAO_EVAPOTRANSPIRATION = "et0_fao_evapotranspiration"
    UV_INDEX_MAX = "uv_index_max"
    UV_INDEX_CLEAR_SKY_MAX = "uv_index_clear_sky_max"


class PressureMeasurement(str, Enum):
    TEMPERATURE = "temperature"
    RELATIVEHUMIDITY = "relativehumidity"
    DEWPOINT = "dewpoint"
    CLOUDCOVER = "cloudcover"
    WINDSPEED = "windspeed"
    WINDDIRECTION = "winddirection"
    GEOPOTENTIAL_HEIGHT = "geopotential_height"

    def at(self, level: int) -> "PressureLevelVariable":
        return PressureLevelVariable(self, level)


# TODO: restrict levels to the ones the API publishes (1000 down to 30 hPa).
@dataclass(slots=True, frozen=True)
class PressureLevelVariable:
    """A measurement requested at a pressure level given in hectopascals."""

    measurement: PressureMeasurement
    level: int

    def render(self) -> str:
        return f"{self.measurement.value}_{self.level}hPa"

    @classmethod
    def temperature(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.TEMPERATURE, level)

    @classmethod
    def relativehumidity(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.RELATIVEHUMIDITY, level)

    @classmethod
    def dewpoint(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.DEWPOINT, level)

    @classmethod
    def cloudcover(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.CLOUDCOVER, level)

    @classmethod
    def windspeed(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.WINDSPEED, level)

    @classmethod
    def winddirection(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.WINDDIRECTION, level)

    @classmethod
    def geopotential_height(cls, level: int) -> "PressureLevelVariable":
        return cls(PressureMeasurement.GEOPOTENTIAL_HEIGHT, level)


@dataclass(slots=True, frozen=True)
class Timezone:
    """Either ``auto`` or an explicit ``continent/country`` zone name."""

    continent: str | None = None
    country: str | None = None

    def __post_init__(self) -> None:
        if (self.continent is None) != (self.country is None):
            raise ValueError("continent and country must be given together")

    @classmethod
    def auto(cls) -> "Timezone":
        return cls()

    @classmethod
    def explicit(cls, continent: str, country: str) -> "Timezone":
        return cls(continent, country)

    @property
    def is_auto(self) -> bool:
        return self.continent is None

    def render(self) -> str:
        if self.is_auto:
            return "auto"
        # The slash is the only character encoded anywhere in the query.
        return f"{self.continent}%2F{self.country}"


class Setting(ABC):
    """One optional named query parameter."""

    __slots__ = ()

    key: ClassVar[str]

    @abstractmethod
    def render(self) -> str:
        """Return the value fragment placed after ``<key>=``."""


@dataclass(slots=True, frozen=True)
class Elevation(Setting):
    key: ClassVar[str] = "elevation"

    value: float

    def render(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True)
class CurrentWeather(Setting):
    key: ClassVar[str] = "current_weather"

    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(slots=True, frozen=True)
class TemperatureUnitSetting(Setting):
    key: ClassVar[str] = "temperature_unit"

    value: TemperatureUnit

    def render(self) -> str:
        return self.value.value


@dataclass(slots=True, frozen=True)
class WindspeedUnitSetting(Setting):
    key: ClassVar[str] = "windspeed_unit"

    value: SpeedUnit

    def render(self) -> str:
        return self.value.value


@dataclass(slots=True, frozen=True)
class PrecipitationUnitSetting(Setting):
    key: ClassVar[str] = "precipitation_unit"

    value: PrecipitationUnit

    def render(self) -> str:
        return self.value.value


@dataclass(slots=True, frozen=True)
class TimeFormatSetting(Setting):
    key: ClassVar[str] = "timeformat"

    value: TimeFormat

    def render(self) -> str:
        return self.value.value


@dataclass(slots=True, frozen=True)
class TimezoneSetting(Setting):
    key: ClassVar[str] = "timezone"

    value: Timezone

    def render(self) -> str:
        return self.value.render()


@dataclass(slots=True, frozen=True)
class PastDays(Setting):
    key: ClassVar[str] = "past_days"

    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True)
class ForecastDays(Setting):
    key: ClassVar[str] = "forecast_days"

    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True)
class StartDate(Setting):
    """Free-form date string, passed through unchecked."""

    key: ClassVar[str] = "start_date"

    value: str

    def render(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class EndDate(Setting):
    key: ClassVar[str] = "end_date"

    value: str

    def render(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class CellSelectionSetting(Setting):
    key: ClassVar[str] = "cell_selection"

    value: CellSelection

    def render(self) -> str:
        return self.value.value


__all__ = [
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
