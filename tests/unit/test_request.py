from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError

import pytest

from open_meteo_request.catalog import (
    CurrentWeather,
    DailyVariable,
    Elevation,
    HourlyVariable,
    PastDays,
    PressureLevelVariable,
    Timezone,
    TimezoneSetting,
)
from open_meteo_request.config import ForecastRequestConfig
from open_meteo_request.errors import MissingCoordinatesError, OpenMeteoConfigError
from open_meteo_request.request import (
    Coordinates,
    ForecastRequest,
    LocatedForecastRequest,
    build_forecast_url,
)

BASE = "https://api.open-meteo.com/v1/forecast"


@pytest.mark.parametrize(
    ("latitude", "longitude", "expected"),
    [
        (50.1, 50.1, f"{BASE}?latitude=50.1&longitude=50.1"),
        (-33.87, 151.21, f"{BASE}?latitude=-33.87&longitude=151.21"),
        (0.0, 0.0, f"{BASE}?latitude=0.0&longitude=0.0"),
    ],
)
def test_coordinates_only(latitude, longitude, expected):
    assert ForecastRequest.new().coord(latitude, longitude).build() == expected


def test_reference_scenario(located_request):
    url = (
        located_request.settings(
            [Elevation(1000.1), TimezoneSetting(Timezone.explicit("Europe", "London"))]
        )
        .hourly([HourlyVariable.RAIN, HourlyVariable.CAPE])
        .daily([DailyVariable.SUNRISE, DailyVariable.SUNSET])
        .pressure_var([PressureLevelVariable.dewpoint(50), PressureLevelVariable.windspeed(30)])
        .build()
    )
    assert url == (
        f"{BASE}?latitude=50.1&longitude=50.1&elevation=1000.1"
        "&timezone=Europe%2FLondon&hourly=,rain,cape&daily=,sunrise,sunset"
        "&dewpoint_50hPa&windspeed_30hPa"
    )


def test_options_collected_before_coordinates_are_kept():
    request = (
        ForecastRequest.new()
        .hourly([HourlyVariable.RAIN])
        .settings([PastDays(2)])
        .coord(50.1, 50.1)
        .hourly([HourlyVariable.CAPE])
    )
    assert request.build() == f"{BASE}?latitude=50.1&longitude=50.1&past_days=2&hourly=,rain,cape"


def test_settings_keep_order_across_separate_calls(located_request):
    request = located_request.settings([CurrentWeather(True)]).settings([PastDays(1), PastDays(1)])
    assert request.build().endswith("&current_weather=true&past_days=1&past_days=1")


def test_empty_batches_do_not_change_output(located_request):
    expanded = located_request.settings([]).hourly([]).daily(()).pressure_var(iter([]))
    assert expanded.build() == located_request.build()
    assert expanded == located_request


def test_chaining_returns_new_instances(located_request):
    extended = located_request.hourly([HourlyVariable.RAIN])
    assert located_request.hourly_variables == ()
    assert extended.hourly_variables == (HourlyVariable.RAIN,)
    assert isinstance(extended, LocatedForecastRequest)
    assert isinstance(ForecastRequest.new().daily([DailyVariable.SUNSET]), ForecastRequest)


def test_request_is_immutable(located_request):
    with pytest.raises(FrozenInstanceError):
        located_request.coordinates = Coordinates(1.0, 2.0)  # type: ignore[misc]


def test_coord_transitions_state_once():
    request = ForecastRequest.new()
    located = request.coord(1.5, 2.5)
    assert located.coordinates == Coordinates(latitude=1.5, longitude=2.5)
    assert not hasattr(located, "coord")
    assert not hasattr(request, "build")


def test_str_renders_url(located_request):
    assert str(located_request) == located_request.build()


def test_build_forecast_url_rejects_missing_coordinates(caplog):
    request = ForecastRequest.new().hourly([HourlyVariable.RAIN])
    with caplog.at_level(logging.WARNING, logger="open_meteo_request"):
        with pytest.raises(MissingCoordinatesError):
            build_forecast_url(request)
    assert "coordinates were never set" in caplog.text


def test_build_forecast_url_accepts_located_request(located_request):
    assert build_forecast_url(located_request) == located_request.build()


def test_build_uses_configured_base_url(located_request):
    config = ForecastRequestConfig(base_url="http://localhost:8080/v1/forecast")
    assert located_request.build(config) == (
        "http://localhost:8080/v1/forecast?latitude=50.1&longitude=50.1"
    )


def test_build_rejects_invalid_config(located_request):
    with pytest.raises(OpenMeteoConfigError):
        located_request.build(ForecastRequestConfig(base_url=""))


def test_build_logs_counts_at_debug(located_request, caplog):
    with caplog.at_level(logging.DEBUG, logger="open_meteo_request"):
        located_request.hourly([HourlyVariable.RAIN]).build()
    assert "hourly=1" in caplog.text


@pytest.mark.parametrize(
    ("method", "items"),
    [
        ("settings", [HourlyVariable.RAIN]),
        ("hourly", ["rain"]),
        ("hourly", "rain"),
        ("daily", [HourlyVariable.RAIN]),
        ("pressure_var", [Elevation(1.0)]),
    ],
)
def test_wrong_item_types_are_rejected(located_request, method, items):
    with pytest.raises(TypeError):
        getattr(located_request, method)(items)


@pytest.mark.parametrize(("latitude", "longitude"), [("50.1", 1.0), (1.0, None), (True, 1.0)])
def test_coord_rejects_non_numbers(latitude, longitude):
    with pytest.raises(TypeError):
        ForecastRequest.new().coord(latitude, longitude)


def test_direct_construction_normalizes_lists_to_tuples():
    request = LocatedForecastRequest(
        hourly_variables=[HourlyVariable.RAIN],  # type: ignore[arg-type]
        coordinates=Coordinates(1.0, 2.0),
    )
    assert request.hourly_variables == (HourlyVariable.RAIN,)
