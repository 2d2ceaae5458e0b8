"""Builder configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import OpenMeteoConfigError

FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(slots=True, frozen=True)
class ForecastRequestConfig:
    """Runtime configuration for URL construction."""

    base_url: str = FORECAST_BASE_URL
    user_agent: str = "open-meteo-request/0.1.0"

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("https://", "http://")):
            raise ValueError("base_url must use http or https")
        if "?" in self.base_url:
            raise ValueError("base_url must not contain a query string")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")


def resolve_config(config: ForecastRequestConfig | None) -> ForecastRequestConfig:
    resolved = config or ForecastRequestConfig()
    try:
        resolved.validate()
    except ValueError as exc:
        raise OpenMeteoConfigError(str(exc)) from exc
    return resolved


__all__ = [
    "FORECAST_BASE_URL",
    "ForecastRequestConfig",
    "resolve_config",
]
