"""Hand-off of built URLs to an HTTP client.

Nothing here sends a request; the returned :class:`httpx.Request` is meant
to be passed to ``httpx.Client.send`` by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from .config import ForecastRequestConfig, resolve_config
from .request import ForecastRequest, LocatedForecastRequest, build_forecast_url


def build_default_headers(config: ForecastRequestConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_http_request(
    request: ForecastRequest | LocatedForecastRequest,
    config: ForecastRequestConfig | None = None,
) -> httpx.Request:
    resolved = resolve_config(config)
    url = build_forecast_url(request, resolved)
    return httpx.Request("GET", url, headers=build_default_headers(resolved))


__all__ = [
    "build_default_headers",
    "build_http_request",
]
