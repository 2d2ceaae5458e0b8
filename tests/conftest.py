from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from open_meteo_request import ForecastRequest  # noqa: E402


@pytest.fixture
def located_request():
    return ForecastRequest.new().coord(50.1, 50.1)
