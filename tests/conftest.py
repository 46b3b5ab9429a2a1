"""Shared test fixtures."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from iss_flyover.config import Settings
from iss_flyover.passes.service import FlyoverService


@pytest.fixture
def settings() -> Settings:
    """Create test settings pointing at fake upstream hosts."""
    return Settings(
        ip_service_url="https://ip.test/?format=json",
        geo_service_url="https://geo.test/json/{ip}",
        flyover_service_url="http://iss.test/iss-pass.json?lat={latitude}&lon={longitude}",
        request_timeout=5.0,
        max_workers=2,
    )


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Build a fake requests.Response with a status code and text body."""

    def _make(body: str, status_code: int = 200) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = body

        def _json() -> Any:
            return json.loads(body)

        response.json.side_effect = _json
        return response

    return _make


@pytest.fixture
def flyover_service(settings: Settings) -> FlyoverService:
    """Create a FlyoverService with test settings."""
    service = FlyoverService(settings)
    yield service  # type: ignore[misc]
    service.shutdown()
