"""
Offline fixtures for the harness unit tests
HTTP goes through httpx.MockTransport; nothing touches a real backend
"""

from typing import Callable

import httpx
import pytest

from petclinic_e2e.config import TestConfig
from petclinic_e2e.core import RestClient

API_BASE_URL = "http://petclinic.test/petclinic/api"


@pytest.fixture
def unit_config() -> TestConfig:
    return TestConfig(
        api_base_url=API_BASE_URL,
        api_username="",
        api_password="",
        ui_base_url="http://petclinic.test:4200",
        browser="chromium",
        request_timeout=5.0,
        max_retries=2,
        retry_delay=0.0,
        health_endpoint="/pettypes",
    )


@pytest.fixture
def make_client(unit_config) -> Callable[[Callable[[httpx.Request], httpx.Response]], RestClient]:
    """Build a RestClient whose requests are answered by handler"""
    def _make(handler, config: TestConfig = None) -> RestClient:
        return RestClient(config or unit_config, transport=httpx.MockTransport(handler))
    return _make
