"""Fixtures for module tests using a WireMock testcontainer."""

from collections.abc import Generator

import pytest
from testcontainers.core import testcontainers_config
from wiremock.constants import Config
from wiremock.testing.testcontainer import WireMockContainer


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def wiremock_server() -> Generator[WireMockContainer, None, None]:
    """Start WireMock container standing in for the Power BI push API."""
    with WireMockContainer(secure=False) as wm:
        Config.base_url = wm.get_url("__admin")
        yield wm
        print(wm.get_logs())


@pytest.fixture(scope="session")
def push_url(wiremock_server: WireMockContainer) -> str:
    """URL of the push endpoint as seen from the test process."""
    return wiremock_server.get_url("datasets/runs/rows")
