import importlib

import pytest

from steadyui.core.browser import Browser

from fakes import FakeClock, FakeDriver

wait_module = importlib.import_module("steadyui.core.wait")


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    c = FakeClock()
    monkeypatch.setattr(wait_module, "now_ms", c.now)
    monkeypatch.setattr(wait_module, "sleep_ms", c.sleep)
    return c


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def browser(driver, clock) -> Browser:
    return Browser(driver, element_timeout_ms=1000, assertion_timeout_ms=5000)
