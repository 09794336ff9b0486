# steadyui/drivers/factory.py
from __future__ import annotations

"""Driver factory
-----------------
Builds a Selenium WebDriver for a BrowserSpec. The dispatch over BrowserKind
is exhaustive: a new kind without a branch fails type checking at
`assert_never`.
"""

import subprocess
import sys
from pathlib import Path
from typing import List

from typing_extensions import assert_never

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.common.service import Service
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver

from steadyui.utils.config import BrowserKind, BrowserSpec
from steadyui.utils.logger import get_logger

log = get_logger(__name__)

IS_WINDOWS = sys.platform == "win32"

DRIVER_EXECUTABLES = {
    BrowserKind.chrome: "chromedriver",
    BrowserKind.firefox: "geckodriver",
    BrowserKind.phantomjs: "phantomjs",
}

CHROME_ARGUMENTS = (
    "--disable-extensions",
    "disable-infobars",
    # chromedriver issue 799: suppresses the unsupported-flag warning bar
    "test-type",
)


# ---------- PhantomJS (no binding in Selenium 4) ----------


class PhantomJSService(Service):
    """Runs `phantomjs --webdriver=<port>` (GhostDriver)."""

    def command_line_args(self) -> List[str]:
        return [f"--webdriver={self.port}"]


class PhantomJSOptions(ArgOptions):
    @property
    def default_capabilities(self) -> dict:
        return {"browserName": "phantomjs"}


class PhantomJSDriver(webdriver.Remote):
    """Remote driver that owns its GhostDriver process."""

    def __init__(self, service: PhantomJSService, options: PhantomJSOptions | None = None) -> None:
        self.service = service
        self.service.start()
        try:
            super().__init__(command_executor=service.service_url, options=options or PhantomJSOptions())
        except Exception:
            self.service.stop()
            raise

    def quit(self) -> None:
        try:
            super().quit()
        finally:
            self.service.stop()


# ---------- Helpers ----------


def driver_executable(kind: BrowserKind, directory: Path) -> Path:
    name = DRIVER_EXECUTABLES[kind]
    return directory / (f"{name}.exe" if IS_WINDOWS else name)


def _service_kwargs() -> dict:
    # Keep driver processes from opening a console window on Windows
    if IS_WINDOWS:
        return {"popen_kw": {"creation_flags": subprocess.CREATE_NO_WINDOW}}
    return {}


def chrome_options() -> webdriver.ChromeOptions:
    options = webdriver.ChromeOptions()
    for arg in CHROME_ARGUMENTS:
        options.add_argument(arg)
    return options


# ---------- Public API ----------


def create_driver(spec: BrowserSpec) -> WebDriver:
    """
    Launch the driver process for `spec` and return a connected WebDriver.
    Start-up failures propagate as Selenium raised them.
    """
    kind = spec.kind
    directory = spec.resolve_directory()
    executable = str(driver_executable(kind, directory))
    log.info(f"Starting {kind.value} driver from {directory}")

    if kind is BrowserKind.chrome:
        service = ChromeService(executable_path=executable, **_service_kwargs())
        return webdriver.Chrome(service=service, options=chrome_options())
    elif kind is BrowserKind.firefox:
        service = FirefoxService(executable_path=executable, **_service_kwargs())
        return webdriver.Firefox(service=service)
    elif kind is BrowserKind.phantomjs:
        service = PhantomJSService(executable_path=executable, **_service_kwargs())
        return PhantomJSDriver(service)
    else:
        assert_never(kind)


__all__ = [
    "create_driver",
    "driver_executable",
    "chrome_options",
    "PhantomJSDriver",
    "PhantomJSService",
    "PhantomJSOptions",
    "CHROME_ARGUMENTS",
]
