"""
Drivers package
---------------
Turns a BrowserSpec into a running Selenium WebDriver.
"""

from .factory import create_driver, driver_executable

__all__ = ["create_driver", "driver_executable"]
