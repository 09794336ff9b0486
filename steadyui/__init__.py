"""
steady-ui - deterministic browser assertions on top of Selenium.

Usage:
    from steadyui import Browser, BrowserKind, BrowserSpec, SessionConfig

    config = SessionConfig(
        browser=BrowserSpec(kind=BrowserKind.chrome),
        element_timeout_ms=5000,
        assertion_timeout_ms=10000,
    )
    with Browser.create(config) as browser:
        browser.url("https://example.com")
        browser.displayed("h1")
"""

__version__ = "0.1.0"

from steadyui.core.browser import Browser
from steadyui.core.errors import (
    AlertTextMismatchError,
    ElementCheckedError,
    ElementLookupError,
    ElementNotCheckedError,
    ElementsNotDisplayedError,
    NoMatchingOptionError,
    OptionNotSelectedError,
    ReadOnlyElementError,
    SessionClosedError,
    SteadyUIError,
    TextMismatchError,
    TextNotFoundError,
    UIAssertionError,
    UnexpectedPageError,
)
from steadyui.core.wait import attempt, wait
from steadyui.utils.config import BrowserKind, BrowserSpec, SessionConfig, Settings, get_settings

__all__ = [
    "__version__",
    "Browser",
    "BrowserKind",
    "BrowserSpec",
    "SessionConfig",
    "Settings",
    "get_settings",
    "wait",
    "attempt",
    "SteadyUIError",
    "UIAssertionError",
    "SessionClosedError",
    "ElementLookupError",
    "ElementsNotDisplayedError",
    "TextMismatchError",
    "TextNotFoundError",
    "ElementNotCheckedError",
    "ElementCheckedError",
    "NoMatchingOptionError",
    "OptionNotSelectedError",
    "AlertTextMismatchError",
    "ReadOnlyElementError",
    "UnexpectedPageError",
]
