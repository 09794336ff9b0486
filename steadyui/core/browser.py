# steadyui/core/browser.py
from __future__ import annotations

"""Browser session
------------------
Wraps one WebDriver with an element-lookup timeout and an assertion timeout.
Assertions poll through the wait engine and re-query their elements on every
poll; actions run once, after a (waited) lookup.
"""

from typing import Callable, List, Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

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
    TextMismatchError,
    TextNotFoundError,
    UnexpectedPageError,
)
from steadyui.core.wait import WaitFailure, WaitResult, WaitSuccess, attempt, wait
from steadyui.drivers.factory import create_driver
from steadyui.selectors.elements import is_read_only, is_shown, option_selector, query, read_text
from steadyui.utils.config import SessionConfig, Settings, get_settings
from steadyui.utils.logger import get_logger, log_with_context
from steadyui.utils.timing import measure


class Browser:
    """
    A live browser plus the timeouts used to wait on it.

    Usage:
        with Browser.create(SessionConfig(element_timeout_ms=5000, assertion_timeout_ms=5000)) as b:
            b.url("https://example.com/login")
            b.set_input("alice", "#user")
            b.click("button[type=submit]")
            b.element_text_equals("Welcome", ".greeting")
    """

    def __init__(self, driver: WebDriver, element_timeout_ms: int, assertion_timeout_ms: int) -> None:
        self._driver: Optional[WebDriver] = driver
        self.element_timeout_ms = element_timeout_ms
        self.assertion_timeout_ms = assertion_timeout_ms
        self.log = log_with_context(get_logger(__name__), session=f"{id(self):x}")

    # ---------- Lifecycle ----------

    @classmethod
    def create(cls, config: SessionConfig) -> "Browser":
        log = get_logger(__name__)
        try:
            driver = create_driver(config.browser)
        except Exception as e:
            log.error(f"Could not start {config.browser.kind.value}: {e}")
            raise
        return cls(driver, config.element_timeout_ms, config.assertion_timeout_ms)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Browser":
        return cls.create((settings or get_settings()).session_config())

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            raise SessionClosedError()
        return self._driver

    @property
    def closed(self) -> bool:
        return self._driver is None

    def quit(self) -> None:
        driver = self.driver
        self._driver = None
        driver.quit()
        self.log.info("Browser session closed")

    def __enter__(self) -> "Browser":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.closed:
            self.quit()

    # ---------- Waiting ----------

    def _wait_for_assertion(self, assertion: Callable[[], None]) -> None:
        # A closed session fails now, not after the timeout
        if self.closed:
            raise SessionClosedError()
        # Any exception inside the assertion is a failed poll
        wait(self.assertion_timeout_ms, lambda: attempt(assertion))

    def find_elements(self, selector: str) -> List[WebElement]:
        driver = self.driver

        def probe() -> WaitResult[List[WebElement]]:
            elements = query(driver, selector)
            if not elements:
                return WaitFailure(ElementLookupError(selector))
            return WaitSuccess(elements)

        return wait(self.element_timeout_ms, probe)

    # ---------- Navigation ----------

    @measure("url")
    def url(self, target: str) -> None:
        self.log.debug(f"Navigating to {target}")
        self.driver.get(target)

    def is_on_page(self, expected_url: str) -> None:
        def assertion() -> None:
            current = self.driver.current_url
            if current != expected_url:
                raise UnexpectedPageError(expected_url, current)

        self._wait_for_assertion(assertion)

    # ---------- Assertions ----------

    def displayed(self, selector: str) -> None:
        def assertion() -> None:
            if not any(is_shown(e) for e in self.find_elements(selector)):
                raise ElementsNotDisplayedError(selector)

        self._wait_for_assertion(assertion)

    def element_text_equals(self, text: str, selector: str) -> None:
        def assertion() -> None:
            texts = [read_text(e) for e in self.find_elements(selector)]
            mismatched = [t for t in texts if t != text]
            if mismatched:
                raise TextMismatchError(selector, text, mismatched)

        self._wait_for_assertion(assertion)

    def text_exists_in_elements(self, text: str, selector: str) -> None:
        def assertion() -> None:
            if not any(read_text(e) == text for e in self.find_elements(selector)):
                raise TextNotFoundError(selector, text)

        self._wait_for_assertion(assertion)

    def are_elements_checked(self, selector: str) -> None:
        def assertion() -> None:
            for element in self.find_elements(selector):
                if not element.is_selected():
                    raise ElementNotCheckedError(selector, element)

        self._wait_for_assertion(assertion)

    def are_elements_unchecked(self, selector: str) -> None:
        def assertion() -> None:
            for element in self.find_elements(selector):
                if element.is_selected():
                    raise ElementCheckedError(selector, element)

        self._wait_for_assertion(assertion)

    def is_option_selected(self, option: str, selector: str) -> None:
        def assertion() -> None:
            options = self.find_elements(option_selector(selector))
            match = next((o for o in options if o.text == option), None)
            if match is None:
                raise NoMatchingOptionError(option, selector)
            if not match.is_selected():
                raise OptionNotSelectedError(option, selector)

        self._wait_for_assertion(assertion)

    def alert_text_equals(self, text: str) -> None:
        def assertion() -> None:
            # NoAlertPresentException counts as a failed poll too
            actual = self.driver.switch_to.alert.text
            if actual != text:
                raise AlertTextMismatchError(text, actual)

        self._wait_for_assertion(assertion)

    # ---------- Actions ----------

    @measure("click")
    def click(self, selector: str) -> None:
        for element in self.find_elements(selector):
            element.click()

    def _writable_elements(self, selector: str) -> List[WebElement]:
        elements = self.find_elements(selector)
        for element in elements:
            if is_read_only(element):
                raise ReadOnlyElementError(selector, element)
        return elements

    @measure("clear_input")
    def clear_input(self, selector: str) -> None:
        for element in self._writable_elements(selector):
            element.clear()

    @measure("set_input")
    def set_input(self, text: str, selector: str) -> None:
        for element in self._writable_elements(selector):
            element.clear()
            element.send_keys(text)

    def _set_checked(self, selector: str, checked: bool) -> None:
        for element in self.find_elements(selector):
            if element.is_selected() != checked:
                element.click()

    @measure("check_elements")
    def check_elements(self, selector: str) -> None:
        self._set_checked(selector, True)

    @measure("uncheck_elements")
    def uncheck_elements(self, selector: str) -> None:
        self._set_checked(selector, False)

    @measure("set_select_option")
    def set_select_option(self, option: str, selector: str) -> None:
        matches = [o for o in self.find_elements(option_selector(selector)) if o.text == option]
        if not matches:
            raise NoMatchingOptionError(option, selector)
        # all matches, not just the first
        for element in matches:
            element.click()

    @measure("accept_alert")
    def accept_alert(self) -> None:
        self.driver.switch_to.alert.accept()

    @measure("dismiss_alert")
    def dismiss_alert(self) -> None:
        self.driver.switch_to.alert.dismiss()


__all__ = ["Browser"]
