# steadyui/selectors/elements.py
from __future__ import annotations

from typing import List

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from steadyui.utils.logger import get_logger

log = get_logger(__name__)

# Elements whose user-visible content is their value, not their text node
VALUE_TAGS = frozenset({"input", "textarea"})


def query(driver: WebDriver, selector: str) -> List[WebElement]:
    """
    One CSS query against the driver, no waiting.
    """
    elements = driver.find_elements(By.CSS_SELECTOR, selector)
    log.debug(f"{selector!r} matched {len(elements)} element(s)")
    return list(elements)


def option_selector(select_selector: str) -> str:
    """
    Selector for the <option> children of a select, e.g. "#color" -> "#color option".
    """
    return f"{select_selector} option"


def read_text(element: WebElement) -> str:
    """
    Effective text: the `value` attribute for input/textarea, rendered text otherwise.
    """
    if element.tag_name.lower() in VALUE_TAGS:
        return element.get_attribute("value") or ""
    return element.text


def is_shown(element: WebElement) -> bool:
    display = element.value_of_css_property("display")
    opacity = element.value_of_css_property("opacity")
    return display != "none" and opacity == "1"


def is_read_only(element: WebElement) -> bool:
    return element.get_attribute("readonly") == "true"
