# steadyui/core/errors.py
from __future__ import annotations

"""Error taxonomy
----------------
Every failure a session reports is one of these. Each keeps its diagnostic
fields (selector, expected/actual) as attributes so callers can inspect them
without parsing the message.
"""

from typing import Any, Sequence


class SteadyUIError(Exception):
    """Base exception for all steady-ui errors."""
    pass


class SessionClosedError(SteadyUIError):
    """Raised when a session is used after `quit()`."""

    def __init__(self) -> None:
        super().__init__("Browser session has been quit")


class UIAssertionError(SteadyUIError, AssertionError):
    """Base for reported UI failures; test runners show these as assertion failures."""
    pass


# ---------- Lookup / visibility ----------


class ElementLookupError(UIAssertionError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"No elements matched selector {selector!r}")


class ElementsNotDisplayedError(UIAssertionError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"No element matching {selector!r} is displayed")


# ---------- Text ----------


class TextAssertionError(UIAssertionError):
    pass


class TextMismatchError(TextAssertionError):
    def __init__(self, selector: str, expected: str, actual: Sequence[str]) -> None:
        self.selector = selector
        self.expected = expected
        self.actual = list(actual)
        super().__init__(f"{expected!r} is not the text of {selector!r}; found {self.actual!r}")


class TextNotFoundError(TextAssertionError):
    def __init__(self, selector: str, expected: str) -> None:
        self.selector = selector
        self.expected = expected
        super().__init__(f"No element matching {selector!r} has text {expected!r}")


# ---------- State ----------


class StateMismatchError(UIAssertionError):
    pass


class CheckedStateError(StateMismatchError):
    expected_checked: bool

    def __init__(self, selector: str, element: Any) -> None:
        self.selector = selector
        self.element = element
        state = "checked" if self.expected_checked else "unchecked"
        super().__init__(f"Element {_describe(element)} matching {selector!r} is not {state}")


class ElementNotCheckedError(CheckedStateError):
    expected_checked = True


class ElementCheckedError(CheckedStateError):
    expected_checked = False


class NoMatchingOptionError(StateMismatchError):
    def __init__(self, option: str, selector: str) -> None:
        self.option = option
        self.selector = selector
        super().__init__(f"Select {selector!r} has no option {option!r}")


class OptionNotSelectedError(StateMismatchError):
    def __init__(self, option: str, selector: str) -> None:
        self.option = option
        self.selector = selector
        super().__init__(f"Option {option!r} of {selector!r} is not selected")


class AlertTextMismatchError(StateMismatchError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected alert text {expected!r} but alert said {actual!r}")


# ---------- Input / navigation ----------


class ReadOnlyElementError(UIAssertionError):
    """Not retried: read-only is a static property of the element."""

    def __init__(self, selector: str, element: Any) -> None:
        self.selector = selector
        self.element = element
        super().__init__(f"Element {_describe(element)} matching {selector!r} is read-only")


class UnexpectedPageError(UIAssertionError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} but browser was on {actual}")


def _describe(element: Any) -> str:
    # WebElement.id is local; tag_name would be another driver round-trip
    eid = getattr(element, "id", None)
    return str(eid) if eid else repr(element)


__all__ = [
    "SteadyUIError",
    "SessionClosedError",
    "UIAssertionError",
    "ElementLookupError",
    "ElementsNotDisplayedError",
    "TextAssertionError",
    "TextMismatchError",
    "TextNotFoundError",
    "StateMismatchError",
    "CheckedStateError",
    "ElementNotCheckedError",
    "ElementCheckedError",
    "NoMatchingOptionError",
    "OptionNotSelectedError",
    "AlertTextMismatchError",
    "ReadOnlyElementError",
    "UnexpectedPageError",
]
