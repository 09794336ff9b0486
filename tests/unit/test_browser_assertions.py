import pytest
from selenium.common.exceptions import NoAlertPresentException

from steadyui.core.errors import (
    AlertTextMismatchError,
    ElementCheckedError,
    ElementLookupError,
    ElementNotCheckedError,
    ElementsNotDisplayedError,
    NoMatchingOptionError,
    OptionNotSelectedError,
    TextMismatchError,
    TextNotFoundError,
    UIAssertionError,
    UnexpectedPageError,
)

from fakes import FakeAlert, FakeElement


# ---------- element_text_equals ----------


def test_text_equals_waits_for_late_element(browser, driver, clock):
    # nothing for the first 2.5 s, then the message renders
    done = FakeElement(text="Done")
    driver.elements[".msg"] = lambda: [done] if clock.ms >= 2500 else []

    browser.element_text_equals("Done", ".msg")

    assert 2500 <= clock.ms < 5000


def test_text_equals_requeries_every_poll(browser, driver, clock):
    loading = FakeElement(text="Loading")
    done = FakeElement(text="Done")
    driver.elements[".status"] = lambda: [loading] if clock.ms < 2000 else [done]

    browser.element_text_equals("Done", ".status")

    assert driver.queries.count(".status") == 3
    assert clock.ms == 2000


def test_text_equals_reports_mismatched_texts(browser, driver, clock):
    driver.elements["li"] = [FakeElement(text="a"), FakeElement(text="b"), FakeElement(text="a")]

    with pytest.raises(TextMismatchError) as exc:
        browser.element_text_equals("a", "li")

    assert exc.value.selector == "li"
    assert exc.value.expected == "a"
    assert exc.value.actual == ["b"]
    assert clock.ms >= 5000


def test_text_equals_uses_value_for_inputs(browser, driver):
    driver.elements["#name"] = [
        FakeElement(tag_name="INPUT", text="", attributes={"value": "Ada"}),
        FakeElement(tag_name="textarea", text="ignored", attributes={"value": "Ada"}),
    ]

    browser.element_text_equals("Ada", "#name")


def test_text_equals_uses_rendered_text_for_other_tags(browser, driver):
    driver.elements["p"] = [FakeElement(tag_name="p", text="Ada", attributes={"value": "other"})]

    browser.element_text_equals("Ada", "p")


def test_lookup_failure_is_not_masked(browser, driver, clock):
    with pytest.raises(ElementLookupError) as exc:
        browser.element_text_equals("Done", ".missing")

    assert exc.value.selector == ".missing"
    assert clock.ms >= 5000


# ---------- text_exists_in_elements ----------


def test_text_exists_when_any_element_matches(browser, driver):
    driver.elements["li"] = [FakeElement(text="x"), FakeElement(text="y")]

    browser.text_exists_in_elements("y", "li")


def test_text_exists_fails_with_target_text(browser, driver):
    driver.elements["li"] = [FakeElement(text="x")]

    with pytest.raises(TextNotFoundError) as exc:
        browser.text_exists_in_elements("z", "li")

    assert exc.value.expected == "z"


# ---------- displayed ----------


def test_displayed_needs_one_visible_element(browser, driver):
    driver.elements[".banner"] = [
        FakeElement(css={"display": "none"}),
        FakeElement(css={"opacity": "1"}),
    ]

    browser.displayed(".banner")


def test_displayed_fails_when_all_hidden(browser, driver, clock):
    driver.elements[".banner"] = [
        FakeElement(css={"display": "none"}),
        FakeElement(css={"opacity": "0.5"}),
    ]

    with pytest.raises(ElementsNotDisplayedError) as exc:
        browser.displayed(".banner")

    assert exc.value.selector == ".banner"
    assert clock.ms >= 5000


def test_displayed_once_fade_in_completes(browser, driver, clock):
    fading = FakeElement(css={"opacity": "0.3"})

    def fade_in():
        if clock.ms >= 1000:
            fading.css["opacity"] = "1"
        return [fading]

    driver.elements["#toast"] = fade_in

    browser.displayed("#toast")
    assert clock.ms == 1000


# ---------- checked state ----------


def test_unchecked_box_fails_after_full_timeout(browser, driver, clock):
    agree = FakeElement(tag_name="input", selected=False)
    driver.elements["#agree"] = [agree]

    with pytest.raises(ElementNotCheckedError) as exc:
        browser.are_elements_checked("#agree")

    assert exc.value.element is agree
    assert exc.value.selector == "#agree"
    assert clock.ms >= 5000


def test_checked_passes_when_all_selected(browser, driver):
    driver.elements["input.opt"] = [FakeElement(tag_name="input", selected=True) for _ in range(3)]

    browser.are_elements_checked("input.opt")


def test_unchecked_reports_first_checked_element(browser, driver):
    first = FakeElement(tag_name="input", selected=False)
    second = FakeElement(tag_name="input", selected=True)
    third = FakeElement(tag_name="input", selected=True)
    driver.elements["input.opt"] = [first, second, third]

    with pytest.raises(ElementCheckedError) as exc:
        browser.are_elements_unchecked("input.opt")

    assert exc.value.element is second


def test_unchecked_passes(browser, driver):
    driver.elements["input.opt"] = [FakeElement(tag_name="input")]

    browser.are_elements_unchecked("input.opt")


# ---------- select options ----------


def _colors(driver, selected="Green"):
    options = [FakeElement(tag_name="option", text=t, selected=(t == selected)) for t in ("Red", "Green")]
    driver.elements["#color option"] = options
    return options


def test_option_selected(browser, driver):
    _colors(driver)

    browser.is_option_selected("Green", "#color")

    assert driver.queries[-1] == "#color option"


def test_option_not_selected(browser, driver):
    _colors(driver)

    with pytest.raises(OptionNotSelectedError) as exc:
        browser.is_option_selected("Red", "#color")

    assert exc.value.option == "Red"


def test_option_missing(browser, driver):
    _colors(driver)

    with pytest.raises(NoMatchingOptionError) as exc:
        browser.is_option_selected("Blue", "#color")

    assert exc.value.option == "Blue"
    assert exc.value.selector == "#color"


# ---------- alerts ----------


def test_alert_text_waits_for_alert(browser, driver, clock):
    alert = FakeAlert("Saved")
    driver.alert = lambda: alert if clock.ms >= 2000 else None

    browser.alert_text_equals("Saved")

    assert clock.ms == 2000


def test_alert_text_mismatch(browser, driver):
    driver.alert = FakeAlert("Deleted")

    with pytest.raises(AlertTextMismatchError) as exc:
        browser.alert_text_equals("Saved")

    assert exc.value.expected == "Saved"
    assert exc.value.actual == "Deleted"


def test_missing_alert_surfaces_driver_error(browser, driver, clock):
    with pytest.raises(NoAlertPresentException):
        browser.alert_text_equals("Saved")

    assert clock.ms >= 5000


# ---------- navigation ----------


def test_is_on_page(browser, driver):
    browser.url("https://example.com/home")

    browser.is_on_page("https://example.com/home")


def test_is_on_page_mismatch(browser, driver, clock):
    driver.current_url = "https://example.com/login"

    with pytest.raises(UnexpectedPageError) as exc:
        browser.is_on_page("https://example.com/home")

    assert exc.value.expected == "https://example.com/home"
    assert exc.value.actual == "https://example.com/login"
    assert isinstance(exc.value, UIAssertionError)
    assert isinstance(exc.value, AssertionError)
    assert clock.ms >= 5000
