import pytest

from conftest import DriverStub, ElementStub
from waiter.core.conditions import (URL_CONTAINS, URL_STARTS_WITH,
                                    describe_url_match, element_displayed,
                                    page_load_complete, url_matches)


def test_page_load_complete_only_accepts_complete():
    assert page_load_complete()(DriverStub(ready_states=["complete"]))
    assert not page_load_complete()(DriverStub(ready_states=["interactive"]))
    assert not page_load_complete()(DriverStub(ready_states=[None]))


def test_element_displayed_reflects_element_state():
    driver = DriverStub()
    assert element_displayed(ElementStub(displayed=[True]))(driver)
    assert not element_displayed(ElementStub(displayed=[False]))(driver)


@pytest.mark.parametrize(
    "current, expected, match, ignore_case, result",
    [
        ("https://example.com", "https://example.com", "equals", False, True),
        ("https://Example.com", "https://example.com", "equals", False, False),
        ("https://Example.com", "https://example.com", "equals", True, True),
        ("https://example.com/a/b", "/a/", URL_CONTAINS, False, True),
        ("https://example.com/A/b", "/a/", URL_CONTAINS, False, False),
        ("https://example.com/A/b", "/a/", URL_CONTAINS, True, True),
        ("https://example.com/login", "https://example.com", URL_STARTS_WITH, False, True),
        ("https://EXAMPLE.com/login", "https://example.com", URL_STARTS_WITH, False, False),
        ("https://EXAMPLE.com/login", "https://example.com", URL_STARTS_WITH, True, True),
        ("https://example.com/login", "login", URL_STARTS_WITH, False, False),
    ],
)
def test_url_matches(current, expected, match, ignore_case, result):
    driver = DriverStub(urls=[current])
    assert url_matches(expected, match, ignore_case)(driver) is result


def test_url_equals_is_not_a_prefix_match():
    driver = DriverStub(urls=["https://example.com/"])
    assert not url_matches("https://example.com")(driver)


def test_unknown_match_is_rejected_up_front():
    with pytest.raises(ValueError):
        url_matches("https://example.com", match="ends_with")


def test_describe_url_match():
    assert describe_url_match("abc", URL_CONTAINS) == "URL to contain 'abc'"
    assert describe_url_match("abc", ignore_case=True) == "URL to equal 'abc' (ignoring case)"
