#!/usr/bin/env python3
"""
Polling predicates for explicit waits.

Each factory returns a callable taking the driver, ready to be handed
to WebDriverWait.until().
"""

URL_EQUALS = "equals"
URL_CONTAINS = "contains"
URL_STARTS_WITH = "starts_with"

URL_MATCHES = (URL_EQUALS, URL_CONTAINS, URL_STARTS_WITH)


def page_load_complete():
    """Return a predicate that is true once document.readyState is 'complete'."""
    return lambda driver: str(driver.execute_script("return document.readyState")) == "complete"


def element_displayed(element):
    """Return a predicate that is true once the element is displayed."""
    return lambda driver: element.is_displayed()


def url_matches(expected, match=URL_EQUALS, ignore_case=False):
    """
    Return a predicate comparing the browser's current URL to an expected string.

    Args:
        expected: String the current URL is compared against
        match: One of 'equals', 'contains' or 'starts_with'
        ignore_case: Lower-case both sides before comparing

    Returns:
        callable: Predicate taking the driver

    Raises:
        ValueError: If match is not a known comparison
    """
    if match not in URL_MATCHES:
        raise ValueError(f"Unknown URL match '{match}', expected one of {', '.join(URL_MATCHES)}")

    target = expected.lower() if ignore_case else expected

    def predicate(driver):
        current = driver.current_url
        if ignore_case:
            current = current.lower()

        if match == URL_CONTAINS:
            return target in current
        if match == URL_STARTS_WITH:
            return current.startswith(target)
        return current == target

    return predicate


def describe_url_match(expected, match=URL_EQUALS, ignore_case=False):
    """Human-readable description of a URL condition, used in timeout messages."""
    verb = {
        URL_EQUALS: "equal",
        URL_CONTAINS: "contain",
        URL_STARTS_WITH: "start with",
    }.get(match, match)
    suffix = " (ignoring case)" if ignore_case else ""
    return f"URL to {verb} '{expected}'{suffix}"
