import pytest
from selenium.common.exceptions import WebDriverException

from waiter.browser import driver as driver_module
from waiter.browser import stealth as stealth_module
from waiter.browser.driver import (USER_AGENTS, build_chrome_options,
                                   get_random_user_agent, setup_webdriver)
from waiter.browser.stealth import apply_stealth_mode


class ChromeStub:
    def __init__(self, service=None, options=None):
        self.service = service
        self.options = options
        self.timeouts = {}

    def set_page_load_timeout(self, seconds):
        self.timeouts["page_load"] = seconds

    def set_script_timeout(self, seconds):
        self.timeouts["script"] = seconds


class ManagerStub:
    installs = 0

    def install(self):
        ManagerStub.installs += 1
        return "/tmp/chromedriver"


@pytest.fixture
def patched_chrome(monkeypatch):
    attempts = []

    def install(failures=0):
        def chrome(service=None, options=None):
            attempts.append(service)
            if len(attempts) <= failures:
                raise WebDriverException("chrome failed to start")
            return ChromeStub(service, options)

        monkeypatch.setattr(driver_module.webdriver, "Chrome", chrome)
        monkeypatch.setattr(driver_module, "Service", lambda path: path)
        monkeypatch.setattr(driver_module, "ChromeDriverManager", ManagerStub)
        monkeypatch.setattr(driver_module.time, "sleep", lambda seconds: None)
        return attempts

    return install


def test_random_user_agent_comes_from_list():
    assert get_random_user_agent() in USER_AGENTS


def test_headless_flag_controls_options():
    assert "--headless=new" in build_chrome_options(headless=True).arguments
    assert "--headless=new" not in build_chrome_options(headless=False).arguments


def test_setup_webdriver_uses_given_path_and_timeouts(patched_chrome):
    attempts = patched_chrome()

    driver = setup_webdriver(webdriver_path="/usr/bin/chromedriver", page_load_timeout=12)

    assert attempts == ["/usr/bin/chromedriver"]
    assert driver.timeouts == {"page_load": 12, "script": 12}


def test_setup_webdriver_downloads_driver_without_path(patched_chrome):
    ManagerStub.installs = 0
    attempts = patched_chrome()

    setup_webdriver()

    assert attempts == ["/tmp/chromedriver"]
    assert ManagerStub.installs == 1


def test_setup_webdriver_retries(patched_chrome):
    attempts = patched_chrome(failures=2)

    assert isinstance(setup_webdriver(retry_count=3), ChromeStub)
    assert len(attempts) == 3


def test_setup_webdriver_reraises_last_failure(patched_chrome):
    attempts = patched_chrome(failures=5)

    with pytest.raises(WebDriverException):
        setup_webdriver(retry_count=2)
    assert len(attempts) == 2


def test_apply_stealth_mode(monkeypatch):
    calls = []
    monkeypatch.setattr(stealth_module, "stealth", lambda driver, **kwargs: calls.append((driver, kwargs)))
    driver = object()

    assert apply_stealth_mode(driver) is driver
    assert calls[0][0] is driver
    assert calls[0][1]["languages"] == ["en-US", "en"]


def test_apply_stealth_mode_keeps_driver_on_failure(monkeypatch, capsys):
    def broken(driver, **kwargs):
        raise WebDriverException("cdp unavailable")

    monkeypatch.setattr(stealth_module, "stealth", broken)
    driver = object()

    assert apply_stealth_mode(driver) is driver
    assert "Could not apply stealth mode" in capsys.readouterr().out
