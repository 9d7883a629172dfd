import pytest
from selenium.webdriver.support.ui import WebDriverWait

from waiter import Waiter


class DriverStub:
    """
    Stand-in for a WebDriver.

    ``urls`` and ``ready_states`` are consumed one value per read; the
    last value repeats forever.
    """

    def __init__(self, urls=("about:blank",), ready_states=("complete",)):
        self._urls = list(urls)
        self._ready_states = list(ready_states)
        self.events = []
        self.visited = []
        self.quit_called = False
        self.elements = {}

    @staticmethod
    def _next(values):
        return values.pop(0) if len(values) > 1 else values[0]

    def get(self, url):
        self.events.append("get")
        self.visited.append(url)

    @property
    def current_url(self):
        self.events.append("current_url")
        return self._next(self._urls)

    def execute_script(self, script, *args):
        self.events.append("ready_state")
        return self._next(self._ready_states)

    def find_element(self, by, value):
        return self.elements[value]

    def quit(self):
        self.quit_called = True


class ElementStub:
    def __init__(self, driver=None, displayed=(True,)):
        self.driver = driver
        self._displayed = list(displayed)
        self.clicks = 0

    def click(self):
        self.clicks += 1
        if self.driver is not None:
            self.driver.events.append("click")

    def is_displayed(self):
        return DriverStub._next(self._displayed)


@pytest.fixture
def waiter():
    return Waiter(poll_frequency=0.01)


@pytest.fixture
def recorded_timeouts(monkeypatch):
    """Record the timeout of every WebDriverWait the helper creates."""
    timeouts = []

    class RecordingWait(WebDriverWait):
        def __init__(self, driver, timeout, *args, **kwargs):
            timeouts.append(timeout)
            super().__init__(driver, timeout, *args, **kwargs)

    monkeypatch.setattr("waiter.core.helper.WebDriverWait", RecordingWait)
    return timeouts
