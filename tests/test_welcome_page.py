# tests/test_welcome_page.py
import asyncio
import pytest

from requestly_automation.browser import welcome
from requestly_automation.browser.adapters import (
    Framework,
    SeleniumAdapter,
    PlaywrightPageAdapter,
    PuppeteerBrowserAdapter,
    PlaywrightContextAdapter,
    detect_adapter,
)
from requestly_automation.constants import WELCOME_PAGE_DELAY_SECS

from _utils import (
    FakeSeleniumDriver,
    FakePlaywrightPage,
    FakePlaywrightContext,
    FakeSyncPage,
    FakeSyncPlaywrightContext,
    FakePuppeteerPage,
    FakePuppeteerBrowser,
)

## We DO NOT want to use pytest-asyncio.
## Instead, use event_loop.run_until_complete()!


@pytest.fixture(scope="function")
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture
def sleeps(monkeypatch):
    """Record the initial delay instead of waiting for it."""
    delays = []

    async def fake_sleep(delay, *args, **kwargs):
        delays.append(delay)

    monkeypatch.setattr(welcome.asyncio, "sleep", fake_sleep)
    return delays


# ------------------------------
# detection
# ------------------------------

def test_detect_adapter_per_framework():
    assert isinstance(detect_adapter(FakeSeleniumDriver(["a"])), SeleniumAdapter)
    assert isinstance(detect_adapter(FakePlaywrightPage("p")), PlaywrightPageAdapter)
    assert isinstance(detect_adapter(FakePuppeteerBrowser([])), PuppeteerBrowserAdapter)
    assert isinstance(detect_adapter(FakePlaywrightContext([])), PlaywrightContextAdapter)
    assert isinstance(detect_adapter(FakeSyncPlaywrightContext([])), PlaywrightContextAdapter)


def test_detect_adapter_unknown_handle_returns_none():
    assert detect_adapter(object()) is None
    assert detect_adapter("driver") is None
    assert detect_adapter(None) is None


def test_detection_does_not_evaluate_driver_properties():
    driver = FakeSeleniumDriver(["main", "welcome"])
    detect_adapter(driver)
    assert driver.calls == []


def test_detection_order_prefers_earlier_profile():
    class Ambiguous(FakeSeleniumDriver):
        async def pages(self):
            return []

        async def new_page(self):
            return None

    assert isinstance(detect_adapter(Ambiguous(["a"])), SeleniumAdapter)

    class BrowserAndContext:
        async def pages(self):
            return []

        async def new_page(self):
            return None

    assert isinstance(detect_adapter(BrowserAndContext()), PuppeteerBrowserAdapter)


def test_explicit_framework_tag_skips_probing():
    browser = FakePuppeteerBrowser([])
    adapter = detect_adapter(browser, framework="playwright_context")
    assert isinstance(adapter, PlaywrightContextAdapter)
    assert isinstance(detect_adapter(object(), Framework.SELENIUM), SeleniumAdapter)


def test_unknown_framework_tag_raises_value_error():
    with pytest.raises(ValueError):
        detect_adapter(object(), framework="cypress")


# ------------------------------
# close_welcome_page: Selenium
# ------------------------------

def test_selenium_closes_extra_windows_and_switches_back(event_loop, sleeps):
    driver = FakeSeleniumDriver(["main", "welcome-1", "welcome-2"])

    result = event_loop.run_until_complete(welcome.close_welcome_page(driver))

    assert sleeps == [WELCOME_PAGE_DELAY_SECS]
    assert result.framework is Framework.SELENIUM
    assert result.closed == 2
    assert result.ok
    assert driver.calls == [
        ("handles",),
        ("switch", "welcome-1"),
        ("close", "welcome-1"),
        ("switch", "welcome-2"),
        ("close", "welcome-2"),
        ("switch", "main"),
    ]
    assert driver.current == "main"


def test_selenium_single_window_is_left_alone(event_loop, sleeps):
    driver = FakeSeleniumDriver(["main"])

    result = event_loop.run_until_complete(welcome.close_welcome_page(driver))

    assert result.closed == 0
    assert driver.calls == [("handles",), ("switch", "main")]


def test_selenium_close_failure_is_suppressed(event_loop, sleeps):
    driver = FakeSeleniumDriver(["main", "welcome-1", "welcome-2"], fail_on_close="welcome-1")

    result = event_loop.run_until_complete(welcome.close_welcome_page(driver))

    assert result.framework is Framework.SELENIUM
    assert result.closed == 0
    assert len(result.errors) == 1
    assert "no such window" in result.errors[0]
    assert not result.ok


def test_selenium_enumeration_failure_is_suppressed(event_loop, sleeps):
    driver = FakeSeleniumDriver(["main"], fail_on_list=True)

    result = event_loop.run_until_complete(welcome.close_welcome_page(driver))

    assert result.closed == 0
    assert "session deleted" in result.errors[0]


# ------------------------------
# close_welcome_page: Playwright page
# ------------------------------

def test_playwright_page_closes_other_open_pages(event_loop, sleeps):
    current = FakePlaywrightPage("current")
    welcome_page = FakePlaywrightPage("welcome")
    already_closed = FakePlaywrightPage("gone", closed=True)
    broken = FakePlaywrightPage("broken", fail=True)
    last = FakePlaywrightPage("last")
    FakePlaywrightContext([welcome_page, current, already_closed, broken, last])

    result = event_loop.run_until_complete(welcome.close_welcome_page(current))

    assert result.framework is Framework.PLAYWRIGHT_PAGE
    assert current.closed is False
    assert current.close_calls == 0
    assert welcome_page.closed is True
    assert already_closed.close_calls == 0
    assert broken.close_calls == 1
    assert last.closed is True
    assert result.closed == 2
    assert len(result.errors) == 1


def test_playwright_page_with_callable_context(event_loop, sleeps):
    other = FakeSyncPage("other")

    class CallableContextPage:
        def __init__(self):
            self._context = FakeSyncPlaywrightContext([self, other])

        def context(self):
            return self._context

        def is_closed(self):
            return False

    page = CallableContextPage()
    other.is_closed = lambda: False

    result = event_loop.run_until_complete(welcome.close_welcome_page(page))

    assert result.framework is Framework.PLAYWRIGHT_PAGE
    assert other.closed is True
    assert result.closed == 1


# ------------------------------
# close_welcome_page: Puppeteer browser / Playwright context
# ------------------------------

def test_puppeteer_keeps_first_page_even_when_a_close_fails(event_loop, sleeps):
    pages = [
        FakePuppeteerPage("main"),
        FakePuppeteerPage("welcome", fail=True),
        FakePuppeteerPage("extra"),
    ]
    browser = FakePuppeteerBrowser(pages)

    result = event_loop.run_until_complete(welcome.close_welcome_page(browser))

    assert result.framework is Framework.PUPPETEER_BROWSER
    assert [p.close_calls for p in pages] == [0, 1, 1]
    assert pages[0].closed is False
    assert pages[2].closed is True
    assert result.closed == 1
    assert len(result.errors) == 1
    assert "Target.closeTarget" in result.errors[0]


def test_puppeteer_single_page_is_left_alone(event_loop, sleeps):
    only = FakePuppeteerPage("main")

    result = event_loop.run_until_complete(welcome.close_welcome_page(FakePuppeteerBrowser([only])))

    assert only.close_calls == 0
    assert result.closed == 0
    assert result.ok


def test_puppeteer_enumeration_failure_is_suppressed(event_loop, sleeps):
    browser = FakePuppeteerBrowser([FakePuppeteerPage("main")], fail_on_list=True)

    result = event_loop.run_until_complete(welcome.close_welcome_page(browser))

    assert result.framework is Framework.PUPPETEER_BROWSER
    assert "browser disconnected" in result.errors[0]


def test_playwright_context_keeps_first_page(event_loop, sleeps):
    pages = [FakePlaywrightPage("main"), FakePlaywrightPage("welcome"), FakePlaywrightPage("other")]
    context = FakePlaywrightContext(pages)

    result = event_loop.run_until_complete(welcome.close_welcome_page(context))

    assert result.framework is Framework.PLAYWRIGHT_CONTEXT
    assert [p.closed for p in pages] == [False, True, True]
    assert result.closed == 2


def test_sync_playwright_context(event_loop, sleeps):
    pages = [FakeSyncPage("main"), FakeSyncPage("welcome", fail=True), FakeSyncPage("other")]

    result = event_loop.run_until_complete(welcome.close_welcome_page(FakeSyncPlaywrightContext(pages)))

    assert [p.closed for p in pages] == [False, False, True]
    assert result.closed == 1
    assert len(result.errors) == 1


# ------------------------------
# close_welcome_page: no match / bad tag
# ------------------------------

def test_unknown_handle_only_waits(event_loop, sleeps):
    result = event_loop.run_until_complete(welcome.close_welcome_page(object()))

    assert sleeps == [WELCOME_PAGE_DELAY_SECS]
    assert result.framework is None
    assert result.closed == 0
    assert result.ok


def test_unknown_framework_tag_is_suppressed(event_loop, sleeps):
    result = event_loop.run_until_complete(welcome.close_welcome_page(object(), framework="cypress"))

    assert result.framework is None
    assert len(result.errors) == 1


def test_explicit_tag_on_mismatched_handle_is_suppressed(event_loop, sleeps):
    result = event_loop.run_until_complete(welcome.close_welcome_page(object(), framework=Framework.SELENIUM))

    assert result.framework is Framework.SELENIUM
    assert "AttributeError" in result.errors[0]


def test_suppressed_errors_are_logged(event_loop, sleeps, caplog):
    browser = FakePuppeteerBrowser([FakePuppeteerPage("main"), FakePuppeteerPage("welcome", fail=True)])

    with caplog.at_level("WARNING"):
        event_loop.run_until_complete(welcome.close_welcome_page(browser))

    assert any("Failed to close page" in r.getMessage() for r in caplog.records)


def test_close_welcome_page_really_waits(event_loop):
    """Without patching, the coroutine suspends for the fixed delay."""
    loop_time = event_loop.time

    async def run():
        start = loop_time()
        await welcome.close_welcome_page(object())
        return loop_time() - start

    elapsed = event_loop.run_until_complete(run())
    assert elapsed >= WELCOME_PAGE_DELAY_SECS * 0.9


# ------------------------------
# delegating handles
# ------------------------------

def test_detect_adapter_through_getattr_delegation():
    from _utils import DelegatingDriver

    assert isinstance(detect_adapter(DelegatingDriver(FakeSeleniumDriver(["a"]))), SeleniumAdapter)
    assert isinstance(detect_adapter(DelegatingDriver(FakePuppeteerBrowser([]))), PuppeteerBrowserAdapter)
    assert isinstance(detect_adapter(DelegatingDriver(FakePlaywrightContext([]))), PlaywrightContextAdapter)
    assert detect_adapter(DelegatingDriver(object())) is None


def test_delegating_selenium_driver_closes_welcome_window(event_loop, sleeps):
    from _utils import DelegatingDriver

    inner = FakeSeleniumDriver(["main", "welcome"])

    result = event_loop.run_until_complete(welcome.close_welcome_page(DelegatingDriver(inner)))

    assert result.framework is Framework.SELENIUM
    assert result.closed == 1
    assert inner._handles == ["main"]
    assert inner.current == "main"


def test_failing_probe_is_logged_and_skipped(caplog):
    class ExplodingWrapper:
        def __getattr__(self, name):
            raise RuntimeError(f"lookup of {name} failed")

    with caplog.at_level("WARNING"):
        assert detect_adapter(ExplodingWrapper()) is None

    assert any("Probing ExplodingWrapper" in r.getMessage() for r in caplog.records)


# ------------------------------
# injected failures never propagate
# ------------------------------

def test_playwright_page_context_failure_is_suppressed(event_loop, sleeps):
    from _utils import BrokenContextPage

    result = event_loop.run_until_complete(welcome.close_welcome_page(BrokenContextPage("current")))

    assert result.framework is Framework.PLAYWRIGHT_PAGE
    assert result.closed == 0
    assert "Target closed" in result.errors[0]


def test_playwright_page_pages_failure_is_suppressed(event_loop, sleeps):
    from _utils import BrokenPagesContext

    current = FakePlaywrightPage("current")
    BrokenPagesContext([current])

    result = event_loop.run_until_complete(welcome.close_welcome_page(current))

    assert result.closed == 0
    assert "Browser has been closed" in result.errors[0]


def test_playwright_page_is_closed_failure_skips_only_that_page(event_loop, sleeps):
    from _utils import UnreadablePage

    current = FakePlaywrightPage("current")
    unreadable = UnreadablePage("unreadable")
    other = FakePlaywrightPage("other")
    FakePlaywrightContext([current, unreadable, other])

    result = event_loop.run_until_complete(welcome.close_welcome_page(current))

    assert unreadable.close_calls == 0
    assert other.closed is True
    assert result.closed == 1
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Failed to inspect page")


def test_selenium_switch_failure_is_suppressed(event_loop, sleeps):
    from _utils import FailingSwitchDriver

    driver = FailingSwitchDriver(["main", "welcome"], fail_on_switch="welcome")

    result = event_loop.run_until_complete(welcome.close_welcome_page(driver))

    assert result.framework is Framework.SELENIUM
    assert result.closed == 0
    assert "no such window: welcome" in result.errors[0]
