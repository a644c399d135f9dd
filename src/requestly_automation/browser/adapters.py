"""Framework adapters for closing extension welcome pages.

Each supported automation framework exposes a different surface for listing
and closing windows/pages. A handle is classified once, by probing its
attributes statically (so Selenium properties that round-trip to the driver
are not evaluated), and the matching adapter does the closing. Handles that
delegate through __getattr__ are probed dynamically when the static lookup misses.

Detection order, first match wins:
    1. Selenium WebDriver        window_handles + switch_to
    2. Playwright Page           context
    3. Puppeteer Browser         pages()   (callable)
    4. Playwright BrowserContext new_page() / newPage()
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

import logging
logger = logging.getLogger(__name__)


_MISSING = object()


class Framework(str, Enum):
    SELENIUM = "selenium"
    PLAYWRIGHT_PAGE = "playwright_page"
    PUPPETEER_BROWSER = "puppeteer_browser"
    PLAYWRIGHT_CONTEXT = "playwright_context"


@dataclass
class CloseResult:
    """
    Outcome of a welcome-page cleanup. Always produced, never raised.

    Attributes:
        framework: Adapter that handled the call, None if the handle matched none
        closed: Number of windows/pages closed
        errors: Suppressed failures, one message each
    """

    framework: Optional[Framework] = None
    closed: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def record_error(self, what: str, exc: BaseException) -> None:
        message = f"{what}: {type(exc).__name__}: {exc}"
        self.errors.append(message)
        logger.warning(message)


# ============================================================================
# Capability probing
# ============================================================================

def _dynamic_lookup(handle: Any) -> bool:
    """True when the handle's type resolves missing attributes through __getattr__."""
    return inspect.getattr_static(type(handle), "__getattr__", _MISSING) is not _MISSING


def _has_capability(handle: Any, name: str) -> bool:
    try:
        if inspect.getattr_static(handle, name, _MISSING) is not _MISSING:
            return True
        # Wrappers such as EventFiringWebDriver only expose the wrapped driver dynamically.
        return _dynamic_lookup(handle) and hasattr(handle, name)
    except Exception as e:
        logger.warning(f"Probing {type(handle).__name__}.{name} failed: {type(e).__name__}: {e}")
        return False


def _has_method(handle: Any, name: str) -> bool:
    try:
        attr = inspect.getattr_static(handle, name, _MISSING)
        if attr is _MISSING:
            if not _dynamic_lookup(handle):
                return False
            return callable(getattr(handle, name, None))
    except Exception as e:
        logger.warning(f"Probing {type(handle).__name__}.{name}() failed: {type(e).__name__}: {e}")
        return False
    if isinstance(attr, property):
        return False
    return callable(attr) or isinstance(attr, (staticmethod, classmethod))


async def _resolve(value: Any) -> Any:
    """Await framework results from async APIs; pass sync results through."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _list_pages(owner: Any) -> list:
    """Read ``pages`` whether the framework exposes it as a property or a (coroutine) method."""
    pages = owner.pages
    if callable(pages):
        pages = pages()
    return list(await _resolve(pages))


async def _close_page(page: Any, result: CloseResult) -> None:
    try:
        await _resolve(page.close())
    except Exception as e:
        result.record_error("Failed to close page", e)
    else:
        result.closed += 1


# ============================================================================
# Adapters
# ============================================================================

class WelcomePageAdapter:
    """Closes the surplus windows/pages of one framework handle."""

    framework: Framework

    def __init__(self, handle: Any):
        self.handle = handle

    @classmethod
    def matches(cls, handle: Any) -> bool:
        raise NotImplementedError

    async def close_surplus(self, result: CloseResult) -> None:
        raise NotImplementedError


class SeleniumAdapter(WelcomePageAdapter):
    """Keep the first window handle, close the rest, then switch back to it.

    A failing close stops the loop; the caller records the error.
    """

    framework = Framework.SELENIUM

    @classmethod
    def matches(cls, handle: Any) -> bool:
        return _has_capability(handle, "window_handles") and _has_capability(handle, "switch_to")

    async def close_surplus(self, result: CloseResult) -> None:
        driver = self.handle
        handles = list(await _resolve(driver.window_handles))
        if not handles:
            return

        main_handle = handles[0]
        for handle in handles[1:]:
            await _resolve(driver.switch_to.window(handle))
            await _resolve(driver.close())
            result.closed += 1
        await _resolve(driver.switch_to.window(main_handle))


class PlaywrightPageAdapter(WelcomePageAdapter):
    """Close every other open page in the calling page's context."""

    framework = Framework.PLAYWRIGHT_PAGE

    @classmethod
    def matches(cls, handle: Any) -> bool:
        return _has_capability(handle, "context")

    async def close_surplus(self, result: CloseResult) -> None:
        current_page = self.handle
        context = current_page.context
        if callable(context):
            context = context()
        context = await _resolve(context)

        for page in await _list_pages(context):
            if page is current_page:
                continue
            try:
                if await _resolve(page.is_closed()):
                    continue
            except Exception as e:
                result.record_error("Failed to inspect page", e)
                continue
            await _close_page(page, result)


class _FirstPageAdapter(WelcomePageAdapter):
    """Keep the page at index 0 and close the others in ascending order."""

    async def close_surplus(self, result: CloseResult) -> None:
        pages = await _list_pages(self.handle)
        if len(pages) <= 1:
            return
        for page in pages[1:]:
            await _close_page(page, result)


class PuppeteerBrowserAdapter(_FirstPageAdapter):
    framework = Framework.PUPPETEER_BROWSER

    @classmethod
    def matches(cls, handle: Any) -> bool:
        return _has_method(handle, "pages")


class PlaywrightContextAdapter(_FirstPageAdapter):
    framework = Framework.PLAYWRIGHT_CONTEXT

    @classmethod
    def matches(cls, handle: Any) -> bool:
        return _has_method(handle, "new_page") or _has_method(handle, "newPage")


ADAPTERS = (
    SeleniumAdapter,
    PlaywrightPageAdapter,
    PuppeteerBrowserAdapter,
    PlaywrightContextAdapter,
)


def detect_adapter(handle: Any, framework: Union[Framework, str, None] = None) -> Optional[WelcomePageAdapter]:
    """
    Pick the adapter for a handle.

    Args:
        handle: Selenium WebDriver, Playwright Page/BrowserContext or Puppeteer Browser
        framework: Optional explicit tag; skips probing when given

    Returns:
        An adapter instance, or None when the handle matches no known shape

    Raises:
        ValueError: if ``framework`` is not a known tag
    """
    if framework is not None:
        tag = Framework(framework)
        for adapter_cls in ADAPTERS:
            if adapter_cls.framework is tag:
                return adapter_cls(handle)

    for adapter_cls in ADAPTERS:
        if adapter_cls.matches(handle):
            return adapter_cls(handle)
    return None


__all__ = [
    "Framework",
    "CloseResult",
    "WelcomePageAdapter",
    "SeleniumAdapter",
    "PlaywrightPageAdapter",
    "PuppeteerBrowserAdapter",
    "PlaywrightContextAdapter",
    "ADAPTERS",
    "detect_adapter",
]
