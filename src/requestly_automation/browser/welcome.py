"""Close the welcome pages the extension opens on install."""

import asyncio
from typing import Any, Union

from ..constants import WELCOME_PAGE_DELAY_SECS
from .adapters import CloseResult, Framework, detect_adapter

import logging
logger = logging.getLogger(__name__)


async def close_welcome_page(driver: Any, framework: Union[Framework, str, None] = None) -> CloseResult:
    """
    Close any welcome pages opened by the extension, leaving the main window active.

    Works with a Selenium WebDriver, a Playwright Page or BrowserContext, and a
    Puppeteer (pyppeteer) Browser, sync or async API. Cleanup is best effort:
    failures are logged and collected in the result, never raised.

    Args:
        driver: The framework handle
        framework: Optional explicit Framework tag instead of detection

    Returns:
        CloseResult describing what was closed and what failed
    """
    # Let the onboarding tab finish opening before enumerating.
    await asyncio.sleep(WELCOME_PAGE_DELAY_SECS)

    result = CloseResult()
    try:
        adapter = detect_adapter(driver, framework)
        if adapter is None:
            logger.debug(f"close_welcome_page: no adapter for {type(driver).__name__}, nothing to close")
            return result

        result.framework = adapter.framework
        await adapter.close_surplus(result)
    except asyncio.CancelledError:
        # Preserve cooperative cancellation semantics
        raise
    except Exception as e:
        result.record_error("close_welcome_page encountered an error", e)

    logger.debug(f"close_welcome_page: closed {result.closed} page(s) via {result.framework}")
    return result


__all__ = ["close_welcome_page", "CloseResult"]
