"""Helpers for driving the extension from Selenium, Playwright and Puppeteer."""
from .adapters import Framework, CloseResult, detect_adapter  # noqa: F401
from .welcome import close_welcome_page  # noqa: F401
from .driver import extension_launch_args, build_chrome_options, create_webdriver  # noqa: F401
