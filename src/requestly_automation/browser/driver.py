"""Selenium WebDriver creation with the extension loaded."""

import os
from typing import List, Optional, Union

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from ..config import ExtensionType, get_env_config, get_extension
from ..errors import InvalidArgumentError

import logging
logger = logging.getLogger(__name__)


_CHROME_EXTENSION_TYPES = (ExtensionType.UNPACKED, ExtensionType.CRX)


def extension_launch_args(path: str) -> List[str]:
    """Chromium arguments that load an unpacked extension and disable all others.

    Also usable as launch args for Playwright and Puppeteer.
    """
    return [
        f"--load-extension={path}",
        f"--disable-extensions-except={path}",
    ]


def _require_extension(path: str) -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Extension not found at {path}. Set REQUESTLY_EXTENSIONS_DIR to the directory holding "
            f"requestly.crx, requestly.xpi and requestly-unpacked."
        )
    return path


def _chrome_extension_type(extension_type) -> ExtensionType:
    try:
        ext = ExtensionType(extension_type)
    except ValueError:
        ext = None
    if ext not in _CHROME_EXTENSION_TYPES:
        raise InvalidArgumentError(f"Chrome supports 'unpacked' or 'crx' extensions, got {extension_type!r}")
    return ext


def build_chrome_options(
    extension_type: Union[str, ExtensionType] = ExtensionType.UNPACKED,
    headless: bool = True,
    config: Optional[dict] = None,
) -> ChromeOptions:
    """
    Chrome options with the extension loaded.

    Unpacked extensions are passed as launch arguments; a .crx is added with
    add_extension.

    Raises:
        InvalidArgumentError: extension type other than unpacked or crx
        FileNotFoundError: the extension file or directory does not exist
    """
    if config is None:
        config = get_env_config()

    ext = _chrome_extension_type(extension_type)
    path = _require_extension(get_extension(ext, config))

    options = ChromeOptions()
    chrome_binary = config.get("chrome_binary")
    if chrome_binary:
        options.binary_location = chrome_binary

    if ext is ExtensionType.UNPACKED:
        for arg in extension_launch_args(path):
            options.add_argument(arg)
    else:
        options.add_extension(path)

    if headless:
        options.add_argument("--headless=new")
    return options


def build_firefox_options(headless: bool = True) -> FirefoxOptions:
    options = FirefoxOptions()
    if headless:
        options.add_argument("-headless")
    return options


def create_webdriver(
    browser: str = "chrome",
    extension_type: Union[str, ExtensionType, None] = None,
    headless: bool = True,
    config: Optional[dict] = None,
):
    """
    Start a Selenium WebDriver with the extension installed.

    Args:
        browser: "chrome" or "firefox"
        extension_type: Chrome: "unpacked" (default) or "crx". Firefox always uses the .xpi.
        headless: Run without a visible window
        config: Environment configuration (read from the environment if None)

    Raises:
        InvalidArgumentError: unsupported browser or extension type
        FileNotFoundError: the extension artifact is missing
    """
    if config is None:
        config = get_env_config()

    browser = (browser or "").lower()
    if browser == "chrome":
        options = build_chrome_options(extension_type or ExtensionType.UNPACKED, headless, config)
        logger.debug(f"Starting Chrome with arguments {options.arguments}")
        return webdriver.Chrome(options=options)

    if browser == "firefox":
        if extension_type not in (None, ExtensionType.XPI, ExtensionType.XPI.value):
            raise InvalidArgumentError(f"Firefox supports only 'xpi' extensions, got {extension_type!r}")
        xpi_path = _require_extension(get_extension(ExtensionType.XPI, config))
        driver = webdriver.Firefox(options=build_firefox_options(headless))
        try:
            driver.install_addon(xpi_path, temporary=True)
        except Exception:
            driver.quit()
            raise
        return driver

    raise InvalidArgumentError(f"Unsupported browser {browser!r}, expected 'chrome' or 'firefox'")


__all__ = [
    "extension_launch_args",
    "build_chrome_options",
    "build_firefox_options",
    "create_webdriver",
]
