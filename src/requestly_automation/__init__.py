"""
Helpers for driving the Requestly extension from browser automation.

The URL builders return automation URLs that, when loaded in a browser with
the extension installed, apply a header or query-parameter rule. Nothing here
makes network calls; the builders only validate input and encode it.

The browser helpers locate the packaged extension files and close the
welcome pages the extension opens on install, for Selenium, Playwright and
Puppeteer handles alike.
"""

from .errors import InvalidArgumentError
from .config import ExtensionType, get_extension
from .urls import (
    build_query_string,
    validate_header,
    add_request_header_url,
    add_request_headers_url,
    remove_request_header_url,
    remove_request_headers_url,
    add_response_header_url,
    add_response_headers_url,
    remove_response_header_url,
    remove_response_headers_url,
    modify_query_param_url,
    modify_query_params_url,
    remove_query_param_url,
    remove_query_params_url,
    import_rules,
)
from .browser import Framework, CloseResult, close_welcome_page

__all__ = [
    "InvalidArgumentError",
    "ExtensionType",
    "get_extension",
    "build_query_string",
    "validate_header",
    "add_request_header_url",
    "add_request_headers_url",
    "remove_request_header_url",
    "remove_request_headers_url",
    "add_response_header_url",
    "add_response_headers_url",
    "remove_response_header_url",
    "remove_response_headers_url",
    "modify_query_param_url",
    "modify_query_params_url",
    "remove_query_param_url",
    "remove_query_params_url",
    "import_rules",
    "Framework",
    "CloseResult",
    "close_welcome_page",
]
