"""
Global constants for automation URLs and extension artifacts.
No dependencies - safe to import from anywhere.
"""

# ============================================================================
# Automation Endpoint
# ============================================================================

AUTOMATION_BASE_URL = "https://app.requestly.io/automation/"
"""Fixed host every automation URL is built against."""

ADD_REQUEST_HEADER_PATH = "add-request-header"
REMOVE_REQUEST_HEADER_PATH = "remove-request-header"
ADD_RESPONSE_HEADER_PATH = "add-response-header"
REMOVE_RESPONSE_HEADER_PATH = "remove-response-header"
MODIFY_QUERY_PARAM_PATH = "modify-query-param"
REMOVE_QUERY_PARAM_PATH = "remove-query-param"

REMOVE_HEADER_KEY = "header"
"""Query key repeated once per header name in remove-header URLs."""

REMOVE_PARAM_KEY = "param"
"""Query key repeated once per parameter name in remove-query-param URLs."""

API_KEY_PARAM = "api-key"


# ============================================================================
# Welcome Page Handling
# ============================================================================

WELCOME_PAGE_DELAY_SECS = 0.5
"""Wait before enumerating windows so the onboarding tab has finished opening."""


# ============================================================================
# Extension Artifacts
# ============================================================================

EXTENSION_FILES = {
    "crx": "requestly.crx",
    "xpi": "requestly.xpi",
    "unpacked": "requestly-unpacked",
}
"""File name of each packaged extension variant inside the extensions dir."""

DEFAULT_EXTENSION_TYPE = "crx"


__all__ = [
    "AUTOMATION_BASE_URL",
    "ADD_REQUEST_HEADER_PATH",
    "REMOVE_REQUEST_HEADER_PATH",
    "ADD_RESPONSE_HEADER_PATH",
    "REMOVE_RESPONSE_HEADER_PATH",
    "MODIFY_QUERY_PARAM_PATH",
    "REMOVE_QUERY_PARAM_PATH",
    "REMOVE_HEADER_KEY",
    "REMOVE_PARAM_KEY",
    "API_KEY_PARAM",
    "WELCOME_PAGE_DELAY_SECS",
    "EXTENSION_FILES",
    "DEFAULT_EXTENSION_TYPE",
]
