"""Automation URLs for adding and removing request/response headers.

Every "single" builder also accepts the bulk collection. When the collection
is given and has the right container kind it is used exclusively, even if a
single name/value pair is passed alongside it.
"""

from typing import Mapping, Optional, Sequence

from ..constants import (
    ADD_REQUEST_HEADER_PATH,
    REMOVE_REQUEST_HEADER_PATH,
    ADD_RESPONSE_HEADER_PATH,
    REMOVE_RESPONSE_HEADER_PATH,
    REMOVE_HEADER_KEY,
)
from ..errors import InvalidArgumentError
from .encoding import automation_url, build_query_string, build_repeated_query, encode_pair
from .validation import (
    is_mapping,
    is_sequence,
    validate_header,
    validate_header_name,
    validate_entries,
    validate_names,
)


def _add_header_url(
    path: str,
    header_name: Optional[str],
    header_value: Optional[str],
    headers: Optional[Mapping[str, str]],
) -> str:
    if headers is not None and is_mapping(headers):
        validate_entries(headers, validate_header)
        query = build_query_string(headers)
    elif header_name is not None and header_value is not None:
        validate_header(header_name, header_value)
        query = encode_pair(header_name, header_value)
    else:
        raise InvalidArgumentError("Provide either headers or header_name, header_value")
    return automation_url(path, query)


def _remove_header_url(path: str, header_name: Optional[str], headers: Optional[Sequence[str]]) -> str:
    if headers is not None and is_sequence(headers):
        validate_names(headers, validate_header_name)
        query = build_repeated_query(REMOVE_HEADER_KEY, headers)
    elif header_name is not None:
        validate_header_name(header_name)
        query = build_repeated_query(REMOVE_HEADER_KEY, [header_name])
    else:
        raise InvalidArgumentError("Provide either headers or header_name")
    return automation_url(path, query)


def _require_mapping(headers) -> None:
    if headers is None or not is_mapping(headers):
        raise InvalidArgumentError("headers parameter is required and must be a mapping")


def _require_sequence(headers) -> None:
    if not is_sequence(headers):
        raise InvalidArgumentError("headers parameter must be a list")


# ============================================================================
# Request headers
# ============================================================================

def add_request_header_url(header_name=None, header_value=None, headers=None) -> str:
    """
    Build the URL that adds one or more request headers.

    Args:
        header_name: Header name (single form)
        header_value: Header value, may be empty (single form)
        headers: Mapping of name -> value (bulk form, wins over the single form)

    Raises:
        InvalidArgumentError: if neither form is given or an entry is invalid
    """
    return _add_header_url(ADD_REQUEST_HEADER_PATH, header_name, header_value, headers)


def add_request_headers_url(headers: Mapping[str, str]) -> str:
    """Shortcut: add multiple request headers from a mapping."""
    _require_mapping(headers)
    return _add_header_url(ADD_REQUEST_HEADER_PATH, None, None, headers)


def remove_request_header_url(header_name=None, headers=None) -> str:
    """Build the URL that removes one request header, or every header in ``headers``."""
    return _remove_header_url(REMOVE_REQUEST_HEADER_PATH, header_name, headers)


def remove_request_headers_url(headers: Sequence[str]) -> str:
    """Shortcut: remove multiple request headers given as a list."""
    _require_sequence(headers)
    return _remove_header_url(REMOVE_REQUEST_HEADER_PATH, None, headers)


# ============================================================================
# Response headers
# ============================================================================

def add_response_header_url(header_name=None, header_value=None, headers=None) -> str:
    """Build the URL that adds one or more response headers. See add_request_header_url."""
    return _add_header_url(ADD_RESPONSE_HEADER_PATH, header_name, header_value, headers)


def add_response_headers_url(headers: Mapping[str, str]) -> str:
    _require_mapping(headers)
    return _add_header_url(ADD_RESPONSE_HEADER_PATH, None, None, headers)


def remove_response_header_url(header_name=None, headers=None) -> str:
    return _remove_header_url(REMOVE_RESPONSE_HEADER_PATH, header_name, headers)


def remove_response_headers_url(headers: Sequence[str]) -> str:
    _require_sequence(headers)
    return _remove_header_url(REMOVE_RESPONSE_HEADER_PATH, None, headers)


__all__ = [
    "add_request_header_url",
    "add_request_headers_url",
    "remove_request_header_url",
    "remove_request_headers_url",
    "add_response_header_url",
    "add_response_headers_url",
    "remove_response_header_url",
    "remove_response_headers_url",
]
