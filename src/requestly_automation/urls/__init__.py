"""URL builders for the automation endpoint."""

from .encoding import build_query_string, encode_component
from .validation import validate_header, validate_param
from .headers import (
    add_request_header_url,
    add_request_headers_url,
    remove_request_header_url,
    remove_request_headers_url,
    add_response_header_url,
    add_response_headers_url,
    remove_response_header_url,
    remove_response_headers_url,
)
from .query_params import (
    modify_query_param_url,
    modify_query_params_url,
    remove_query_param_url,
    remove_query_params_url,
)
from .rules import import_rules

__all__ = [
    "build_query_string",
    "encode_component",
    "validate_header",
    "validate_param",
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
]
