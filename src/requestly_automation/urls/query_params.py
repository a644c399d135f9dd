"""Automation URLs for modifying and removing query parameters."""

from typing import Mapping, Optional, Sequence

from ..constants import MODIFY_QUERY_PARAM_PATH, REMOVE_QUERY_PARAM_PATH, REMOVE_PARAM_KEY
from ..errors import InvalidArgumentError
from .encoding import automation_url, build_query_string, build_repeated_query, encode_pair
from .validation import (
    is_mapping,
    is_sequence,
    validate_param,
    validate_param_name,
    validate_entries,
    validate_names,
)


def modify_query_param_url(
    param_name: Optional[str] = None,
    param_value: Optional[str] = None,
    params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build the URL that adds or modifies query parameters.

    Args:
        param_name: Name of the parameter to add/modify
        param_value: Value of the parameter (may be empty)
        params: Mapping of several parameters; used exclusively when given

    Returns:
        The automation URL, e.g. ``.../modify-query-param?a=b``

    Raises:
        InvalidArgumentError: if neither form is provided or any entry is invalid
    """
    if params is not None and is_mapping(params):
        validate_entries(params, validate_param)
        query = build_query_string(params)
    elif param_name is not None and param_value is not None:
        validate_param(param_name, param_value)
        query = encode_pair(param_name, param_value)
    else:
        raise InvalidArgumentError("Provide either params mapping or param_name and param_value")
    return automation_url(MODIFY_QUERY_PARAM_PATH, query)


def modify_query_params_url(params: Mapping[str, str]) -> str:
    """Shortcut: add/modify multiple query parameters from a mapping.

    Lists, strings and None are rejected.
    """
    if params is None or not is_mapping(params):
        raise InvalidArgumentError("params parameter is required and must be a mapping")
    return modify_query_param_url(None, None, params)


def remove_query_param_url(param_name: Optional[str] = None, params: Optional[Sequence[str]] = None) -> str:
    """
    Build the URL that removes query parameters.

    Args:
        param_name: Name of the parameter to remove
        params: List of parameter names to remove; must not be empty

    Raises:
        InvalidArgumentError: if neither form is provided, the list is empty,
            or a name is not a non-empty string
    """
    if params is not None and is_sequence(params):
        if len(params) == 0:
            raise InvalidArgumentError("params array cannot be empty")
        validate_names(params, validate_param_name)
        query = build_repeated_query(REMOVE_PARAM_KEY, params)
    elif param_name is not None:
        validate_param_name(param_name)
        query = build_repeated_query(REMOVE_PARAM_KEY, [param_name])
    else:
        raise InvalidArgumentError("Provide either param_name or params list")
    return automation_url(REMOVE_QUERY_PARAM_PATH, query)


def remove_query_params_url(params: Sequence[str]) -> str:
    """Shortcut: remove multiple query parameters given as a list."""
    if not is_sequence(params):
        raise InvalidArgumentError("params parameter must be a list")
    return remove_query_param_url(None, params)


__all__ = [
    "modify_query_param_url",
    "modify_query_params_url",
    "remove_query_param_url",
    "remove_query_params_url",
]
