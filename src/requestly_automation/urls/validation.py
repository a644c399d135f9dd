"""Input validation shared by the URL builders.

Every check raises InvalidArgumentError and has no side effects.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Iterable

from ..errors import InvalidArgumentError


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True for list-like containers. Strings and bytes are not name sequences."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def require_encodable(text: str, label: str) -> None:
    """Reject strings that have no UTF-8 form (lone surrogates) before encoding."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidArgumentError(f"{label} must be valid UTF-8 text") from None


def validate_header(name: Any, value: Any) -> bool:
    """
    Validate a header name and value.

    Raises:
        InvalidArgumentError: name is empty or not a string, or value is not a string
    """
    validate_header_name(name)
    if not isinstance(value, str):
        raise InvalidArgumentError("Header value must be a string")
    require_encodable(value, "Header value")
    return True


def validate_header_name(name: Any) -> bool:
    if not _is_non_empty_string(name):
        raise InvalidArgumentError("Header name must be a non-empty string")
    require_encodable(name, "Header name")
    return True


def validate_param(name: Any, value: Any) -> bool:
    """Same contract as validate_header, with query-parameter wording."""
    validate_param_name(name)
    if not isinstance(value, str):
        raise InvalidArgumentError("Parameter value must be a string")
    require_encodable(value, "Parameter value")
    return True


def validate_param_name(name: Any) -> bool:
    if not _is_non_empty_string(name):
        raise InvalidArgumentError("Parameter name must be a non-empty string")
    require_encodable(name, "Parameter name")
    return True


def validate_entries(entries: Mapping, validator) -> None:
    """Run a (name, value) validator over a mapping; the first invalid entry raises."""
    for name, value in entries.items():
        validator(name, value)


def validate_names(names: Iterable, validator) -> None:
    for name in names:
        validator(name)


__all__ = [
    "is_mapping",
    "is_sequence",
    "require_encodable",
    "validate_header",
    "validate_header_name",
    "validate_param",
    "validate_param_name",
    "validate_entries",
    "validate_names",
]
