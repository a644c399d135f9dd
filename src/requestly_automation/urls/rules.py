"""Rule import URL."""

from ..constants import AUTOMATION_BASE_URL, API_KEY_PARAM
from ..errors import InvalidArgumentError
from .encoding import encode_pair
from .validation import require_encodable


def import_rules(api_key: str) -> str:
    """
    Get the URL that imports the rules shared under an API key.

    Raises:
        InvalidArgumentError: if api_key is missing, empty, or not a string
    """
    if not api_key or not isinstance(api_key, str):
        raise InvalidArgumentError("api_key parameter is required and must be a string")
    require_encodable(api_key, "api_key")
    return f"{AUTOMATION_BASE_URL}?{encode_pair(API_KEY_PARAM, api_key)}"


__all__ = ["import_rules"]
