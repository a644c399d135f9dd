"""Query-string encoding for automation URLs."""

from typing import Iterable, Mapping, Tuple
from urllib.parse import quote

from ..constants import AUTOMATION_BASE_URL


# Characters left as-is by URI-component encoding besides ASCII letters,
# digits and "-_.~" (which quote() never escapes).
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode one query key or value (UTF-8, space -> %20)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def encode_pair(key: str, value: str) -> str:
    return f"{encode_component(key)}={encode_component(value)}"


def build_query_string(entries: Mapping[str, str]) -> str:
    """
    Build ``k1=v1&k2=v2`` from a mapping, encoding every key and value independently.

    Entries keep the mapping's iteration order.
    """
    return encode_pairs(entries.items())


def encode_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    return "&".join(encode_pair(key, value) for key, value in pairs)


def build_repeated_query(key: str, values: Iterable[str]) -> str:
    """Build ``key=v1&key=v2``: the key is repeated once per value, no bracket notation."""
    return encode_pairs((key, value) for value in values)


def automation_url(path: str, query: str) -> str:
    """Join the fixed automation host, an operation path and an encoded query."""
    return f"{AUTOMATION_BASE_URL}{path}?{query}"


__all__ = [
    "encode_component",
    "encode_pair",
    "encode_pairs",
    "build_query_string",
    "build_repeated_query",
    "automation_url",
]
