"""Wire encoding of option values.

GitLab reads arrays and hashes from the query string with the Rails bracket
convention:

- ``ids[]=1&ids[]=2`` for arrays
- ``allowed_to_push[user_id]=5`` for hashes
- ``variables[0][key]=VAR1`` for arrays of hashes
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union
from urllib.parse import quote

from ..models.errors import UnsupportedOptionValueError

JSONValue = Union[
    str, int, float, bool, None, List["JSONValue"], Dict[str, "JSONValue"]
]

QueryItem = Tuple[str, str]


def encode_scalar(key: str, value: Any) -> str:
    """Return the query string form of a single primitive value.

    Args:
        key: The option key, used for error reporting.
        value: The value to encode.

    Returns:
        str: The textual wire form of the value.

    Raises:
        UnsupportedOptionValueError: If the value is not a primitive.
    """
    # bool before int, datetime before date: both are subclasses
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return encode_scalar(key, value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (
            value.astimezone(timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    if isinstance(value, (str, int, float)):
        return str(value)
    encoded_value = getattr(value, "encoded_value", None)
    if isinstance(encoded_value, str):
        return encoded_value
    raise UnsupportedOptionValueError(key, value)


def _encode_hash(name: str, key: str, value: Mapping[str, Any]) -> List[QueryItem]:
    return [
        (f"{name}[{inner_key}]", encode_scalar(key, inner_value))
        for inner_key, inner_value in value.items()
        if inner_value is not None
    ]


def encode_query_items(key: str, value: Any) -> List[QueryItem]:
    """Encode an option value into the query items it contributes.

    Args:
        key: The option key.
        value: The option value; ``None`` contributes nothing.

    Returns:
        List[QueryItem]: Ordered ``(name, value)`` pairs.
    """
    if value is None:
        return []

    if isinstance(value, Mapping):
        return _encode_hash(key, key, value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if all(isinstance(item, Mapping) for item in value):
            items: List[QueryItem] = []
            for index, item in enumerate(value):
                items.extend(_encode_hash(f"{key}[{index}]", key, item))
            return items
        if any(isinstance(item, Mapping) for item in value):
            raise UnsupportedOptionValueError(key, value)
        return [(f"{key}[]", encode_scalar(key, item)) for item in value]

    return [(key, encode_scalar(key, value))]


def encode_query_string(query_items: Sequence[QueryItem]) -> str:
    """Join query items into a query string.

    Brackets in names are kept literal so array and hash parameters reach the
    server exactly as ``key[]`` and ``key[inner]``.
    """
    return "&".join(
        f"{quote(name, safe='[]')}={quote(value, safe='')}"
        for name, value in query_items
    )
