"""
value_types.py

Decoders for values the API transports as JSON strings: arbitrary-precision
integers (token balances, wei amounts) and `YYYY-MM-DD` dates. Empty and null
values decode to None; a non-empty value that cannot be parsed is an error.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

DATE_FORMAT = "%Y-%m-%d"


def parse_big_int(value: Any) -> Optional[int]:
    """
    Decodes an arbitrary-precision integer.

    :param value: A base-10 string, an int, an empty string or None.
    :return: The integer, or None for empty/null input.
    :raises ValueError: If the value is not a base-10 integer.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"cannot set big int value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            return int(text)
    raise ValueError(f"cannot set big int value: {value!r}")


def parse_date(value: Any) -> Optional[datetime]:
    """
    Decodes a `YYYY-MM-DD` date to UTC midnight.

    :param value: The date string, an empty string, "null" or None.
    :return: A timezone-aware datetime, or None for empty/null input.
    :raises ValueError: If the string does not match `YYYY-MM-DD`.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip('"')
    if text in ("", "null"):
        return None
    return datetime.strptime(text, DATE_FORMAT).replace(tzinfo=timezone.utc)


def _format_big_int(value: Optional[int]) -> Optional[str]:
    return None if value is None else str(value)


def _format_date(value: Optional[datetime]) -> Optional[str]:
    return None if value is None else value.strftime(DATE_FORMAT)


BigInt = Annotated[
    Optional[int],
    BeforeValidator(parse_big_int),
    PlainSerializer(_format_big_int, return_type=Optional[str]),
]

CustomDate = Annotated[
    Optional[datetime],
    BeforeValidator(parse_date),
    PlainSerializer(_format_date, return_type=Optional[str]),
]
