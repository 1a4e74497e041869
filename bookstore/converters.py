# bookstore/converters.py
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional
from .errors import ConversionError

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ID_RE = re.compile(r"^[+-]?\d+$")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def optional_text(value: str) -> Optional[str]:
    """An empty wire string means the value is absent."""
    return value if value != "" else None


def to_price(value: float) -> Decimal:
    """Convert a wire float to a two-place decimal.

    The float is first formatted with exactly two fractional digits so the
    stored value never picks up binary rounding noise (12.5 -> "12.50").
    """
    try:
        price = Decimal(f"{value:.2f}")
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ConversionError(f"cannot convert {value!r} to a price") from exc
    if not price.is_finite():
        raise ConversionError(f"cannot convert {value!r} to a price")
    return price


def to_date(value: str) -> date:
    if not _DATE_RE.match(value):
        raise ConversionError(f"{value!r} is not a YYYY-MM-DD date")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise ConversionError(f"{value!r} is not a YYYY-MM-DD date") from exc


def parse_id(value: str) -> int:
    if not _ID_RE.match(value):
        raise ConversionError(f"{value!r} is not an integer ID")
    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise ConversionError(f"{value!r} is out of range")
    return parsed
