from __future__ import annotations

import math
import re
from enum import Enum
from typing import Optional, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_prefix(value) -> Optional[int]:
    """Parse the leading integer of a form value ("12", " 7 ", "12.5" -> 12).

    Returns None when the value does not start with digits.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def require_int_in_range(value, *, min_value: int, max_value: int, invalid_message: str, range_message: str) -> int:
    parsed = parse_int_prefix(value)
    if parsed is None:
        raise ValidationError(invalid_message)
    if parsed < min_value or parsed > max_value:
        raise ValidationError(range_message)
    return parsed


def require_choice(value, enum_cls: type[E], message: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if value is None or not str(value).strip():
        raise ValidationError(message)
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        raise ValidationError(message) from None


def as_bool(value) -> bool:
    """Interpret checkbox-style values coming from JSON or form bodies."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def optional_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
