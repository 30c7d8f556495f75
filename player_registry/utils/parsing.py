"""
Utils: parsing.py
Role:
- Turn raw caller input (query strings, form values, floats) into the whole
  numbers the player service works with.

Behaviour:
- `parse_player_id` accepts an int or a base-10 integer string, nothing else.
- `parse_points` additionally truncates finite floats toward zero (1.5 -> 1).
- Malformed input raises `FormatError` before any service call is made.
"""
import math
from typing import Any


class FormatError(ValueError):
    """Raised when caller input is not a well-formed whole number."""


def _parse_int_text(value: str, what: str) -> int:
    text = value.strip()
    try:
        return int(text, 10)
    except ValueError as exc:
        raise FormatError(f"invalid {what}: {value!r}") from exc


def parse_player_id(value: Any) -> int:
    """Return `value` as a player id, or raise FormatError."""
    if isinstance(value, bool):
        raise FormatError(f"invalid player id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _parse_int_text(value, "player id")
    raise FormatError(f"invalid player id: {value!r}")


def parse_points(value: Any) -> int:
    """Return `value` as a whole points amount, truncating fractional floats."""
    if isinstance(value, bool):
        raise FormatError(f"invalid points amount: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise FormatError(f"invalid points amount: {value!r}")
        return int(value)
    if isinstance(value, str):
        return _parse_int_text(value, "points amount")
    raise FormatError(f"invalid points amount: {value!r}")
