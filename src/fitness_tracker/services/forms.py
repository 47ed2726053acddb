"""Helpers for reading submitted form payloads."""

import math
from collections.abc import Iterable, Mapping


def is_blank(value: object) -> bool:
    """Return True when a form value was left empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_number(value: object) -> float | None:
    """Parse a numeric form value, returning None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def find_missing(
    payload: Mapping[str, object],
    text_fields: Iterable[str] = (),
    number_fields: Iterable[str] = (),
) -> list[str]:
    """Return required fields that are empty, or not numbers where one is needed."""
    missing = [name for name in text_fields if is_blank(payload.get(name))]
    for name in number_fields:
        value = payload.get(name)
        if is_blank(value) or parse_number(value) is None:
            missing.append(name)
    return missing


def optional_number(payload: Mapping[str, object], name: str) -> float | None:
    """Return an optional numeric field, or None when it was left empty."""
    value = payload.get(name)
    if is_blank(value):
        return None
    return parse_number(value)
