"""Canonical forms for weekday availability and fixed cashier slots.

The same functions run when employees are persisted and when a schedule is
generated, so stored data always matches what the generator sees.
Weekdays use 0 = Sunday ... 6 = Saturday.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from dienstplan.services.shifts import is_cashier_shift_id


@dataclass(frozen=True)
class FixedSlot:
    """A recurring (weekday, cashier shift id) commitment."""

    weekday: int
    shift_id: str

    def as_dict(self) -> dict[str, Any]:
        return {"weekday": self.weekday, "shiftId": self.shift_id}


def clamp_weekday(value: Any) -> int | None:
    """Map *value* into 0..6, or return ``None`` when it is not a finite number."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value % 7
    try:
        numeric = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(numeric):
        return None
    return math.trunc(numeric) % 7


def normalize_weekdays(values: Iterable[Any]) -> list[int]:
    normalized: set[int] = set()
    for value in values:
        weekday = clamp_weekday(value)
        if weekday is not None:
            normalized.add(weekday)
    return sorted(normalized)


def _coerce_slot(raw: Any) -> FixedSlot | None:
    if isinstance(raw, FixedSlot):
        weekday_raw, shift_id = raw.weekday, raw.shift_id
    elif isinstance(raw, Mapping):
        weekday_raw = raw.get("weekday")
        shift_id = raw.get("shiftId", raw.get("shift_id"))
    elif hasattr(raw, "weekday") and hasattr(raw, "shift_id"):
        weekday_raw, shift_id = raw.weekday, raw.shift_id
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        weekday_raw, shift_id = raw
    else:
        return None

    weekday = clamp_weekday(weekday_raw)
    if weekday is None or not is_cashier_shift_id(shift_id):
        return None
    return FixedSlot(weekday=weekday, shift_id=shift_id)


def normalize_fixed_slots(slots: Iterable[Any]) -> list[FixedSlot]:
    """Drop malformed or unknown slots and collapse duplicate (weekday, shift id) pairs."""

    normalized: list[FixedSlot] = []
    seen: set[FixedSlot] = set()
    for raw in slots:
        slot = _coerce_slot(raw)
        if slot is None or slot in seen:
            continue
        seen.add(slot)
        normalized.append(slot)
    return normalized


def _load_list(value: Any) -> list[Any]:
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            return []
        return parsed if isinstance(parsed, list) else []
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def parse_stored_weekdays(value: Any) -> list[int]:
    """Read weekdays stored either as a JSON string or as a list."""

    return normalize_weekdays(_load_list(value))


def parse_stored_fixed_slots(value: Any) -> list[FixedSlot]:
    return normalize_fixed_slots(_load_list(value))


__all__ = [
    "FixedSlot",
    "clamp_weekday",
    "normalize_fixed_slots",
    "normalize_weekdays",
    "parse_stored_fixed_slots",
    "parse_stored_weekdays",
]
