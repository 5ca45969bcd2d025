from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .errors import MalformedRecordError
from .models import Entry


def _parse_int(value: Any, raw: object) -> int:
    if isinstance(value, bool):
        raise MalformedRecordError(raw, "power must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise MalformedRecordError(raw, f"power {value!r} is not an integer") from None


def parse_record(line: str) -> Tuple[str, int]:
    """Parse ``name power`` or ``name rank power`` from one input line.

    A typed rank is accepted for compatibility and discarded; the rank is
    always derived from power.
    """
    tokens = line.split()
    if len(tokens) not in (2, 3):
        raise MalformedRecordError(line, "expected 'username power'")
    return tokens[0], _parse_int(tokens[-1], line)


def parse_menu_choice(line: str) -> Optional[int]:
    """Menu number, or None when the input is not an integer."""
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _first_present(record: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        val = record.get(key)
        if val is not None and val != "":
            return val
    return None


def entry_from_mapping(record: Dict[str, Any]) -> Entry:
    if not isinstance(record, dict):
        raise MalformedRecordError(record, "expected an object")
    name = _first_present(record, ("name", "username"))
    power = _first_present(record, ("score", "power"))
    if name is None:
        raise MalformedRecordError(record, "missing name")
    if power is None:
        raise MalformedRecordError(record, "missing power")
    return Entry(name=str(name), score=_parse_int(power, record))
