"""Identifier prefixes, formats and generation of the next free identifier."""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional

ID_PREFIXES = {
    "Doctor": "BS",
    "Nurse": "YT",
    "Receptionist": "TT",
    "Department": "DEPT",
    "Patient": "BN",
    "Medicine": "ME",
    "TestService": "CLS",
    "RoomExamination": "PHG",
    "MedicineUsage": "MEUSE",
    "ClinicalTest": "CLSUSE",
    "MedicalRecord": "HS",
}

_CONVERSION = re.compile(r"%%|%([-+ #0]*)(\d*)d")
_NUMBER = re.compile(r"[+-]?\d+")


def _kind_name(kind: Any) -> str:
    if isinstance(kind, str):
        return kind
    if isinstance(kind, type):
        return kind.__name__
    return type(kind).__name__


def id_prefix(kind: Any) -> str:
    """Identifier prefix for an entity kind given by name, class or instance."""
    name = _kind_name(kind)
    try:
        return ID_PREFIXES[name]
    except KeyError:
        raise ValueError(f"no identifier prefix for {name!r}") from None


def id_format(kind: Any) -> str:
    """printf-style identifier format for an entity kind."""
    return id_prefix(kind) + "-%03d"


def _split_format(fmt: str) -> tuple[str, Optional[int]]:
    """Literal text before the integer conversion and the conversion's width."""
    for match in _CONVERSION.finditer(fmt):
        if match.group(0) == "%%":
            continue
        prefix = fmt[: match.start()].replace("%%", "%")
        width = int(match.group(2)) if match.group(2) else None
        return prefix, width
    raise ValueError(f"format {fmt!r} has no integer conversion")


def _scan_number(text: str, prefix: str, width: Optional[int]) -> Optional[int]:
    if not text.startswith(prefix):
        return None
    rest = text[len(prefix):].lstrip()
    if width:
        rest = rest[:width]
    match = _NUMBER.match(rest)
    return int(match.group()) if match else None


def create_id(items: Iterable[Any], fmt: str, start_at: int = 1) -> str:
    """The first identifier in ``fmt`` not taken by the ids of ``items``.

    Numbers are read from each id by ``fmt``; ids that do not fit are ignored.
    Counting starts at ``start_at`` and stops at the first gap.
    """
    prefix, width = _split_format(fmt)
    numbers = sorted(
        number
        for item in items
        if (number := _scan_number(item.id, prefix, width)) is not None
    )
    previous = start_at - 1
    for current in numbers:
        if current - previous > 1:
            break
        previous = current
    return fmt % (previous + 1)


def three_way_compare(a: Any, b: Any) -> int:
    """0 when equal, -1 when ``a`` is less, 1 otherwise."""
    if a == b:
        return 0
    return -1 if a < b else 1