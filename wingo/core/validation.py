import re
from typing import Any

from wingo.core.models import DrawRecord
from wingo.errors import DataShapeError

def is_valid_period(s: Any) -> bool:
    return bool(re.fullmatch(r"\d+", str(s) if s is not None else ""))

def parse_number(value: Any) -> int:
    # leading integer, so "7", 7 and 7.0 all read as 7
    m = re.match(r"\s*([+-]?\d+)", str(value)) if value is not None else None
    if not m or int(m.group(1)) < 0:
        raise DataShapeError(f"Invalid draw number: {value!r}")
    return int(m.group(1))

def parse_history(payload: Any) -> list[DrawRecord]:
    """Turn the upstream ``{data: {list: [...]}}`` payload into draws, oldest first.

    Upstream delivers newest first. Labels are always derived from ``number``.
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    items = data.get("list") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise DataShapeError("Invalid data structure received")

    out = []
    for item in items:
        if not isinstance(item, dict):
            raise DataShapeError("Invalid data structure received")
        period = item.get("issueNo") or item.get("issue")
        if not is_valid_period(period):
            raise DataShapeError(f"Invalid period identifier: {period!r}")
        out.append(DrawRecord(period=str(period), number=parse_number(item.get("number"))))
    out.reverse()
    return out
