from __future__ import annotations

import datetime
import json
from typing import Any

from .kinds import Pattern, pattern_source


def to_jsonable(value: Any) -> Any:
    """Fallback encoder for json.dumps: dates, patterns and sets."""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return value.total_seconds()
    if isinstance(value, Pattern):
        return pattern_source(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


def show_result(result: Any) -> str:
    """Render a demo result: containers as indented JSON, anything else with str()."""
    if isinstance(result, (dict, list, tuple)):
        return json.dumps(result, indent=2, ensure_ascii=False, default=to_jsonable)
    return str(result)
